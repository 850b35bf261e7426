import pytest

from stakematch.errors import (
    AlreadyInitializedError,
    AuthError,
    OracleError,
    OracleErrorCode,
)
from stakematch.ledger import MATCH_TTL_LEDGERS, Env
from stakematch.oracle import OracleContract
from stakematch.types import MatchResult


def _fresh(mock=True, initialize=True):
    env = Env()
    if mock:
        env.mock_all_auths()
    admin = env.generate_address()
    oracle = OracleContract(env)
    if initialize:
        oracle.initialize(admin)
    return env, admin, oracle


def _error_code(call, *args):
    with pytest.raises(OracleError) as info:
        call(*args)
    return info.value.code


@pytest.fixture
def contract():
    return _fresh()[2]


def test_submit_and_get_result(contract):
    contract.submit_result(0, "abc123", MatchResult.PLAYER1_WINS)
    assert contract.has_result(0)
    entry = contract.get_result(0)
    assert (entry.result, entry.game_id) == (MatchResult.PLAYER1_WINS, "abc123")


def test_submit_result_emits_event(contract):
    contract.submit_result(0, "abc123", MatchResult.PLAYER1_WINS)
    matched = contract.env.events_with_topics(("oracle", "result"))
    assert [event.data for event in matched] == [(0, MatchResult.PLAYER1_WINS)]


def test_duplicate_submit_fails(contract):
    contract.submit_result(0, "abc123", MatchResult.DRAW)
    code = _error_code(contract.submit_result, 0, "abc123", MatchResult.DRAW)
    assert code is OracleErrorCode.ALREADY_SUBMITTED


def test_double_initialize_fails():
    _, admin, oracle = _fresh()
    with pytest.raises(AlreadyInitializedError, match="Contract already initialized"):
        oracle.initialize(admin)


def test_ttl_extended_on_submit_result(contract):
    contract.submit_result(0, "abc123", MatchResult.PLAYER1_WINS)
    assert contract.result_ttl(0) == MATCH_TTL_LEDGERS


def test_missing_result_is_not_found(contract):
    assert contract.has_result(7) is False
    assert _error_code(contract.get_result, 7) is OracleErrorCode.RESULT_NOT_FOUND


def test_submit_before_initialize_is_unauthorized():
    _, _, oracle = _fresh(initialize=False)
    code = _error_code(oracle.submit_result, 0, "abc123", MatchResult.DRAW)
    assert code is OracleErrorCode.UNAUTHORIZED


def test_submit_requires_admin_authorization():
    env, admin, oracle = _fresh(mock=False)
    with pytest.raises(AuthError):
        oracle.submit_result(0, "abc123", MatchResult.DRAW)
    assert oracle.has_result(0) is False
    env.authorize(admin)
    oracle.submit_result(0, "abc123", MatchResult.PLAYER2_WINS)
    assert oracle.get_result(0).result is MatchResult.PLAYER2_WINS


def test_results_are_kept_per_match(contract):
    contract.submit_result(0, "g0", MatchResult.DRAW)
    contract.submit_result(1, "g1", MatchResult.PLAYER2_WINS)
    assert contract.get_result(0).result is MatchResult.DRAW
    assert contract.get_result(1).game_id == "g1"