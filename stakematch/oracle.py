"""Oracle contract: stores verified match results submitted by a trusted admin."""

from __future__ import annotations

from stakematch.errors import AlreadyInitializedError, OracleError, OracleErrorCode
from stakematch.ledger import MATCH_TTL_LEDGERS, Env, Storage
from stakematch.types import MatchResult, ResultEntry

_ADMIN = "Admin"


def _result_key(match_id: int) -> tuple:
    return ("Result", match_id)


class OracleContract:
    """Records match results on the ledger, one per match id."""

    def __init__(self, env: Env):
        self.env = env
        self.address = env.generate_address()
        self._instance = Storage()
        self._persistent = Storage()

    def initialize(self, admin):
        """Set the trusted admin (the off-chain oracle service)."""
        if self._instance.has(_ADMIN):
            raise AlreadyInitializedError()
        self._instance.set(_ADMIN, admin)

    def submit_result(self, match_id, game_id, result: MatchResult):
        """Store a verified result; the admin must authorize the call."""
        admin = self._instance.get(_ADMIN)
        if admin is None:
            raise OracleError(OracleErrorCode.UNAUTHORIZED)
        self.env.require_auth(admin)

        key = _result_key(match_id)
        if self._persistent.has(key):
            raise OracleError(OracleErrorCode.ALREADY_SUBMITTED)

        self._persistent.set(key, ResultEntry(game_id=game_id, result=result))
        self._persistent.extend_ttl(key, MATCH_TTL_LEDGERS, MATCH_TTL_LEDGERS)
        self.env.publish(("oracle", "result"), (match_id, result))

    def get_result(self, match_id) -> ResultEntry:
        """Return the stored result for a match."""
        entry = self._persistent.get(_result_key(match_id))
        if entry is None:
            raise OracleError(OracleErrorCode.RESULT_NOT_FOUND)
        return entry

    def has_result(self, match_id) -> bool:
        """Whether a result has been submitted for a match."""
        return self._persistent.has(_result_key(match_id))

    def result_ttl(self, match_id) -> int:
        """Remaining time to live of a stored result."""
        return self._persistent.get_ttl(_result_key(match_id))