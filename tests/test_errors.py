import pytest

from stakematch.errors import (
    AlreadyInitializedError,
    AuthError,
    ContractError,
    EscrowError,
    EscrowErrorCode,
    InsufficientBalanceError,
    OracleError,
    OracleErrorCode,
)


def test_escrow_error_message_matches_contract_format():
    err = EscrowError(EscrowErrorCode.INVALID_AMOUNT)
    assert str(err) == "Error(Contract, #10)"


def test_escrow_unauthorized_message():
    err = EscrowError(EscrowErrorCode.UNAUTHORIZED)
    assert str(err) == "Error(Contract, #4)"


def test_escrow_error_coerces_integer_code():
    err = EscrowError(int(EscrowErrorCode.MATCH_NOT_FOUND))
    assert err.code is EscrowErrorCode.MATCH_NOT_FOUND


def test_oracle_error_coerces_integer_code():
    err = OracleError(int(OracleErrorCode.RESULT_NOT_FOUND))
    assert err.code is OracleErrorCode.RESULT_NOT_FOUND


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError):
        OracleError(99)


def test_subclasses_are_caught_as_contract_error():
    err = OracleError(2)
    assert isinstance(err, ContractError)
    assert err.code is OracleErrorCode.ALREADY_SUBMITTED
    assert str(err) == "Error(Contract, #2)"


def test_already_initialized_message():
    assert str(AlreadyInitializedError()) == "Contract already initialized"


def test_auth_error_keeps_address():
    err = AuthError("addr-1")
    assert err.address == "addr-1"
    assert "addr-1" in str(err)


def test_insufficient_balance_keeps_details():
    err = InsufficientBalanceError("addr-2", 900, 1000)
    assert (err.owner, err.balance, err.amount) == ("addr-2", 900, 1000)