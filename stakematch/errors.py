"""Error types raised by the escrow and oracle contracts and their runtime."""

from __future__ import annotations

from enum import IntEnum


class EscrowErrorCode(IntEnum):
    """Numeric error codes reported by the escrow contract."""

    MATCH_NOT_FOUND = 1
    ALREADY_FUNDED = 2
    NOT_FUNDED = 3
    UNAUTHORIZED = 4
    INVALID_STATE = 5
    ALREADY_EXISTS = 6
    ALREADY_INITIALIZED = 7
    OVERFLOW = 8
    CONTRACT_PAUSED = 9
    INVALID_AMOUNT = 10


class OracleErrorCode(IntEnum):
    """Numeric error codes reported by the oracle contract."""

    UNAUTHORIZED = 1
    ALREADY_SUBMITTED = 2
    RESULT_NOT_FOUND = 3
    ALREADY_INITIALIZED = 4


class ContractError(Exception):
    """A recoverable error reported by a contract, identified by a numeric code."""

    codes: type = int

    def __init__(self, code):
        self.code = self.codes(code)
        super().__init__(f"Error(Contract, #{int(self.code)})")


class EscrowError(ContractError):
    """An error reported by the escrow contract."""

    codes = EscrowErrorCode


class OracleError(ContractError):
    """An error reported by the oracle contract."""

    codes = OracleErrorCode


class AlreadyInitializedError(RuntimeError):
    """Raised when a contract is initialized a second time."""

    def __init__(self, message: str = "Contract already initialized"):
        super().__init__(message)


class AuthError(PermissionError):
    """Raised when an address has not authorized the call that needs it."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"authorization required for {address}")


class InsufficientBalanceError(ValueError):
    """Raised when a token transfer exceeds the sender's balance."""

    def __init__(self, owner: str, balance: int, amount: int):
        self.owner = owner
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"balance of {owner} is {balance}, cannot transfer {amount}"
        )