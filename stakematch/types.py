"""Data types shared by the escrow and oracle contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MatchState(Enum):
    """Lifecycle of an escrowed match."""

    PENDING = "pending"  # created, awaiting deposits
    ACTIVE = "active"  # both players deposited, game in progress
    COMPLETED = "completed"  # result submitted, payout executed
    CANCELLED = "cancelled"  # cancelled before activation


class Platform(Enum):
    """Chess platform on which the game is played."""

    LICHESS = "lichess"
    CHESS_DOT_COM = "chess_dot_com"


class Winner(Enum):
    """Outcome reported to the escrow contract."""

    PLAYER1 = "player1"
    PLAYER2 = "player2"
    DRAW = "draw"


@dataclass
class Match:
    """A staked match between two players."""

    id: int
    player1: str
    player2: str
    stake_amount: int
    token: str
    game_id: str
    platform: Platform
    state: MatchState = MatchState.PENDING
    player1_deposited: bool = False
    player2_deposited: bool = False

    def is_funded(self) -> bool:
        """Whether both players have deposited their stake."""
        return self.player1_deposited and self.player2_deposited

    def escrow_balance(self) -> int:
        """Total held for this match: zero, one or two stakes."""
        deposits = int(self.player1_deposited) + int(self.player2_deposited)
        return deposits * self.stake_amount


class MatchResult(Enum):
    """Outcome recorded by the oracle contract."""

    PLAYER1_WINS = "player1_wins"
    PLAYER2_WINS = "player2_wins"
    DRAW = "draw"


@dataclass(frozen=True)
class ResultEntry:
    """A verified result stored by the oracle."""

    game_id: str
    result: MatchResult