"""Escrow contract: holds both players' stakes and pays out on the oracle's result."""

from __future__ import annotations

from dataclasses import replace

from stakematch.errors import AlreadyInitializedError, EscrowError, EscrowErrorCode
from stakematch.ledger import MATCH_TTL_LEDGERS, Env, Storage
from stakematch.types import Match, MatchState, Platform, Winner

_ORACLE = "Oracle"
_ADMIN = "Admin"
_MATCH_COUNT = "MatchCount"
_PAUSED = "Paused"

_U64_MAX = 2**64 - 1


def _match_key(match_id: int) -> tuple:
    return ("Match", match_id)


class EscrowContract:
    """Escrows equal stakes from two players and settles the match."""

    def __init__(self, env: Env):
        self.env = env
        self.address = env.generate_address()
        self._instance = Storage()
        self._persistent = Storage()

    # -- administration -------------------------------------------------

    def initialize(self, oracle, admin):
        """Set the trusted oracle and the admin; allowed only once."""
        if self._instance.has(_ORACLE):
            raise AlreadyInitializedError()
        self._instance.set(_ORACLE, oracle)
        self._instance.set(_ADMIN, admin)
        self._instance.set(_MATCH_COUNT, 0)
        self._instance.set(_PAUSED, False)

    def _require_admin(self):
        admin = self._instance.get(_ADMIN)
        if admin is None:
            raise EscrowError(EscrowErrorCode.UNAUTHORIZED)
        self.env.require_auth(admin)

    def pause(self):
        """Block match creation, deposits and result submission (admin only)."""
        self._require_admin()
        self._instance.set(_PAUSED, True)

    def unpause(self):
        """Lift a pause (admin only)."""
        self._require_admin()
        self._instance.set(_PAUSED, False)

    def _ensure_not_paused(self):
        if self._instance.get(_PAUSED, False):
            raise EscrowError(EscrowErrorCode.CONTRACT_PAUSED)

    # -- storage helpers ------------------------------------------------

    def _load(self, match_id) -> Match:
        m = self._persistent.get(_match_key(match_id))
        if m is None:
            raise EscrowError(EscrowErrorCode.MATCH_NOT_FOUND)
        return m

    def _store(self, m: Match):
        key = _match_key(m.id)
        self._persistent.set(key, m)
        self._persistent.extend_ttl(key, MATCH_TTL_LEDGERS, MATCH_TTL_LEDGERS)

    # -- match lifecycle ------------------------------------------------

    def create_match(
        self,
        player1,
        player2,
        stake_amount,
        token,
        game_id,
        platform: Platform,
    ) -> int:
        """Create a pending match and return its id; player1 must authorize."""
        self.env.require_auth(player1)
        self._ensure_not_paused()
        if stake_amount <= 0:
            raise EscrowError(EscrowErrorCode.INVALID_AMOUNT)

        match_id = self._instance.get(_MATCH_COUNT, 0)
        if self._persistent.has(_match_key(match_id)):
            raise EscrowError(EscrowErrorCode.ALREADY_EXISTS)
        if match_id >= _U64_MAX:
            raise EscrowError(EscrowErrorCode.OVERFLOW)

        m = Match(
            id=match_id,
            player1=player1,
            player2=player2,
            stake_amount=stake_amount,
            token=token,
            game_id=game_id,
            platform=platform,
        )
        self._store(m)
        self._instance.set(_MATCH_COUNT, match_id + 1)

        self.env.publish(
            ("match", "created"), (match_id, player1, player2, stake_amount)
        )
        return match_id

    def deposit(self, match_id, player):
        """Move the player's stake into escrow; activates the match once both paid."""
        self.env.require_auth(player)
        self._ensure_not_paused()

        m = self._load(match_id)
        if m.state is not MatchState.PENDING:
            raise EscrowError(EscrowErrorCode.INVALID_STATE)

        is_p1 = player == m.player1
        is_p2 = player == m.player2
        if not (is_p1 or is_p2):
            raise EscrowError(EscrowErrorCode.UNAUTHORIZED)
        if (is_p1 and m.player1_deposited) or (is_p2 and m.player2_deposited):
            raise EscrowError(EscrowErrorCode.ALREADY_FUNDED)

        self.env.token(m.token).transfer(player, self.address, m.stake_amount)

        if is_p1:
            m.player1_deposited = True
        else:
            m.player2_deposited = True

        if m.is_funded():
            m.state = MatchState.ACTIVE
            self.env.publish(("match", "activated"), match_id)

        self._store(m)

    def submit_result(self, match_id, winner: Winner, caller):
        """Settle an active match; only the oracle may call this."""
        self._ensure_not_paused()

        oracle = self._instance.get(_ORACLE)
        if oracle is None or caller != oracle:
            raise EscrowError(EscrowErrorCode.UNAUTHORIZED)
        self.env.require_auth(caller)

        m = self._load(match_id)
        if m.state is not MatchState.ACTIVE:
            raise EscrowError(EscrowErrorCode.INVALID_STATE)

        token = self.env.token(m.token)
        pot = m.stake_amount * 2
        if winner is Winner.PLAYER1:
            token.transfer(self.address, m.player1, pot)
        elif winner is Winner.PLAYER2:
            token.transfer(self.address, m.player2, pot)
        else:
            token.transfer(self.address, m.player1, m.stake_amount)
            token.transfer(self.address, m.player2, m.stake_amount)

        m.state = MatchState.COMPLETED
        self._store(m)
        self.env.publish(("match", "completed"), (match_id, winner))

    def cancel_match(self, match_id, caller):
        """Cancel a pending match and refund whatever was deposited."""
        m = self._load(match_id)
        if m.state is not MatchState.PENDING:
            raise EscrowError(EscrowErrorCode.INVALID_STATE)
        if caller != m.player1 and caller != m.player2:
            raise EscrowError(EscrowErrorCode.UNAUTHORIZED)
        self.env.require_auth(caller)

        token = self.env.token(m.token)
        if m.player1_deposited:
            token.transfer(self.address, m.player1, m.stake_amount)
        if m.player2_deposited:
            token.transfer(self.address, m.player2, m.stake_amount)

        m.state = MatchState.CANCELLED
        self._store(m)
        self.env.publish(("match", "cancelled"), match_id)

    # -- queries --------------------------------------------------------

    def get_match(self, match_id) -> Match:
        """Return a copy of the match with the given id."""
        return replace(self._load(match_id))

    def is_funded(self, match_id) -> bool:
        """Whether both players have deposited."""
        return self._load(match_id).is_funded()

    def get_escrow_balance(self, match_id) -> int:
        """Total escrowed for the match: zero, one or two stakes."""
        return self._load(match_id).escrow_balance()

    def match_ttl(self, match_id) -> int:
        """Remaining time to live of a stored match."""
        return self._persistent.get_ttl(_match_key(match_id))