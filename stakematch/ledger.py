"""An in-memory ledger: addresses, authorization, storage, tokens and events."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, Hashable

from stakematch.errors import AuthError, InsufficientBalanceError

# About 30 days at 5 seconds per ledger; used as both TTL threshold and extension.
MATCH_TTL_LEDGERS = 518_400

# TTL, in ledgers, that a newly written entry starts with.
MIN_ENTRY_TTL = 4_095


@dataclass(frozen=True)
class Event:
    """An event published by a contract."""

    topics: tuple
    data: Any


class Storage:
    """Key-value contract storage in which every entry carries a time to live."""

    def __init__(self):
        self.initial_ttl = MIN_ENTRY_TTL
        self._values: dict[Hashable, Any] = {}
        self._ttls: dict[Hashable, int] = {}

    def get(self, key, default=None):
        """Return the value stored under ``key``, or ``default``."""
        return self._values.get(key, default)

    def set(self, key, value):
        """Store ``value`` under ``key``; a new entry starts with the initial TTL."""
        self._values[key] = value
        self._ttls.setdefault(key, self.initial_ttl)

    def has(self, key):
        """Whether an entry exists under ``key``."""
        return key in self._values

    def extend_ttl(self, key, threshold, extend_to):
        """Raise the entry's TTL to ``extend_to`` when it is below ``threshold``."""
        if threshold > extend_to:
            raise ValueError("threshold must not exceed extend_to")
        if key not in self._values:
            raise KeyError(key)
        if self._ttls[key] < threshold:
            self._ttls[key] = extend_to

    def get_ttl(self, key):
        """Return the remaining TTL of the entry under ``key``."""
        if key not in self._values:
            raise KeyError(key)
        return self._ttls[key]


class Token:
    """A fungible token with balances held per address."""

    def __init__(self, address, admin):
        self.address = address
        self.admin = admin
        self._balances: dict[str, int] = {}

    def mint(self, to, amount):
        """Create ``amount`` new units in the account of ``to``."""
        if amount < 0:
            raise ValueError("mint amount must not be negative")
        self._balances[to] = self.balance(to) + amount

    def balance(self, owner):
        """Return the balance held by ``owner``."""
        return self._balances.get(owner, 0)

    def transfer(self, sender, recipient, amount):
        """Move ``amount`` units from ``sender`` to ``recipient``."""
        if amount < 0:
            raise ValueError("transfer amount must not be negative")
        available = self.balance(sender)
        if available < amount:
            raise InsufficientBalanceError(sender, available, amount)
        self._balances[sender] = available - amount
        self._balances[recipient] = self.balance(recipient) + amount


class Env:
    """The environment contracts run in: addresses, auth, tokens and events."""

    def __init__(self):
        self._counter = count(1)
        self._mock_all = False
        self._authorized: set[str] = set()
        self._tokens: dict[str, Token] = {}
        self.events: list[Event] = []

    def generate_address(self):
        """Return a fresh address unique within this environment."""
        return f"addr-{next(self._counter)}"

    def mock_all_auths(self):
        """Treat every address as having authorized every call."""
        self._mock_all = True

    def authorize(self, address):
        """Record that ``address`` has authorized the calls made on its behalf."""
        self._authorized.add(address)

    def require_auth(self, address):
        """Raise AuthError unless ``address`` has authorized the call."""
        if not self._mock_all and address not in self._authorized:
            raise AuthError(address)

    def publish(self, topics, data):
        """Record an event with the given topics and data."""
        event = Event(tuple(topics), data)
        self.events.append(event)
        return event

    def events_with_topics(self, topics):
        """Return the published events whose topics equal ``topics``."""
        wanted = tuple(topics)
        return [event for event in self.events if event.topics == wanted]

    def register_token(self, admin):
        """Create a token administered by ``admin`` and return it."""
        token = Token(self.generate_address(), admin)
        self._tokens[token.address] = token
        return token

    def token(self, address):
        """Return the token registered at ``address``."""
        try:
            return self._tokens[address]
        except KeyError:
            raise KeyError(f"no token registered at {address}") from None