# stakematch

stakematch models staked two-player matches. An escrow holds each player's
stake, and a trusted oracle records verified results. Everything runs in
memory on a small simulated ledger. You can script matches, move token
balances and inspect the emitted events without any external service.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `stakematch.ledger`
  - `Env` is the simulated environment. It provides:
    - `generate_address` and `register_token` / `token`
    - authorisation through `authorize`, `require_auth` and `mock_all_auths`
    - events through `publish`, the `events` list and `events_with_topics`
  - `Token` is a fungible token with `mint`, `balance` and `transfer`.
  - `Storage` is a key-value store in which each entry has a time to live.
  - `Event` is a published event. It has `topics` and `data`.
- `stakematch.escrow.EscrowContract` creates matches. It:
  - collects the same stake from both players;
  - pays out when the oracle submits a result;
  - refunds deposits when a match is cancelled.
- `stakematch.oracle.OracleContract` stores one `ResultEntry` per match id.
  Only its admin may submit a result.
- `stakematch.types` holds `Match`, `MatchState`, `Platform`, `Winner`,
  `MatchResult` and `ResultEntry`.
- `stakematch.errors` holds the error types:
  - `EscrowError` and `OracleError` carry a `code`, which is an
    `EscrowErrorCode` or an `OracleErrorCode`. Their message has the form
    `Error(Contract, #N)`.
  - `AlreadyInitializedError` is raised when a contract is initialized a
    second time.
  - `AuthError` is raised when an address has not authorised a call.
  - `InsufficientBalanceError` is raised when a transfer exceeds the
    sender's balance.

## Example

```python
from stakematch.ledger import Env
from stakematch.escrow import EscrowContract
from stakematch.types import Platform, Winner, MatchState

env = Env()
env.mock_all_auths()

admin = env.generate_address()
oracle = env.generate_address()
alice = env.generate_address()
bob = env.generate_address()

chips = env.register_token(admin)
chips.mint(alice, 1000)
chips.mint(bob, 1000)

escrow = EscrowContract(env)
escrow.initialize(oracle, admin)

match_id = escrow.create_match(alice, bob, 100, chips.address, "abc123", Platform.LICHESS)
escrow.deposit(match_id, alice)
escrow.deposit(match_id, bob)
assert escrow.is_funded(match_id)
assert escrow.get_escrow_balance(match_id) == 200

escrow.submit_result(match_id, Winner.PLAYER1, oracle)
assert chips.balance(alice) == 1100
assert escrow.get_match(match_id).state is MatchState.COMPLETED
```

If you do not call `mock_all_auths`, call `env.authorize(address)` for each
address that must approve a call. Otherwise `AuthError` is raised.

## Match lifecycle

1. `create_match` stores a new match in the `PENDING` state and publishes a
   `("match", "created")` event. Match ids start at 0 and count up. The
   stake must be positive; if it is not, the error code is `INVALID_AMOUNT`.
2. Each player calls `deposit` once. Depositing twice raises
   `ALREADY_FUNDED`. When both players have deposited, the match becomes
   `ACTIVE` and a `("match", "activated")` event is published.
3. The oracle address calls `submit_result`:
   - The winner receives twice the stake.
   - On a draw, each player gets their own stake back.
   - The match becomes `COMPLETED`.
   - A `("match", "completed")` event is published.
   - Any other caller gets `UNAUTHORIZED`.
4. While a match is still `PENDING`, either player may call
   `cancel_match`. Any deposits are refunded and the match becomes
   `CANCELLED`. Cancelling an active match raises `INVALID_STATE`.

The admin can `pause` the escrow. While it is paused, `create_match`,
`deposit` and `submit_result` raise `EscrowError` with the `CONTRACT_PAUSED`
code. `unpause` lifts the pause.

The oracle's `submit_result` stores a result once per match id. A second
submission raises `OracleError` with `ALREADY_SUBMITTED`. It also publishes an
`("oracle", "result")` event.

## Limits

- Stored matches and oracle results have their time to live extended to
  518,400 ledgers, which is about 30 days. `EscrowContract.match_ttl` and
  `OracleContract.result_ttl` report the value.
- The simulated ledger never advances, so entries never expire.
- State lives only in memory. Nothing is saved to disk.
- There is no command-line tool and no network service.
- The escrow and the oracle are not wired together. The oracle's address
  must call the escrow's `submit_result` itself.