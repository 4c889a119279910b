# tinychain

A small blockchain state machine. A `Runtime` holds three pallets and
applies blocks of extrinsics to them:

- **system** (`tinychain.system.SystemPallet`) keeps the current block
  number and a nonce for each account.
- **balances** (`tinychain.balances.BalancesPallet`) holds account balances
  and moves funds between accounts.
- **proof_of_existence** (`tinychain.proof_of_existence.ProofOfExistencePallet`)
  records who first claimed a piece of content. Only that owner can revoke
  the claim.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tinychain
```

This runs a demonstration, and it can also be started with
`python -m tinychain.runtime`. It takes no options other than `--help`.

1. Alice starts with a balance of 100.
2. Block 1 transfers 30 from Alice to Bob and 20 from Alice to Charlie.
3. Block 2 records a claim for Alice and a claim for Bob.

It then prints the final state of the runtime: the block number, the nonces, the balances and the claims.

## Library use

```python
from tinychain.runtime import Runtime
from tinychain.support import Block, Header, Extrinsic
from tinychain.balances import Transfer
from tinychain.proof_of_existence import CreateClaim, RevokeClaim

runtime = Runtime()
runtime.balances.set_balance("Alice", 100)

block = Block(
    header=Header(block_number=1),
    extrinsics=[
        Extrinsic(caller="Alice", call=Transfer(to="Bob", amount=30)),
        Extrinsic(caller="Alice", call=CreateClaim(claim="document-hash")),
    ],
)
runtime.execute_block(block)

runtime.balances.get_balance("Bob")                      # 30
runtime.proof_of_existence.get_claim("document-hash")    # "Alice"
runtime.system.get_nonce("Alice")                        # 2
```

### Block numbers

Block numbers must follow in order. `execute_block` first advances the
system block number. If the block's header number then differs from it,
`execute_block` raises `tinychain.support.DispatchError`. The block number
has already been advanced by then, even though the block is rejected.

### Failing extrinsics

A failing extrinsic does not stop the block. It fails with a
`DispatchError`, for example:

- an insufficient balance;
- a claim that already exists;
- a claim that does not exist;
- a claim that is owned by someone else.

The error is reported on standard error and the block continues. The
caller's nonce is incremented whether or not the call succeeds.

A call object the runtime does not know raises `TypeError`, and that error
is not caught.

### Using the pallets directly

```python
from tinychain.balances import BalancesPallet
from tinychain.support import DispatchError

pallet = BalancesPallet()
pallet.set_balance("Alice", 10)
try:
    pallet.transfer("Alice", "Bob", 50)
except DispatchError as err:
    print(err)  # Insufficient balance
```

Accounts that have never been set hold a balance of zero and a nonce of zero.

Balances are unsigned 128-bit amounts:

- `set_balance` and `transfer` raise `ValueError` for an amount that is negative or above `2**128 - 1`.
- A transfer that would push the recipient's balance above that limit raises `DispatchError("Overflow when adding to balance")`.
- A failed transfer leaves both balances unchanged.

Every pallet, and the `Runtime` itself, implements the abstract
`tinychain.support.Dispatch` interface with a `dispatch(caller, call)` method:

- `Transfer` calls are routed to the balances pallet.
- `CreateClaim` and `RevokeClaim` calls are routed to the proof-of-existence pallet.

## What it does not do

All state lives in memory inside one `Runtime` object. The package does not:

- store blocks or state on disk;
- talk to other nodes;
- reach consensus;
- hash blocks;
- check signatures.

Callers are plain Python values that are trusted as given.