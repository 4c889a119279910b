"""The runtime: ties the pallets together and executes blocks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Hashable, Sequence
from typing import Any

from .balances import BalancesPallet, Transfer
from .proof_of_existence import CreateClaim, ProofOfExistencePallet, RevokeClaim
from .support import Block, Dispatch, DispatchError, Extrinsic, Header


class Runtime(Dispatch):
    """A tiny state machine made of the system, balances and claims pallets."""

    def __init__(self) -> None:
        self.system = SystemPallet()
        self.balances = BalancesPallet()
        self.proof_of_existence = ProofOfExistencePallet()

    def execute_block(self, block: Block) -> None:
        """Run every extrinsic of ``block``, reporting failed ones to stderr.

        Raises DispatchError if the block does not carry the next block number.
        """
        self.system.inc_block_number()
        if block.header.block_number != self.system.block_number():
            raise DispatchError("Block number mismatch")
        for index, extrinsic in enumerate(block.extrinsics):
            self.system.inc_nonce(extrinsic.caller)
            try:
                self.dispatch(extrinsic.caller, extrinsic.call)
            except DispatchError as error:
                print(
                    "Extrinsic Error \n \t Block Number: "
                    f"{block.header.block_number}, Extrinsic Index: {index}, "
                    f"Error: {error}",
                    file=sys.stderr,
                )

    def dispatch(self, caller: Hashable, call: Any) -> None:
        """Route ``call`` to the pallet it belongs to."""
        match call:
            case Transfer():
                self.balances.dispatch(caller, call)
            case CreateClaim() | RevokeClaim():
                self.proof_of_existence.dispatch(caller, call)
            case _:
                raise TypeError(f"unknown runtime call: {call!r}")

    def __repr__(self) -> str:
        return (
            "Runtime(\n"
            f"    system={self.system!r},\n"
            f"    balances={self.balances!r},\n"
            f"    proof_of_existence={self.proof_of_existence!r},\n"
            ")"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run two demonstration blocks and print the resulting state."""
    parser = argparse.ArgumentParser(
        prog="tinychain", description="Execute two demonstration blocks."
    )
    parser.parse_args(argv)

    runtime = Runtime()
    alice, bob, charlie = "Alice", "Bob", "Charlie"
    runtime.balances.set_balance(alice, 100)

    block_1 = Block(
        header=Header(block_number=1),
        extrinsics=[
            Extrinsic(alice, Transfer(to=bob, amount=30)),
            Extrinsic(alice, Transfer(to=charlie, amount=20)),
        ],
    )
    block_2 = Block(
        header=Header(block_number=2),
        extrinsics=[
            Extrinsic(alice, CreateClaim("Alice's claim")),
            Extrinsic(bob, CreateClaim("Bob's claim")),
        ],
    )

    runtime.execute_block(block_1)
    runtime.execute_block(block_2)
    print(repr(runtime))
    return 0


from .system import SystemPallet  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())