"""System pallet: the current block number and per-account nonces."""

from __future__ import annotations

from collections.abc import Hashable


class SystemPallet:
    """Tracks the block number and how many calls each account has made."""

    def __init__(self) -> None:
        self._block_number = 0
        self._nonces: dict[Hashable, int] = {}

    def inc_block_number(self) -> None:
        """Advance the block number by one."""
        self._block_number += 1

    def block_number(self) -> int:
        """Return the current block number."""
        return self._block_number

    def get_nonce(self, who: Hashable) -> int:
        """Return the nonce of ``who``, zero for an unknown account."""
        return self._nonces.get(who, 0)

    def inc_nonce(self, who: Hashable) -> None:
        """Increase the nonce of ``who`` by one."""
        self._nonces[who] = self.get_nonce(who) + 1

    def __repr__(self) -> str:
        nonces = dict(sorted(self._nonces.items()))
        return f"SystemPallet(block_number={self._block_number}, nonce={nonces})"