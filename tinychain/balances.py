"""Balances pallet: account balances and transfers between them."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from .support import Dispatch, DispatchError

MAX_BALANCE = 2**128 - 1


@dataclass(frozen=True)
class Transfer:
    """Move ``amount`` from the caller to ``to``."""

    to: Hashable
    amount: int


def _check_amount(amount: int) -> None:
    if not 0 <= amount <= MAX_BALANCE:
        raise ValueError(f"balance out of range: {amount}")


class BalancesPallet(Dispatch):
    """Keeps a balance for every account; unknown accounts hold zero."""

    def __init__(self) -> None:
        self.balances: dict[Hashable, int] = {}

    def set_balance(self, who: Hashable, amount: int) -> None:
        """Set the balance of ``who`` to ``amount``."""
        _check_amount(amount)
        self.balances[who] = amount

    def get_balance(self, who: Hashable) -> int:
        """Return the balance of ``who``."""
        return self.balances.get(who, 0)

    def transfer(self, caller: Hashable, to: Hashable, amount: int) -> None:
        """Move ``amount`` from ``caller`` to ``to``; nothing changes on failure."""
        _check_amount(amount)
        caller_balance = self.get_balance(caller)
        to_balance = self.get_balance(to)
        new_caller_balance = caller_balance - amount
        if new_caller_balance < 0:
            raise DispatchError("Insufficient balance")
        new_to_balance = to_balance + amount
        if new_to_balance > MAX_BALANCE:
            raise DispatchError("Overflow when adding to balance")
        self.set_balance(caller, new_caller_balance)
        self.set_balance(to, new_to_balance)

    def dispatch(self, caller: Hashable, call: Transfer) -> None:
        match call:
            case Transfer(to=to, amount=amount):
                self.transfer(caller, to, amount)
            case _:
                raise TypeError(f"not a balances call: {call!r}")

    def __repr__(self) -> str:
        return f"BalancesPallet(balances={dict(sorted(self.balances.items()))})"