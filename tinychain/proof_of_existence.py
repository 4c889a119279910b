"""Proof-of-existence pallet: accounts claim ownership of unique content."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from .support import Dispatch, DispatchError


@dataclass(frozen=True)
class CreateClaim:
    """Claim ``claim`` for the caller."""

    claim: Hashable


@dataclass(frozen=True)
class RevokeClaim:
    """Give up the caller's claim on ``claim``."""

    claim: Hashable


class ProofOfExistencePallet(Dispatch):
    """Maps each claimed piece of content to the account that owns it."""

    def __init__(self) -> None:
        self._claims: dict[Hashable, Hashable] = {}

    def get_claim(self, claim: Hashable) -> Hashable | None:
        """Return the owner of ``claim``, or None if nobody holds it."""
        return self._claims.get(claim)

    def create_claim(self, caller: Hashable, claim: Hashable) -> None:
        """Record ``caller`` as owner of ``claim``."""
        if claim in self._claims:
            raise DispatchError("Claim already exists")
        self._claims[claim] = caller

    def revoke_claim(self, caller: Hashable, claim: Hashable) -> None:
        """Remove ``claim`` if ``caller`` owns it."""
        if claim not in self._claims:
            raise DispatchError("Claim does not exist")
        if self._claims[claim] != caller:
            raise DispatchError("Caller does not own the claim")
        del self._claims[claim]

    def dispatch(self, caller: Hashable, call: CreateClaim | RevokeClaim) -> None:
        match call:
            case CreateClaim(claim=claim):
                self.create_claim(caller, claim)
            case RevokeClaim(claim=claim):
                self.revoke_claim(caller, claim)
            case _:
                raise TypeError(f"not a proof-of-existence call: {call!r}")

    def __repr__(self) -> str:
        return f"ProofOfExistencePallet(claims={dict(sorted(self._claims.items()))})"