"""Building blocks shared by the runtime and its pallets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

Caller = TypeVar("Caller")
Call = TypeVar("Call")


class DispatchError(Exception):
    """Raised when a call cannot be dispatched or a block cannot be executed."""


@dataclass(frozen=True)
class Header:
    """Block header carrying the number the block claims to be."""

    block_number: int


@dataclass(frozen=True)
class Extrinsic(Generic[Caller, Call]):
    """A call together with the account that submitted it."""

    caller: Caller
    call: Call


@dataclass
class Block:
    """A header and the extrinsics to run in order."""

    header: Header
    extrinsics: list[Extrinsic[Any, Any]] = field(default_factory=list)


class Dispatch(ABC):
    """Something that can carry out a call on behalf of a caller."""

    @abstractmethod
    def dispatch(self, caller: Any, call: Any) -> None:
        """Carry out ``call`` for ``caller``; raise DispatchError on failure."""