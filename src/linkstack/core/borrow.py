"""
linkstack.core.borrow — Borrowed views into a Stack.

Every view records the owning stack's epoch when it is handed out.
The stack bumps its epoch whenever outstanding views must die:

  push / pop / clear / into_iter   → all views
  peek_mut / iter_mut              → all views (exclusive borrow)
  peek / iter                      → mutable views only

Using a view whose epoch no longer matches raises BorrowError,
the same way a dict iterator fails once the dict changes size.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from linkstack.core.node import Node

T = TypeVar("T")


class BorrowError(RuntimeError):
    """View used after its borrow was invalidated."""
    pass


def check_borrow(owner: Any, epoch: int) -> None:
    if owner._epoch != epoch:
        raise BorrowError(
            "stack was mutated or re-borrowed while this view was outstanding"
        )


class ElemRef(Generic[T]):
    """Write handle to the element slot of a single node.

        ref = stack.peek_mut()
        if ref is not None:
            ref.value = 42
    """

    __slots__ = ("_owner", "_node", "_epoch")

    def __init__(self, owner: Any, node: Node[T], epoch: int):
        self._owner = owner
        self._node = node
        self._epoch = epoch

    @property
    def value(self) -> T:
        check_borrow(self._owner, self._epoch)
        return self._node.elem

    @value.setter
    def value(self, elem: T) -> None:
        check_borrow(self._owner, self._epoch)
        self._node.elem = elem

    def get(self) -> T:
        return self.value

    def set(self, elem: T) -> None:
        self.value = elem

    @property
    def valid(self) -> bool:
        return self._owner._epoch == self._epoch

    def __repr__(self):
        state = "" if self.valid else ", stale"
        return f"ElemRef({self._node.elem!r}{state})"
