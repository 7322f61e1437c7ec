"""
linkstack.core.iterators — Views that walk a Stack top to bottom.

  IntoIter  — owns the chain, pops as it goes
  Iter      — read borrow, yields elements
  IterMut   — exclusive borrow, yields ElemRef handles

None of them can be restarted; ask the stack for a fresh one.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from linkstack.core.borrow import ElemRef, check_borrow
from linkstack.core.node import Node

if TYPE_CHECKING:
    from linkstack.core.stack import Stack

T = TypeVar("T")


class IntoIter(Generic[T], Iterator[T]):
    """Consuming iterator. Holds the only reference to its stack."""

    __slots__ = ("_stack",)

    def __init__(self, stack: Stack[T]):
        self._stack = stack

    def __next__(self) -> T:
        # Check first: a stored None is still an element.
        if not self._stack:
            raise StopIteration
        return self._stack.pop()


class Iter(Generic[T], Iterator[T]):
    __slots__ = ("_owner", "_next", "_epoch")

    def __init__(self, owner: Any, head: Node[T] | None, epoch: int):
        self._owner = owner
        self._next = head
        self._epoch = epoch

    def __next__(self) -> T:
        node = self._next
        if node is None:
            raise StopIteration
        check_borrow(self._owner, self._epoch)
        self._next = node.next
        return node.elem


class IterMut(Generic[T], Iterator[ElemRef[T]]):
    """Mutable iterator.

    The current node is taken out of the iterator before its
    successor is stored, so no node is ever handed out twice.
    """

    __slots__ = ("_owner", "_next", "_epoch")

    def __init__(self, owner: Any, head: Node[T] | None, epoch: int):
        self._owner = owner
        self._next = head
        self._epoch = epoch

    def __next__(self) -> ElemRef[T]:
        if self._next is None:
            raise StopIteration
        check_borrow(self._owner, self._epoch)
        node, self._next = self._next, None
        self._next = node.next
        return ElemRef(self._owner, node, self._epoch)
