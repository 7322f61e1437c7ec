"""
linkstack.core.stack — Singly-linked LIFO stack.

    s = Stack()
    s.push(1)
    s.push(2)
    s.pop()        # 2
    s.peek()       # 1

Each node is owned by the node above it, the top one by the
stack itself. Borrowed views (peek_mut, iter, iter_mut) are
checked against the stack's epoch, see linkstack.core.borrow.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from linkstack.core.borrow import ElemRef
from linkstack.core.iterators import IntoIter, Iter, IterMut
from linkstack.core.node import Node

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack backed by a chain of nodes."""

    def __init__(self):
        self._head: Node[T] | None = None
        self._epoch = 0
        self._exclusive = False

    # ─────────────────────────────────────────────
    # BORROW BOOKKEEPING
    # ─────────────────────────────────────────────
    def _invalidate(self) -> None:
        """Kill every outstanding view."""
        self._epoch += 1
        self._exclusive = False

    def _borrow_shared(self) -> int:
        # Readers may coexist, but not with a live mutable view.
        if self._exclusive:
            self._invalidate()
        return self._epoch

    def _borrow_exclusive(self) -> int:
        self._invalidate()
        self._exclusive = True
        return self._epoch

    # ─────────────────────────────────────────────
    # CORE OPERATIONS
    # ─────────────────────────────────────────────
    def push(self, elem: T) -> None:
        self._invalidate()
        self._head = Node(elem, self._head)

    def pop(self) -> T | None:
        """Detach the top node and return its element, or None if empty."""
        node = self._head
        if node is None:
            return None
        self._invalidate()
        self._head, node.next = node.next, None
        return node.elem

    def peek(self) -> T | None:
        if self._head is None:
            return None
        self._borrow_shared()
        return self._head.elem

    def peek_mut(self) -> ElemRef[T] | None:
        """Return a write handle to the top element, or None if empty.

        The handle is exclusive: any later push, pop or borrow
        of the stack makes it raise BorrowError.
        """
        if self._head is None:
            return None
        return ElemRef(self, self._head, self._borrow_exclusive())

    def clear(self) -> None:
        """Tear down the chain one node at a time.

        Each link is cut before moving on, so releasing the chain
        never recurses.
        """
        self._invalidate()
        node, self._head = self._head, None
        while node is not None:
            next_node = node.next
            node.next = None
            node = next_node

    def __del__(self):
        # __init__ may not have run to completion.
        if getattr(self, "_head", None) is not None:
            self.clear()

    # ─────────────────────────────────────────────
    # ITERATION
    # ─────────────────────────────────────────────
    def into_iter(self) -> IntoIter[T]:
        """Move the chain into a consuming iterator.

        This stack is left empty; the elements now belong to the iterator.
        """
        owned: Stack[T] = Stack()
        owned._head, self._head = self._head, None
        self._invalidate()
        return IntoIter(owned)

    def iter(self) -> Iter[T]:
        return Iter(self, self._head, self._borrow_shared())

    def iter_mut(self) -> IterMut[T]:
        return IterMut(self, self._head, self._borrow_exclusive())

    def __iter__(self) -> Iter[T]:
        return self.iter()

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self):
        items = []
        node = self._head
        while node is not None:
            items.append(repr(node.elem))
            node = node.next
        return f"Stack([{', '.join(items)}])"
