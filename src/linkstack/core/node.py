"""
linkstack.core.node — Chain element.

A Node is referenced by exactly one owner: the Stack's head
if it is on top, otherwise the `next` of the node above it.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    __slots__ = ("elem", "next")

    def __init__(self, elem: T, next: Node[T] | None = None):
        self.elem = elem
        self.next = next

    def __repr__(self):
        return f"Node({self.elem!r})"
