"""
linkstack — Singly-linked stack with checked borrows.

Push, pop, peek, and three ways to walk the chain:
consuming, read-only and mutable.
"""

from linkstack.core.borrow import BorrowError, ElemRef
from linkstack.core.iterators import IntoIter, Iter, IterMut
from linkstack.core.stack import Stack

__version__ = "0.1.0"

__all__ = [
    # core
    "Stack",
    "BorrowError",
    "ElemRef",
    # iterators
    "IntoIter",
    "Iter",
    "IterMut",
]
