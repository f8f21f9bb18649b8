"""A minimal singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "build", "traverse"]


@dataclass
class Node:
    """One element of a singly linked list."""

    data: Any
    next: Optional[Node] = None

    def __iter__(self) -> Iterator[Any]:
        return traverse(self)


def build(values: Iterable[Any]) -> Node | None:
    """Link the values into a list and return its head, or None if empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def traverse(head: Node | None) -> Iterator[Any]:
    """Yield the data of each node from head to the end of the list."""
    node = head
    while node is not None:
        yield node.data
        node = node.next