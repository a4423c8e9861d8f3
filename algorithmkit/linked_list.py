"""A singly linked list node with helpers for sorting and deleting nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

__all__ = ["ListNode", "build_list", "list_values", "insertion_sort_list", "delete_node"]


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding values in order and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at head."""
    return [node.val for node in _nodes(head)]


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list in ascending order by rearranging node values; return the head."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, sorted(node.val for node in nodes)):
        node.val = value
    return head


def delete_node(node: ListNode) -> None:
    """Remove node from its list by copying its successor into it."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next