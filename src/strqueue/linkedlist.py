"""Intrusive circular doubly-linked list with a sentinel node.

A list is represented by one ``ListHead`` acting as the sentinel. Payload
types embed the list node by subclassing ``ListHead``; nothing in this module
knows about payloads and nothing here allocates.
"""

from collections.abc import Iterator


class ListHead:
    """A node in a circular doubly-linked list."""

    __slots__ = ("prev", "next")

    def __init__(self) -> None:
        self.prev: ListHead | None = self
        self.next: ListHead | None = self

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {id(self):#x}>"


def init_list_head(node: ListHead) -> None:
    """Make ``node`` a self-circular singleton (an empty list when a sentinel). O(1)."""
    node.next = node
    node.prev = node


def _link(node: ListHead, prev: ListHead, next: ListHead) -> None:
    next.prev = node
    node.next = next
    node.prev = prev
    prev.next = node


def list_add(node: ListHead, head: ListHead) -> None:
    """Link ``node`` immediately after ``head``. O(1)."""
    _link(node, head, head.next)  # type: ignore[arg-type]


def list_add_tail(node: ListHead, head: ListHead) -> None:
    """Link ``node`` immediately before ``head``. O(1)."""
    _link(node, head.prev, head)  # type: ignore[arg-type]


def list_del(node: ListHead) -> None:
    """Splice ``node`` out of its list and clear its links. O(1)."""
    prev, next = node.prev, node.next
    next.prev = prev  # type: ignore[union-attr]
    prev.next = next  # type: ignore[union-attr]
    node.prev = None
    node.next = None


def list_del_init(node: ListHead) -> None:
    """Splice ``node`` out and leave it as a singleton. O(1)."""
    list_del(node)
    init_list_head(node)


def list_move(node: ListHead, head: ListHead) -> None:
    """Unlink ``node`` and link it immediately after ``head``. O(1)."""
    list_del(node)
    list_add(node, head)


def list_empty(head: ListHead) -> bool:
    """Return True if the list headed by ``head`` has no entries."""
    return head.next is head


def list_is_singular(head: ListHead) -> bool:
    """Return True if the list has exactly one entry."""
    return not list_empty(head) and head.next is head.prev


def list_is_linked(node: ListHead) -> bool:
    """Return True if ``node`` is currently part of a list with other nodes."""
    return node.next is not None and node.next is not node


def list_for_each(head: ListHead) -> Iterator[ListHead]:
    """Iterate forward over every entry after ``head``.

    The current entry must not be unlinked during iteration; use
    ``list_for_each_safe`` for that.
    """
    node = head.next
    while node is not head:
        yield node  # type: ignore[misc]
        node = node.next  # type: ignore[union-attr]


def list_for_each_safe(head: ListHead) -> Iterator[ListHead]:
    """Iterate forward, tolerating removal of the entry just yielded.

    The successor is captured before each entry is handed out, so only the
    current entry may be unlinked.
    """
    node = head.next
    while node is not head:
        nxt = node.next  # type: ignore[union-attr]
        yield node  # type: ignore[misc]
        node = nxt


def list_for_each_reverse(head: ListHead) -> Iterator[ListHead]:
    """Iterate backward over every entry before ``head``."""
    node = head.prev
    while node is not head:
        yield node  # type: ignore[misc]
        node = node.prev  # type: ignore[union-attr]
