"""Main StringQueue implementation."""

import logging
from collections.abc import Iterator
from typing import cast

from strqueue.alloc import Allocator
from strqueue.element import Element, encode_payload
from strqueue.errors import AllocationError, QueueFreedError
from strqueue.linkedlist import (
    ListHead,
    list_add,
    list_add_tail,
    list_del,
    list_empty,
    list_for_each,
    list_for_each_safe,
    list_is_singular,
    list_move,
)
from strqueue.types import OutBuffer

logger = logging.getLogger(__name__)


class StringQueue:
    """
    Queue of strings on a circular doubly-linked list with a sentinel.

    Insertion and removal at either end are O(1). The queue keeps no element
    count, so ``size`` walks the list. Whole-list transformations (delete
    middle, delete duplicates, swap pairs, reverse, sort) rewire the existing
    elements and never allocate.
    """

    def __init__(self, *, allocator: Allocator | None = None) -> None:
        """
        Initialize an empty queue.

        Args:
            allocator: Allocator the sentinel, nodes and payloads are drawn
                from. Defaults to a fresh Allocator owned by this queue.

        Raises:
            AllocationError: If the sentinel cannot be allocated
        """
        self._allocator = allocator if allocator is not None else Allocator()
        self._sentinel_block = self._allocator.allocate("sentinel")
        self._head = ListHead()
        self._freed = False
        logger.debug("Created queue %#x", id(self))

    @property
    def freed(self) -> bool:
        """True once ``free`` has been called."""
        return self._freed

    @property
    def allocator(self) -> Allocator:
        """Allocator this queue draws its storage from."""
        return self._allocator

    def _check_alive(self) -> None:
        if self._freed:
            raise QueueFreedError("Queue was already freed")

    def free(self) -> None:
        """
        Release every element and then the queue itself.

        Raises:
            QueueFreedError: If the queue was already freed
        """
        self._check_alive()
        count = 0
        for node in list_for_each_safe(self._head):
            list_del(node)
            cast(Element, node).release()
            count += 1
        self._allocator.free(self._sentinel_block)
        self._freed = True
        logger.debug("Freed queue %#x with %d elements", id(self), count)

    def _new_element(self, s: str) -> Element | None:
        try:
            return Element.create(s, self._allocator)
        except AllocationError:
            logger.debug("Insert of %r failed: out of memory", s)
            return None

    def insert_head(self, s: str) -> bool:
        """
        Insert a copy of ``s`` at the head.

        Returns:
            True on success, False if storage could not be allocated (the
            queue is left unchanged)
        """
        self._check_alive()
        element = self._new_element(s)
        if element is None:
            return False
        list_add(element, self._head)
        return True

    def insert_tail(self, s: str) -> bool:
        """Insert a copy of ``s`` at the tail. Same contract as ``insert_head``."""
        self._check_alive()
        element = self._new_element(s)
        if element is None:
            return False
        list_add_tail(element, self._head)
        return True

    def remove_head(self, sp: OutBuffer | None = None, bufsize: int | None = None) -> Element | None:
        """
        Unlink and return the head element; the caller must ``release`` it.

        Args:
            sp: Optional byte buffer receiving the removed string, UTF-8
                encoded, zero-filled and truncated to ``bufsize - 1`` bytes
            bufsize: Number of bytes of ``sp`` to use (default: all of it)

        Returns:
            The removed element, or None if the queue is empty

        Raises:
            ValueError: If ``bufsize`` does not fit in ``sp``
        """
        return self._remove(self._head.next, sp, bufsize)

    def remove_tail(self, sp: OutBuffer | None = None, bufsize: int | None = None) -> Element | None:
        """Unlink and return the tail element. Same contract as ``remove_head``."""
        return self._remove(self._head.prev, sp, bufsize)

    def _remove(self, node: ListHead | None, sp: OutBuffer | None, bufsize: int | None) -> Element | None:
        self._check_alive()
        if sp is not None:
            bufsize = _check_buffer(sp, bufsize)
        if list_empty(self._head):
            return None

        element = cast(Element, node)
        list_del(element)
        if sp is not None:
            _copy_out(cast(str, element.value), sp, cast(int, bufsize))
        return element

    def size(self) -> int:
        """Return the number of elements. O(n)."""
        self._check_alive()
        return sum(1 for _ in list_for_each(self._head))

    def _find_mid(self) -> Element:
        # Cursors step toward each other from both ends; for n elements they
        # meet on index n // 2.
        head = self._head
        forward, backward = head.next, head.prev
        while forward is not backward:
            forward = forward.next  # type: ignore[union-attr]
            if forward is backward:
                break
            backward = backward.prev  # type: ignore[union-attr]
        return cast(Element, forward)

    def delete_middle(self) -> bool:
        """
        Delete the element at index ``n // 2`` (0-based from the head).

        Returns:
            False if the queue is empty, True otherwise
        """
        self._check_alive()
        if list_empty(self._head):
            return False

        mid = self._find_mid()
        list_del(mid)
        mid.release()
        return True

    def delete_duplicates(self) -> bool:
        """
        Delete every run of two or more adjacent equal strings entirely.

        The queue must already be sorted; on unsorted input only adjacent
        equal strings are considered.

        Returns:
            False if the queue is empty, True otherwise
        """
        self._check_alive()
        head = self._head
        if list_empty(head):
            return False

        in_run = False
        deleted = 0
        for node in list_for_each_safe(head):
            cur = cast(Element, node)
            nxt = cur.next
            if nxt is not head and cur.value == cast(Element, nxt).value:
                in_run = True
            elif in_run:
                in_run = False
            else:
                continue
            list_del(cur)
            cur.release()
            deleted += 1

        logger.debug("Deleted %d duplicate elements from queue %#x", deleted, id(self))
        return True

    def swap_pairs(self) -> None:
        """Swap every two adjacent elements by relinking; an odd last element stays put."""
        self._check_alive()
        head = self._head
        cur = head.next
        while cur is not head and cur.next is not head:  # type: ignore[union-attr]
            list_move(cur, cur.next)  # type: ignore[arg-type,union-attr]
            cur = cur.next  # type: ignore[union-attr]

    def reverse(self) -> None:
        """Reverse element order by exchanging payloads between mirrored elements."""
        self._check_alive()
        head = self._head
        if list_empty(head):
            return

        forward, backward = head.next, head.prev
        while forward is not backward:
            cast(Element, forward).swap_payload(cast(Element, backward))
            forward = forward.next  # type: ignore[union-attr]
            if forward is backward:
                break
            backward = backward.prev  # type: ignore[union-attr]

    def sort(self) -> None:
        """Stable ascending merge sort by string value."""
        self._check_alive()
        head = self._head
        if list_empty(head) or list_is_singular(head):
            return

        # Open the circle into a None-terminated chain
        head.prev.next = None  # type: ignore[union-attr]
        first = _merge_sort(cast(Element, head.next))

        # Restore prev links and close the circle through the sentinel
        prev: ListHead = head
        node: ListHead | None = first
        while node is not None:
            node.prev = prev
            prev.next = node
            prev = node
            node = node.next
        prev.next = head
        head.prev = prev

    def values(self) -> list[str]:
        """Return the stored strings from head to tail."""
        self._check_alive()
        return [cast(str, cast(Element, node).value) for node in list_for_each(self._head)]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values())

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        if self._freed:
            return "<StringQueue freed>"
        return f"StringQueue({self.values()!r})"


def _merge(a: Element | None, b: Element | None) -> Element | None:
    """Merge two sorted ``next`` chains, taking from ``a`` on ties."""
    first: Element | None = None
    tail: Element | None = None
    while a is not None and b is not None:
        if cast(str, b.value) < cast(str, a.value):
            taken, b = b, cast("Element | None", b.next)
        else:
            taken, a = a, cast("Element | None", a.next)
        if tail is None:
            first = taken
        else:
            tail.next = taken
        tail = taken

    rest = a if a is not None else b
    if tail is None:
        return rest
    tail.next = rest
    return first


def _merge_sort(first: Element | None) -> Element | None:
    """Sort a None-terminated ``next`` chain, returning its new first element."""
    if first is None or first.next is None:
        return first

    slow: Element = first
    fast = first.next
    while fast is not None and fast.next is not None:
        slow = cast(Element, slow.next)
        fast = fast.next.next
    right = cast("Element | None", slow.next)
    slow.next = None

    return _merge(_merge_sort(first), _merge_sort(right))


def _check_buffer(sp: OutBuffer, bufsize: int | None) -> int:
    if bufsize is None:
        return len(sp)
    if bufsize < 0 or bufsize > len(sp):
        raise ValueError(f"bufsize {bufsize} does not fit a buffer of {len(sp)} bytes")
    return bufsize


def _copy_out(value: str, sp: OutBuffer, bufsize: int) -> None:
    """Copy ``value`` into ``sp`` the way strncpy into a zeroed buffer does."""
    if bufsize == 0:
        return
    sp[:bufsize] = bytes(bufsize)
    data = encode_payload(value)[: bufsize - 1]
    sp[: len(data)] = data
