"""Functional interface over StringQueue.

Every function accepts ``None`` as the null queue handle and reports it the
way an empty or failed call is reported: ``False``, ``None``, ``0`` or no
effect.
"""

import logging

from strqueue.alloc import Allocator
from strqueue.core import StringQueue
from strqueue.element import Element
from strqueue.errors import AllocationError
from strqueue.types import OutBuffer

logger = logging.getLogger(__name__)


def q_new(*, allocator: Allocator | None = None) -> StringQueue | None:
    """Create an empty queue, or return None if it cannot be allocated."""
    try:
        return StringQueue(allocator=allocator)
    except AllocationError:
        logger.debug("Could not allocate a new queue")
        return None


def q_free(q: StringQueue | None) -> None:
    """Free ``q`` and every element still in it. No effect on None."""
    if q is None:
        return
    q.free()


def q_insert_head(q: StringQueue | None, s: str) -> bool:
    if q is None:
        return False
    return q.insert_head(s)


def q_insert_tail(q: StringQueue | None, s: str) -> bool:
    if q is None:
        return False
    return q.insert_tail(s)


def q_remove_head(
    q: StringQueue | None, sp: OutBuffer | None = None, bufsize: int | None = None
) -> Element | None:
    """Unlink the head element; see ``StringQueue.remove_head``."""
    if q is None:
        return None
    return q.remove_head(sp, bufsize)


def q_remove_tail(
    q: StringQueue | None, sp: OutBuffer | None = None, bufsize: int | None = None
) -> Element | None:
    """Unlink the tail element; see ``StringQueue.remove_tail``."""
    if q is None:
        return None
    return q.remove_tail(sp, bufsize)


def q_release_element(e: Element) -> None:
    """Free a removed element's payload and node."""
    e.release()


def q_size(q: StringQueue | None) -> int:
    if q is None:
        return 0
    return q.size()


def q_delete_mid(q: StringQueue | None) -> bool:
    if q is None:
        return False
    return q.delete_middle()


def q_delete_dup(q: StringQueue | None) -> bool:
    if q is None:
        return False
    return q.delete_duplicates()


def q_swap(q: StringQueue | None) -> None:
    if q is not None:
        q.swap_pairs()


def q_reverse(q: StringQueue | None) -> None:
    if q is not None:
        q.reverse()


def q_sort(q: StringQueue | None) -> None:
    if q is not None:
        q.sort()
