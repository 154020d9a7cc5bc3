"""strqueue - String queue on a circular doubly-linked list with a sentinel."""

from strqueue.alloc import Allocator
from strqueue.api import (
    q_delete_dup,
    q_delete_mid,
    q_free,
    q_insert_head,
    q_insert_tail,
    q_new,
    q_release_element,
    q_remove_head,
    q_remove_tail,
    q_reverse,
    q_size,
    q_sort,
    q_swap,
)
from strqueue.core import StringQueue
from strqueue.element import Element
from strqueue.errors import (
    AllocationError,
    DoubleFreeError,
    ElementLinkedError,
    ElementReleasedError,
    LeakError,
    QueueFreedError,
    StrQueueError,
)

__version__ = "0.0.1"

__all__ = [
    "StringQueue",
    "Element",
    "Allocator",
    "StrQueueError",
    "QueueFreedError",
    "ElementReleasedError",
    "ElementLinkedError",
    "AllocationError",
    "DoubleFreeError",
    "LeakError",
    "q_new",
    "q_free",
    "q_insert_head",
    "q_insert_tail",
    "q_remove_head",
    "q_remove_tail",
    "q_release_element",
    "q_size",
    "q_delete_mid",
    "q_delete_dup",
    "q_swap",
    "q_reverse",
    "q_sort",
]
