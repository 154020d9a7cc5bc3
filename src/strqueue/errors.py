"""Exception classes for strqueue."""


class StrQueueError(Exception):
    """Base exception for all strqueue errors."""


class QueueFreedError(StrQueueError):
    """Raised when operations are attempted on a queue that was already freed."""


class ElementReleasedError(StrQueueError):
    """Raised when releasing an element that was already released."""


class ElementLinkedError(StrQueueError):
    """Raised when releasing an element that is still linked into a queue."""


class AllocationError(StrQueueError, MemoryError):
    """Raised by the allocator when an allocation is refused."""


class DoubleFreeError(StrQueueError):
    """Raised when a block is returned to the allocator twice."""


class LeakError(StrQueueError):
    """Raised by a leak check when blocks are still live."""
