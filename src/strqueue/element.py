"""Queue elements: an owned string payload embedded in a list node."""

from strqueue.alloc import Allocator, Block
from strqueue.errors import AllocationError, ElementLinkedError, ElementReleasedError
from strqueue.linkedlist import ListHead, list_is_linked


def encode_payload(value: str) -> bytes:
    """Return the stored byte form of ``value``; lone surrogates pass through."""
    return value.encode("utf-8", errors="surrogatepass")


class Element(ListHead):
    """
    A string stored in a queue.

    The element is its own list node. While linked it is owned by the queue;
    once removed it belongs to the caller until ``release`` is called.
    """

    __slots__ = ("value", "_allocator", "_node_block", "_payload_block")

    def __init__(
        self,
        value: str,
        allocator: Allocator,
        node_block: Block,
        payload_block: Block,
    ) -> None:
        super().__init__()
        self.value: str | None = value
        self._allocator = allocator
        self._node_block = node_block
        self._payload_block: Block | None = payload_block

    @classmethod
    def create(cls, value: str, allocator: Allocator) -> "Element":
        """
        Allocate a node and a payload copy of ``value``.

        Raises:
            AllocationError: If either allocation fails; nothing stays allocated
        """
        # room for the encoded string plus its terminator
        payload_size = len(encode_payload(value)) + 1
        node_block = allocator.allocate("element")
        try:
            payload_block = allocator.allocate("payload", payload_size)
        except AllocationError:
            allocator.free(node_block)
            raise
        return cls(value, allocator, node_block, payload_block)

    @property
    def released(self) -> bool:
        """True once the element's storage has been released."""
        return self._node_block.freed

    def release(self) -> None:
        """
        Free the payload, then the node.

        Raises:
            ElementReleasedError: If the element was already released
            ElementLinkedError: If the element is still linked into a queue
        """
        if self.released:
            raise ElementReleasedError(f"Element {id(self):#x} already released")
        if list_is_linked(self):
            raise ElementLinkedError("Element must be removed from its queue before release")

        if self._payload_block is not None:
            self._allocator.free(self._payload_block)
            self._payload_block = None
        self.value = None
        self._allocator.free(self._node_block)

    def swap_payload(self, other: "Element") -> None:
        """Exchange payload ownership with ``other``; links are untouched."""
        self.value, other.value = other.value, self.value
        self._payload_block, other._payload_block = other._payload_block, self._payload_block

    def __repr__(self) -> str:
        state = "released" if self.released else repr(self.value)
        return f"<Element {state}>"
