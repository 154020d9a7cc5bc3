"""Allocation accounting for queue storage.

Every sentinel, element node and string payload is drawn from an
``Allocator`` so that tests can match allocations against releases and can
make allocations fail on demand.
"""

import itertools
import logging
import random
from dataclasses import dataclass, field

from strqueue.errors import AllocationError, DoubleFreeError, LeakError
from strqueue.types import BlockKind

logger = logging.getLogger(__name__)

_block_ids = itertools.count(1)


@dataclass
class Block:
    """A unit of accounted storage."""

    kind: BlockKind
    size: int
    id: int = field(default_factory=lambda: next(_block_ids))
    freed: bool = False


class Allocator:
    """
    Counts live blocks and optionally refuses allocations.

    Args:
        fail_probability: Chance in ``[0, 1]`` that ``allocate`` raises
            AllocationError instead of returning a block.
        seed: Seed for the failure draw, for reproducible failure sequences.
    """

    def __init__(self, *, fail_probability: float = 0.0, seed: int | None = None) -> None:
        if not 0.0 <= fail_probability <= 1.0:
            raise ValueError(f"fail_probability must be within [0, 1], got {fail_probability!r}")
        self.fail_probability = fail_probability
        self._rng = random.Random(seed)
        self._live: dict[int, Block] = {}
        self.allocated = 0
        self.released = 0
        self.failed = 0
        self.peak = 0

    @property
    def live(self) -> int:
        """Number of blocks allocated and not yet freed."""
        return len(self._live)

    def allocate(self, kind: BlockKind, size: int = 0) -> Block:
        """
        Hand out a new block.

        Raises:
            AllocationError: If the failure draw refuses the allocation
        """
        if self.fail_probability and self._rng.random() < self.fail_probability:
            self.failed += 1
            logger.debug("Refusing %s allocation of %d bytes", kind, size)
            raise AllocationError(f"Could not allocate {kind} block of {size} bytes")

        block = Block(kind=kind, size=size)
        self._live[block.id] = block
        self.allocated += 1
        self.peak = max(self.peak, len(self._live))
        return block

    def free(self, block: Block) -> None:
        """
        Return a block.

        Raises:
            DoubleFreeError: If the block was already freed or never came from here
        """
        if block.freed or self._live.pop(block.id, None) is None:
            raise DoubleFreeError(f"Block {block.id} ({block.kind}) freed twice or not owned")
        block.freed = True
        self.released += 1

    def check_leaks(self) -> None:
        """Raise LeakError if any block is still live."""
        if self._live:
            kinds: dict[str, int] = {}
            for block in self._live.values():
                kinds[block.kind] = kinds.get(block.kind, 0) + 1
            raise LeakError(f"{len(self._live)} blocks still allocated: {kinds}")

    def __repr__(self) -> str:
        return (
            f"Allocator(live={self.live}, allocated={self.allocated}, "
            f"released={self.released}, failed={self.failed})"
        )

