from collections import Counter
import logging
from typing import Literal, Protocol

from frozendict import frozendict

logger = logging.getLogger(__name__)

Block = Literal["node", "cursor"]


class Allocator(Protocol):
    def acquire(self, block: Block) -> bool:
        """False when the block can't be granted"""
        ...

    def release(self, block: Block) -> None: ...


class HeapAllocator:
    """Leaves it to the interpreter"""

    def acquire(self, block: Block) -> bool:
        return True

    def release(self, block: Block) -> None:
        pass


class UnbalancedReleaseError(Exception):
    def __init__(self, block: Block):
        super().__init__(
            f"Released a {block} block that was never acquired"
        )


class BoundedAllocator:
    """
    Grants at most `capacity` live blocks at once, counting nodes
    and cursors together
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(
                f"capacity must not be negative, got {capacity}"
            )
        self.capacity = capacity
        self._live = Counter[Block]()

    @property
    def usage(self) -> frozendict[Block, int]:
        return frozendict(
            {block: n for block, n in self._live.items() if n}
        )

    @property
    def available(self) -> int:
        return self.capacity - self._live.total()

    def acquire(self, block: Block) -> bool:
        if self.available <= 0:
            logger.debug(
                "Refusing %s block, %d of %d in use",
                block,
                self._live.total(),
                self.capacity,
            )
            return False

        self._live[block] += 1
        return True

    def release(self, block: Block) -> None:
        if self._live[block] <= 0:
            raise UnbalancedReleaseError(block)
        self._live[block] -= 1
