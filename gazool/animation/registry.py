"""Fixed-capacity pool of sliding tiles."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from gazool.config import ANI_STEP_SIZE, MAX_ANIMATIONS
from gazool.fields.shift import MoveEvent

logger = logging.getLogger(__name__)


class BlockState(Enum):
    DEAD = 1
    IDLE = 2
    MOVING = 3


@dataclass
class AnimatedBlock:
    """A tile sliding across the console, in display coordinates."""

    cur_row: int = 0
    cur_col: int = 0
    dest_row: int = 0
    dest_col: int = 0
    moving_value: int = 0
    idle_value: int = 0
    state: BlockState = BlockState.DEAD

    @property
    def value(self) -> int:
        """Value to draw: the idle value once the block has arrived."""
        return self.idle_value if self.state is BlockState.IDLE else self.moving_value

    @property
    def arrived(self) -> bool:
        return self.cur_row == self.dest_row and self.cur_col == self.dest_col


def _approach(current: int, target: int, step: int) -> int:
    """Move `current` toward `target` by at most `step`."""
    delta = target - current
    if delta > 0:
        return current + min(delta, step)
    if delta < 0:
        return current - min(-delta, step)
    return current


class AnimationRegistry:
    """
    Arena of animated blocks with an explicit free-list.

    Slots are handed out lowest index first, so blocks admitted later are
    drawn on top. The pool never grows: admitting into a full pool drops
    the event.
    """

    def __init__(self, capacity: int = MAX_ANIMATIONS, step_size: int = ANI_STEP_SIZE):
        self.capacity = capacity
        self.step_size = step_size
        self.blocks = [AnimatedBlock() for _ in range(capacity)]
        self._free: list[int] = []
        self.clear()

    def clear(self) -> None:
        """Return every block to DEAD."""
        for block in self.blocks:
            block.state = BlockState.DEAD
        self._free = list(reversed(range(self.capacity)))

    def admit(self, event: MoveEvent) -> bool:
        """
        Start animating a move event.

        Args:
            event: Move event in display coordinates

        Returns:
            False if the pool is full and the event was dropped
        """
        if not self._free:
            logger.debug("Animation pool exhausted (%d blocks)", self.capacity)
            return False

        block = self.blocks[self._free.pop()]
        block.cur_row = event.start_row
        block.cur_col = event.start_col
        block.dest_row = event.end_row
        block.dest_col = event.end_col
        block.moving_value = event.start_value
        block.idle_value = event.end_value
        block.state = BlockState.MOVING
        return True

    def step(self) -> bool:
        """
        Move every moving block one step closer to its destination.

        Rows and columns are stepped independently. A block that lands on
        its destination becomes IDLE.

        Returns:
            True if any block is still moving
        """
        still_moving = False
        for block in self.blocks:
            if block.state is not BlockState.MOVING:
                continue
            block.cur_row = _approach(block.cur_row, block.dest_row, self.step_size)
            block.cur_col = _approach(block.cur_col, block.dest_col, self.step_size)
            if block.arrived:
                block.state = BlockState.IDLE
            else:
                still_moving = True
        return still_moving

    def visible(self) -> Iterator[AnimatedBlock]:
        """Yield moving and idle blocks in draw order."""
        for block in self.blocks:
            if block.state is not BlockState.DEAD:
                yield block

    @property
    def is_idle(self) -> bool:
        return all(block.state is not BlockState.MOVING for block in self.blocks)

    def __len__(self) -> int:
        return self.capacity - len(self._free)
