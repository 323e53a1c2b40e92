# Module: vertical slot allocator for margin labels.
# Main: LabelBank.
# Example: bank = LabelBank(0, 400); y = bank.allocate(37)

import logging
from typing import List

from ahkmap.core import config

logger = logging.getLogger(__name__)


class LabelBank:
    """First-fit, forward-only slot allocator for one margin column.

    Requests are packed downward; the scan never goes back to an earlier
    free slot, so allocation order shapes the result. Requests outside the
    bank come back unchanged, and a full tail clamps to the last slot.
    """

    def __init__(self, start: float, size: float, slot_size: int = config.SLOT_SIZE):
        self.start = start
        self.size = size
        self.slot_size = slot_size
        self._slots: List[bool] = [False] * (int(size) // slot_size if size > 0 else 0)

    def __len__(self) -> int:
        return len(self._slots)

    def is_taken(self, slot: int) -> bool:
        return self._slots[slot]

    def allocate(self, pos: float) -> float:
        slot = int((pos - self.start) / self.slot_size)
        if slot < 0 or slot >= len(self._slots):
            return pos

        while self._slots[slot]:
            slot += 1
            if slot >= len(self._slots):
                slot = len(self._slots) - 1
                logger.debug("Label bank full below %.1f, reusing last slot", pos)
                break

        self._slots[slot] = True
        return self.start + slot * self.slot_size
