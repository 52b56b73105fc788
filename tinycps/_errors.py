from __future__ import annotations

class SlotIndexError(ValueError):
    """of_n() was given a negative slot index."""

    index: int

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Slot index must be non-negative, got {index}")

class PoisonedSlotError(RuntimeError):
    """scan() slot refuses emissions after its reducer raised."""

    slot: int

    def __init__(self, slot: int) -> None:
        self.slot = slot
        super().__init__(f"Slot {slot} is poisoned by an earlier reducer failure")

class NoEmissionError(LookupError):
    """to_result() observed no synchronous emission."""

    def __init__(self) -> None:
        super().__init__("CPS function emitted nothing on slots 0 or 1")

__all__ = ("NoEmissionError", "PoisonedSlotError", "SlotIndexError")
