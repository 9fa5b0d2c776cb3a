# namedgraph/core/slotmap.py
"""Generation-tagged slot map with a free list.

A ``Handle`` is ``(index, generation)``. Removing a value bumps the slot's
generation, so a handle kept past removal no longer resolves even after the
slot is reused.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, List, NamedTuple, Optional, Tuple, TypeVar

T = TypeVar("T")


class Handle(NamedTuple):
    """Stable reference to a slot map entry."""

    index: int
    generation: int

    def __repr__(self) -> str:
        return f"Handle({self.index}v{self.generation})"


@dataclass(slots=True)
class _Slot(Generic[T]):
    generation: int
    value: Optional[T] = None
    occupied: bool = False


class SlotMap(Generic[T]):
    """Arena of values addressed by :class:`Handle`."""

    def __init__(self) -> None:
        self._slots: List[_Slot[T]] = []
        self._free: List[int] = []
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __contains__(self, handle: object) -> bool:
        if not isinstance(handle, Handle):
            return False
        return self._slot(handle) is not None

    def _slot(self, handle: Handle) -> Optional[_Slot[T]]:
        if not 0 <= handle.index < len(self._slots):
            return None
        slot = self._slots[handle.index]
        if not slot.occupied or slot.generation != handle.generation:
            return None
        return slot

    def insert(self, value: T) -> Handle:
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
        else:
            index = len(self._slots)
            slot = _Slot(generation=0)
            self._slots.append(slot)
        slot.value = value
        slot.occupied = True
        self._len += 1
        return Handle(index, slot.generation)

    def get(self, handle: Handle) -> Optional[T]:
        """Value behind ``handle``, or ``None`` for a stale or unknown handle."""
        slot = self._slot(handle)
        return None if slot is None else slot.value

    def replace(self, handle: Handle, value: T) -> T:
        """Swap the stored value, returning the previous one."""
        slot = self._slot(handle)
        if slot is None:
            raise KeyError(handle)
        previous, slot.value = slot.value, value
        return previous  # type: ignore[return-value]

    def remove(self, handle: Handle) -> Optional[T]:
        slot = self._slot(handle)
        if slot is None:
            return None
        value = slot.value
        slot.value = None
        slot.occupied = False
        slot.generation += 1
        self._free.append(handle.index)
        self._len -= 1
        return value

    def items(self) -> Iterator[Tuple[Handle, T]]:
        """Live entries in slot order."""
        for index, slot in enumerate(self._slots):
            if slot.occupied:
                yield Handle(index, slot.generation), slot.value  # type: ignore[misc]

    def handles(self) -> Iterator[Handle]:
        for handle, _ in self.items():
            yield handle


__all__ = ["Handle", "SlotMap"]
