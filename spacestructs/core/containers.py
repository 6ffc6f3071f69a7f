"""Stack and queue playgrounds: astronauts boarding a tower, ships waiting to launch."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional


def _clean(name: str, what: str) -> str:
    name = name.strip()
    if not name:
        raise ValueError(f"{what} name must not be empty")
    return name


class AstronautStack:
    """Last in, first out."""

    def __init__(self) -> None:
        self._items: List[str] = []

    @property
    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, name: str) -> str:
        name = _clean(name, "Astronaut")
        self._items.append(name)
        return name

    def pop(self) -> Optional[str]:
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[str]:
        return self._items[-1] if self._items else None

    def top_down(self) -> List[str]:
        """Items from the top of the stack to the bottom."""
        return list(reversed(self._items))


class SpaceshipQueue:
    """First in, first out."""

    def __init__(self) -> None:
        self._items: Deque[str] = deque()

    @property
    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, name: str) -> str:
        name = _clean(name, "Spaceship")
        self._items.append(name)
        return name

    def dequeue(self) -> Optional[str]:
        if not self._items:
            return None
        return self._items.popleft()

    def front(self) -> Optional[str]:
        return self._items[0] if self._items else None

    def items(self) -> List[str]:
        """Items from front to back."""
        return list(self._items)
