from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_STARS = ("Sirius", "Vega", "Polaris", "Antares")


@dataclass
class StarNode:
    id: int
    name: str
    next_id: Optional[int] = None


class StarChain:
    """Singly linked list of stars.

    Nodes live in a dict keyed by id and link to each other through
    ``next_id``, so the chain never holds references between node objects.
    ``current_id`` is the star the player has selected.
    """

    def __init__(self, names: Iterable[str] = DEFAULT_STARS) -> None:
        self._nodes: Dict[int, StarNode] = {}
        self._head_id: Optional[int] = None
        self._tail_id: Optional[int] = None
        self._next_node_id = 1
        self.current_id: Optional[int] = None
        for name in names:
            self.add_star(name)
        self.current_id = self._head_id

    @property
    def head_id(self) -> Optional[int]:
        return self._head_id

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, node_id: int) -> StarNode:
        return self._nodes[node_id]

    def current(self) -> Optional[StarNode]:
        if self.current_id is None:
            return None
        return self._nodes[self.current_id]

    def stars(self) -> List[StarNode]:
        """Walk the chain from head to tail."""
        result: List[StarNode] = []
        node_id = self._head_id
        while node_id is not None:
            node = self._nodes[node_id]
            result.append(node)
            node_id = node.next_id
        return result

    def names(self) -> List[str]:
        return [node.name for node in self.stars()]

    def select(self, node_id: int) -> None:
        if node_id not in self._nodes:
            raise KeyError(node_id)
        self.current_id = node_id

    def add_star(self, name: str) -> StarNode:
        """Append a star at the tail and make it current."""
        name = name.strip()
        if not name:
            raise ValueError("Star name must not be empty")
        node = StarNode(id=self._next_node_id, name=name)
        self._next_node_id += 1
        self._nodes[node.id] = node
        if self._tail_id is None:
            self._head_id = node.id
        else:
            self._nodes[self._tail_id].next_id = node.id
        self._tail_id = node.id
        self.current_id = node.id
        logger.debug("Added star %s (#%d)", name, node.id)
        return node

    def remove_current(self) -> Optional[StarNode]:
        """Unlink the current star.

        Removing the head makes the new head current; otherwise the star
        before the removed one becomes current.
        """
        current = self.current()
        if current is None:
            return None

        if current.id == self._head_id:
            self._head_id = current.next_id
            new_current = self._head_id
            prev_id = None
        else:
            prev_id = self._predecessor_id(current.id)
            self._nodes[prev_id].next_id = current.next_id
            new_current = prev_id

        if current.id == self._tail_id:
            self._tail_id = prev_id
        del self._nodes[current.id]
        self.current_id = new_current
        logger.debug("Removed star %s (#%d)", current.name, current.id)
        return current

    def _predecessor_id(self, node_id: int) -> int:
        prev_id = self._head_id
        while prev_id is not None:
            prev = self._nodes[prev_id]
            if prev.next_id == node_id:
                return prev_id
            prev_id = prev.next_id
        raise KeyError(node_id)
