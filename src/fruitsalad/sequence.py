"""Positional ordered sequences of strings with clamped insert/remove."""

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator

from fruitsalad.errors import EmptyCollectionError
from fruitsalad.linkedlist import DoublyLinkedList, Node
from fruitsalad.types import Backend, RandomSource

logger = logging.getLogger(__name__)


def fisher_yates(n: int, rng: RandomSource) -> Iterator[tuple[int, int]]:
    """Yield the ``(i, j)`` swaps of a uniform Fisher-Yates shuffle over ``n`` slots."""
    for i in range(n - 1, 0, -1):
        yield i, rng.randrange(i + 1)


class OrderedStringSequence(ABC):
    """
    Ordered collection of strings addressable by position.

    Positions outside the valid range are clamped to the nearest end instead
    of raising: for insertion ``<= 0`` is the front and ``>= len`` the back,
    for removal ``<= 0`` is the front and ``>= len - 1`` the back. Only an
    empty sequence refuses removal and random picks.

    Subclasses provide the backing storage through the ``_insert``,
    ``_remove``, ``_get`` and ``_swap_all`` primitives, which always receive
    already-clamped indices.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        for item in items:
            self._insert(len(self), item)

    @abstractmethod
    def _insert(self, index: int, value: str) -> None: ...

    @abstractmethod
    def _remove(self, index: int) -> str: ...

    @abstractmethod
    def _get(self, index: int) -> str: ...

    @abstractmethod
    def _swap_all(self, swaps: Iterable[tuple[int, int]]) -> None: ...

    @abstractmethod
    def __iter__(self) -> Iterator[str]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def clamp_insert_position(self, position: int) -> int:
        """Return the slot ``insert_at(position, ...)`` would fill."""
        return max(0, min(position, len(self)))

    def clamp_remove_position(self, position: int) -> int:
        """
        Return the slot ``remove_at(position)`` would empty.

        Raises:
            EmptyCollectionError: If the sequence is empty
        """
        if not self:
            raise EmptyCollectionError("Cannot remove from an empty sequence")
        return max(0, min(position, len(self) - 1))

    def insert_at(self, position: int, value: str) -> None:
        """
        Insert value so it becomes the element at the clamped position.

        Args:
            position: Target index; ``<= 0`` means front, ``>= len`` means back
            value: Item to insert
        """
        index = self.clamp_insert_position(position)
        self._insert(index, value)
        logger.debug("Inserted %r at %d (requested %d)", value, index, position)

    def remove_at(self, position: int) -> str:
        """
        Remove and return the element at the clamped position.

        Args:
            position: Target index; ``<= 0`` means front, ``>= len - 1`` means back

        Returns:
            The removed element

        Raises:
            EmptyCollectionError: If the sequence is empty
        """
        index = self.clamp_remove_position(position)
        value = self._remove(index)
        logger.debug("Removed %r from %d (requested %d)", value, index, position)
        return value

    def push_front(self, value: str) -> None:
        """Insert value as the first element."""
        self.insert_at(0, value)

    def push_back(self, value: str) -> None:
        """Insert value as the last element."""
        self.insert_at(len(self), value)

    def pop_front(self) -> str:
        """Remove and return the first element."""
        return self.remove_at(0)

    def pop_back(self) -> str:
        """Remove and return the last element."""
        return self.remove_at(len(self) - 1)

    def shuffle(self, rng: RandomSource) -> None:
        """Reorder all elements with a uniform random permutation drawn from rng."""
        if len(self) < 2:
            return
        self._swap_all(fisher_yates(len(self), rng))
        logger.debug("Shuffled %d items", len(self))

    def pick_random(self, rng: RandomSource) -> str:
        """
        Return one element chosen uniformly at random without removing it.

        Raises:
            EmptyCollectionError: If the sequence is empty
        """
        if not self:
            raise EmptyCollectionError("Cannot pick from an empty sequence")
        return self._get(rng.randrange(len(self)))

    def iterate(self) -> Iterator[str]:
        """Yield elements front to back."""
        return iter(self)

    def to_list(self) -> list[str]:
        """Return a snapshot of the elements, front to back."""
        return list(self)


class LinkedStringSequence(OrderedStringSequence):
    """Sequence backed by a doubly-linked list; splices are O(1) once the node is found."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._list = DoublyLinkedList[str]()
        super().__init__(items)

    def _insert(self, index: int, value: str) -> None:
        node = Node(value)
        if index == 0:
            self._list.appendleft(node)
        elif index == len(self._list):
            self._list.append(node)
        else:
            self._list.insert_before(self._list.node_at(index), node)

    def _remove(self, index: int) -> str:
        if index == 0:
            node = self._list.popleft()
        elif index == len(self._list) - 1:
            node = self._list.pop()
        else:
            node = self._list.node_at(index)
            self._list.remove(node)
        if node is None:
            raise EmptyCollectionError("Cannot remove from an empty sequence")
        return node.value

    def _get(self, index: int) -> str:
        return self._list.node_at(index).value

    def _swap_all(self, swaps: Iterable[tuple[int, int]]) -> None:
        # Swap values, nodes stay where they are
        nodes = list(self._list.nodes())
        for i, j in swaps:
            nodes[i].value, nodes[j].value = nodes[j].value, nodes[i].value

    def __iter__(self) -> Iterator[str]:
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)


class DequeStringSequence(OrderedStringSequence):
    """Sequence backed by ``collections.deque``; O(1) at the ends, O(n) in the middle."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: deque[str] = deque()
        super().__init__(items)

    def _insert(self, index: int, value: str) -> None:
        if index == 0:
            self._items.appendleft(value)
        elif index == len(self._items):
            self._items.append(value)
        else:
            self._items.insert(index, value)

    def _remove(self, index: int) -> str:
        if index == 0:
            return self._items.popleft()
        if index == len(self._items) - 1:
            return self._items.pop()
        value = self._items[index]
        del self._items[index]
        return value

    def _get(self, index: int) -> str:
        return self._items[index]

    def _swap_all(self, swaps: Iterable[tuple[int, int]]) -> None:
        items = self._items
        for i, j in swaps:
            items[i], items[j] = items[j], items[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


_BACKINGS: dict[str, type[OrderedStringSequence]] = {
    "linked": LinkedStringSequence,
    "deque": DequeStringSequence,
}


def create_sequence(items: Iterable[str] = (), *, backend: Backend = "linked") -> OrderedStringSequence:
    """
    Build a sequence holding items in order.

    Args:
        items: Initial elements, front to back
        backend: "linked" for a doubly-linked list, "deque" for ``collections.deque``

    Raises:
        ValueError: If backend is not a known backing
    """
    try:
        cls = _BACKINGS[backend]
    except KeyError:
        raise ValueError(f"Unknown backend {backend!r}; expected one of {sorted(_BACKINGS)}") from None
    return cls(items)
