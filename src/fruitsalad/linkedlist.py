"""Doubly-linked list with sentinel nodes and positional splicing."""

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """Doubly-linked list with head/tail sentinels.

    End operations and splices are O(1); locating a node by index walks from
    whichever end is nearer, so it is O(n/2) at worst.
    """

    def __init__(self) -> None:
        # Sentinel nodes simplify edge cases
        self._head: Node[T] = Node(None)  # type: ignore[arg-type]
        self._tail: Node[T] = Node(None)  # type: ignore[arg-type]
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def append(self, node: Node[T]) -> None:
        """Link node in as the last element. O(1)."""
        self.insert_before(self._tail, node)

    def appendleft(self, node: Node[T]) -> None:
        """Link node in as the first element. O(1)."""
        first = self._head.next
        if first is None:
            raise RuntimeError("Head sentinel lost its successor")
        self.insert_before(first, node)

    def insert_before(self, anchor: Node[T], node: Node[T]) -> None:
        """Splice node in directly ahead of anchor. O(1).

        ``anchor`` may be the tail sentinel, which appends.
        """
        if anchor is self._head:
            raise ValueError("Cannot insert before the head sentinel")
        node.prev = anchor.prev
        node.next = anchor
        if anchor.prev is not None:
            anchor.prev.next = node
        anchor.prev = node
        self._size += 1

    def remove(self, node: Node[T]) -> None:
        """Unlink node and clear its pointers. O(1)."""
        before, after = node.prev, node.next
        if before is not None:
            before.next = after
        if after is not None:
            after.prev = before
        node.prev = node.next = None
        self._size -= 1

    def popleft(self) -> Node[T] | None:
        """Unlink and return the first node, or None when empty. O(1)."""
        first = self._head.next
        if not self._size or first is None:
            return None
        self.remove(first)
        return first

    def pop(self) -> Node[T] | None:
        """Unlink and return the last node, or None when empty. O(1)."""
        last = self._tail.prev
        if not self._size or last is None:
            return None
        self.remove(last)
        return last

    def node_at(self, index: int) -> Node[T]:
        """Return the node at ``index``, or the tail sentinel when ``index == len``.

        Raises:
            IndexError: If index is outside ``[0, len]``
        """
        if not 0 <= index <= self._size:
            raise IndexError(f"Index {index} out of range for list of size {self._size}")

        node: Node[T] | None
        if index <= self._size // 2:
            node = self._head.next
            steps = index
            while steps and node is not None:
                node = node.next
                steps -= 1
        else:
            node = self._tail
            steps = self._size - index
            while steps and node is not None:
                node = node.prev
                steps -= 1
        if node is None:
            raise RuntimeError(f"List links broken while walking to index {index}")
        return node

    def nodes(self) -> Iterator[Node[T]]:
        """Yield real nodes front to back."""
        node = self._head.next
        while node is not None and node is not self._tail:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        """Yield node values front to back."""
        for node in self.nodes():
            yield node.value

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
