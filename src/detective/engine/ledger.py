"""Ordered, duplicate-free record of the clues found during a session.

Clues live in an unbalanced binary search tree keyed by plain string
comparison. Insertion order decides the shape; nothing is rebalanced.
"""

from collections.abc import Callable, Iterator

from .errors import AllocationError


class _Node:
    __slots__ = ("clue", "left", "right")

    def __init__(self, clue: str):
        self.clue = clue
        self.left: _Node | None = None
        self.right: _Node | None = None


class ClueLedger:
    """Binary search tree of clue texts.

    ``max_entries`` bounds the number of stored clues; going past it raises
    AllocationError instead of growing.
    """

    def __init__(self, max_entries: int | None = None):
        self._root: _Node | None = None
        self._size = 0
        self.max_entries = max_entries

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        if not isinstance(clue, str):
            return False
        node = self._root
        while node is not None:
            if clue == node.clue:
                return True
            node = node.left if clue < node.clue else node.right
        return False

    def __iter__(self) -> Iterator[str]:
        return self.sorted()

    def _new_node(self, clue: str) -> _Node:
        if self.max_entries is not None and self._size >= self.max_entries:
            raise AllocationError("clue ledger", self.max_entries)
        try:
            return _Node(clue)
        except MemoryError as exc:
            raise AllocationError("clue ledger", self._size) from exc

    def insert(self, clue: str | None) -> bool:
        """Add a clue. Returns False for empty clues and duplicates."""
        if not clue:
            return False

        if self._root is None:
            self._root = self._new_node(clue)
            self._size += 1
            return True

        node = self._root
        while True:
            if clue == node.clue:
                return False
            if clue < node.clue:
                if node.left is None:
                    node.left = self._new_node(clue)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = self._new_node(clue)
                    break
                node = node.right

        self._size += 1
        return True

    def sorted(self) -> Iterator[str]:
        """Lazily yield the clues in ascending order.

        Each call starts a fresh in-order walk.
        """
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.clue
            node = node.right

    def for_each(self, visitor: Callable[[str], None]) -> None:
        """Call visitor once per clue, in ascending order."""
        for clue in self.sorted():
            visitor(clue)

    def height(self) -> int:
        """Diagnostic: number of nodes on the longest root-to-leaf path."""
        best = 0
        stack = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def release(self) -> int:
        """Drop every node, children before parents. Returns the count."""
        released = 0
        stack: list[tuple[_Node, bool]] = (
            [(self._root, False)] if self._root is not None else []
        )
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node.left = node.right = None
                released += 1
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
        self._root = None
        self._size = 0
        return released
