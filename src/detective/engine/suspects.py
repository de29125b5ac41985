"""Clue -> suspect association table.

A fixed array of 101 buckets, each a singly linked chain. The table is
filled once from the case bindings and never resized.
"""

from collections.abc import Iterable, Iterator

from .errors import AllocationError

BUCKET_COUNT = 101
HASH_SEED = 5381
_WORD_MASK = 0xFFFFFFFFFFFFFFFF  # unsigned long arithmetic


def clue_hash(clue: str) -> int:
    """djb2 over the UTF-8 bytes of the clue: h = h * 33 + byte."""
    value = HASH_SEED
    for byte in clue.encode("utf-8"):
        value = (value * 33 + byte) & _WORD_MASK
    return value


def bucket_for(clue: str) -> int:
    return clue_hash(clue) % BUCKET_COUNT


class _Entry:
    __slots__ = ("clue", "suspect", "next")

    def __init__(self, clue: str, suspect: str, next: "_Entry | None"):
        self.clue = clue
        self.suspect = suspect
        self.next = next


class SuspectIndex:
    """Chained hash table keyed by exact clue text.

    Re-binding a clue replaces its suspect. ``max_entries`` bounds the
    number of distinct clues; going past it raises AllocationError.
    """

    def __init__(self, max_entries: int | None = None):
        self._buckets: list[_Entry | None] = [None] * BUCKET_COUNT
        self._size = 0
        self.max_entries = max_entries

    @classmethod
    def from_bindings(
        cls, bindings: Iterable[tuple[str, str]], max_entries: int | None = None,
    ) -> "SuspectIndex":
        index = cls(max_entries=max_entries)
        for clue, suspect in bindings:
            index.insert(clue, suspect)
        return index

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self._find(clue) is not None

    def _find(self, clue: str) -> _Entry | None:
        entry = self._buckets[bucket_for(clue)]
        while entry is not None:
            if entry.clue == clue:
                return entry
            entry = entry.next
        return None

    def insert(self, clue: str | None, suspect: str) -> None:
        """Bind clue to suspect, overwriting any earlier binding."""
        if not clue:
            return

        existing = self._find(clue)
        if existing is not None:
            existing.suspect = suspect
            return

        if self.max_entries is not None and self._size >= self.max_entries:
            raise AllocationError("suspect index", self.max_entries)
        idx = bucket_for(clue)
        try:
            self._buckets[idx] = _Entry(clue, suspect, self._buckets[idx])
        except MemoryError as exc:
            raise AllocationError("suspect index", self._size) from exc
        self._size += 1

    def lookup(self, clue: str | None) -> str | None:
        """Return the suspect bound to clue, or None when there is none."""
        if not clue:
            return None
        entry = self._find(clue)
        return entry.suspect if entry is not None else None

    def chain_length(self, bucket: int) -> int:
        """Diagnostic: number of entries chained in one bucket."""
        length = 0
        entry = self._buckets[bucket]
        while entry is not None:
            length += 1
            entry = entry.next
        return length

    def items(self) -> Iterator[tuple[str, str]]:
        """Diagnostic: yield (clue, suspect) pairs bucket by bucket, newest first."""
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.clue, entry.suspect
                entry = entry.next

    def release(self) -> int:
        """Unlink every chain. Returns the number of entries dropped."""
        released = 0
        for idx, head in enumerate(self._buckets):
            entry = head
            while entry is not None:
                following = entry.next
                entry.next = None
                entry = following
                released += 1
            self._buckets[idx] = None
        self._size = 0
        return released
