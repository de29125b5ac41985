"""Immutable room tree for the mansion.

Rooms are built once, bottom-up, before exploration starts. Each room owns
at most two children and holds no reference back to its parent.
"""

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass


class Direction(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Room:
    """A node of the mansion tree."""

    name: str
    clue: str | None = None
    left: "Room | None" = None
    right: "Room | None" = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def child(self, direction: Direction) -> "Room | None":
        if direction is Direction.LEFT:
            return self.left
        return self.right


def create_room(
    name: str,
    clue: str | None = None,
    left: Room | None = None,
    right: Room | None = None,
) -> Room:
    """Create a room. An empty clue is stored as no clue."""
    return Room(name=name, clue=clue or None, left=left, right=right)


def build_mansion(
    rooms: Mapping[int, tuple[str, str | None]],
    links: Mapping[int, tuple[int, int]],
    root: int = 1,
) -> Room:
    """Assemble the tree from numbered rooms and parent -> (left, right) links.

    Child number 0 means "no child". Children are created before their
    parent so every Room is complete and frozen once made.
    """
    built: dict[int, Room] = {}
    stack: list[tuple[int, bool]] = [(root, False)]
    while stack:
        number, expanded = stack.pop()
        left_n, right_n = links.get(number, (0, 0))
        if expanded:
            name, clue = rooms[number]
            built[number] = create_room(
                name, clue,
                built.pop(left_n) if left_n else None,
                built.pop(right_n) if right_n else None,
            )
            continue
        stack.append((number, True))
        if right_n:
            stack.append((right_n, False))
        if left_n:
            stack.append((left_n, False))
    return built[root]


def step(room: Room, direction: Direction) -> Room | None:
    """Return the child in the given direction, or None when blocked."""
    return room.child(direction)


def postorder(room: Room | None) -> Iterator[Room]:
    """Yield every room of the subtree, children before their parent."""
    if room is None:
        return
    stack: list[tuple[Room, bool]] = [(room, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))
