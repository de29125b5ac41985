"""Static data for one case, loaded once at startup."""

from dataclasses import dataclass, field

from .mansion import Room, build_mansion

ROOT_ROOM = 1


@dataclass(frozen=True)
class RoomRecord:
    number: int
    name: str
    clue: str | None = None


@dataclass
class Case:
    """Rooms, the links between them and the clue -> suspect bindings."""

    rooms: dict[int, RoomRecord] = field(default_factory=dict)
    links: dict[int, tuple[int, int]] = field(default_factory=dict)
    bindings: list[tuple[str, str]] = field(default_factory=list)

    def build(self) -> Room:
        """Assemble a fresh mansion tree from the root room."""
        return build_mansion(
            {n: (r.name, r.clue) for n, r in self.rooms.items()},
            self.links,
            root=ROOT_ROOM,
        )

    @property
    def suspects(self) -> list[str]:
        """Distinct suspect names in binding order."""
        return list(dict.fromkeys(suspect for _, suspect in self.bindings))

    @property
    def unreachable(self) -> list[str]:
        """Names of rooms that hang off no path from the root."""
        reached: set[int] = set()
        pending = [ROOT_ROOM]
        while pending:
            n = pending.pop()
            if n and n not in reached:
                reached.add(n)
                pending.extend(self.links.get(n, (0, 0)))
        return [r.name for n, r in self.rooms.items() if n not in reached]
