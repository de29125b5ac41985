"""Parse a mansion.dat case file into a Case.

The file is split into numbered sections. A section starts with a line
holding its number and runs until a -1 line; section 0 ends the file.
Fields within a line are separated by tabs.

  1  rooms      number, name[, clue]
  2  links      parent, left, right (0 = no child)
  3  bindings   clue, suspect
"""

from collections.abc import Callable, Iterator
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from .case import ROOT_ROOM, Case, RoomRecord
from .errors import CaseFileError

SECTION_END = "-1"


def _parse_int(text: str, line_no: int) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise CaseFileError(f"expected a number, got {text!r}", line_no) from None


def _parse_section1(case: Case, fields: list[str], line_no: int) -> None:
    """Rooms."""
    if len(fields) not in (2, 3):
        raise CaseFileError("room lines need a number, a name and a clue", line_no)
    n = _parse_int(fields[0], line_no)
    if n <= 0:
        raise CaseFileError(f"room number must be positive, got {n}", line_no)
    if n in case.rooms:
        raise CaseFileError(f"room {n} defined twice", line_no)
    name = fields[1].strip()
    if not name:
        raise CaseFileError(f"room {n} has no name", line_no)
    clue = fields[2] if len(fields) == 3 else ""
    case.rooms[n] = RoomRecord(number=n, name=name, clue=clue or None)


def _parse_section2(case: Case, fields: list[str], line_no: int) -> None:
    """Links between rooms."""
    if len(fields) != 3:
        raise CaseFileError("link lines need a parent, a left and a right", line_no)
    parent, left, right = (_parse_int(f, line_no) for f in fields)
    if parent in case.links:
        raise CaseFileError(f"room {parent} linked twice", line_no)
    case.links[parent] = (left, right)


def _parse_section3(case: Case, fields: list[str], line_no: int) -> None:
    """Clue -> suspect bindings."""
    if len(fields) != 2 or not fields[0] or not fields[1]:
        raise CaseFileError("binding lines need a clue and a suspect", line_no)
    case.bindings.append((fields[0], fields[1]))


def _check_links(case: Case) -> None:
    if ROOT_ROOM not in case.rooms:
        raise CaseFileError(f"root room {ROOT_ROOM} is not defined")

    seen_children: set[int] = set()
    for parent, children in case.links.items():
        if parent not in case.rooms:
            raise CaseFileError(f"link from undefined room {parent}")
        for child in children:
            if not child:
                continue
            if child not in case.rooms:
                raise CaseFileError(f"room {parent} links to undefined room {child}")
            if child == ROOT_ROOM:
                raise CaseFileError(f"room {parent} links back to the root")
            if child in seen_children:
                raise CaseFileError(f"room {child} has more than one parent")
            seen_children.add(child)


def _numbered_lines(fh) -> Iterator[tuple[int, str]]:
    for line_no, line in enumerate(fh, start=1):
        line = line.rstrip("\n")
        if line.strip():
            yield line_no, line


def _read_section(
    lines: Iterator[tuple[int, str]],
    parser: Callable[[list[str], int], None],
    section: int,
) -> None:
    """Feed lines to parser until the -1 sentinel."""
    for line_no, line in lines:
        if line.strip() == SECTION_END:
            return
        parser(line.split("\t"), line_no)
    raise CaseFileError(f"section {section} is not closed by {SECTION_END}")


def _parse_file(case: Case, fh) -> None:
    section_parsers = {
        1: lambda f, n: _parse_section1(case, f, n),
        2: lambda f, n: _parse_section2(case, f, n),
        3: lambda f, n: _parse_section3(case, f, n),
    }

    lines = _numbered_lines(fh)
    for line_no, line in lines:
        section_number = _parse_int(line, line_no)
        if section_number == 0:
            break

        parser = section_parsers.get(section_number)
        if parser is None:
            raise CaseFileError(f"unknown section {section_number}", line_no)

        _read_section(lines, parser, section_number)


def load_case(data_path: Path | Traversable) -> Case:
    """Parse a case file and return a validated Case."""
    case = Case()

    with data_path.open(encoding="utf-8") as fh:
        try:
            _parse_file(case, fh)
        except UnicodeDecodeError as exc:
            raise CaseFileError(f"case file is not valid UTF-8: {exc.reason}") from exc

    _check_links(case)
    return case


def default_case_path() -> Traversable:
    """Locate the packaged mansion.dat via importlib.resources."""
    return resources.files("detective.data").joinpath("mansion.dat")
