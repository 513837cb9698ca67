"""Loading and validation of .ber map files."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from os import PathLike
from typing import Union

from solong.lines import LineReader
from solong.strings import strtrim

MAP_COMPONENTS = "01CEP"
MAP_EXIT = "E"
MAP_PLAYER = "P"
MAP_COLLECTIONABLE = "C"
MAP_EMPTY = "0"
MAP_WALL = "1"

MIN_SIDE = 3

Path = Union[str, "PathLike[str]"]


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


@dataclass
class MapData:
    """A validated map and the number of each special component it holds."""

    height: int
    width: int
    content: list[str] = field(default_factory=list)
    player: int = 0
    exit: int = 0
    collectionable: int = 0


def _open(path: Path):
    try:
        # latin-1 never fails to decode; newline="" keeps line endings untouched.
        return open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise MapError(f"cannot open map file {path!s}: {exc.strerror}") from exc


def count_lines(path: Path) -> int:
    """Number of lines in the file; a last line without newline counts too."""
    with _open(path) as stream:
        return sum(1 for _ in LineReader(stream))


def read_map(path: Path, height: int) -> list[str]:
    """Read the first height lines of the file with their newlines removed.

    Lines missing from a short file come back as empty strings.
    """
    if height < 0:
        raise ValueError("height must not be negative")
    with _open(path) as stream:
        rows = [strtrim(line, "\n") for line in islice(LineReader(stream), height)]
    rows.extend("" for _ in range(height - len(rows)))
    return rows


def map_width(rows: list[str]) -> int:
    """Common length of all rows; raises MapError if they differ."""
    if not rows:
        raise MapError("map has no rows")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("map rows differ in length")
    return width


def count_components(rows: list[str]) -> tuple[int, int, int]:
    """Count exits, players and collectibles, in that order.

    Raises MapError on any character that is not a map component.
    """
    exits = players = collectibles = 0
    for row in rows:
        for ch in row:
            if ch not in MAP_COMPONENTS:
                raise MapError(f"invalid map component {ch!r}")
            if ch == MAP_EXIT:
                exits += 1
            elif ch == MAP_PLAYER:
                players += 1
            elif ch == MAP_COLLECTIONABLE:
                collectibles += 1
    return exits, players, collectibles


def check_outer_walls(rows: list[str]) -> None:
    """Raise MapError unless the map border is made entirely of walls."""
    if not rows or not rows[0]:
        raise MapError("map is empty")
    border = rows[0] + rows[-1] + "".join(row[0] + row[-1] for row in rows)
    if any(ch != MAP_WALL for ch in border):
        raise MapError("map is not surrounded by walls")


def check_component_counts(exits: int, players: int, collectibles: int) -> None:
    """Raise MapError unless there is one exit, one player and a collectible."""
    if exits != 1:
        raise MapError(f"map must have exactly one exit, found {exits}")
    if players != 1:
        raise MapError(f"map must have exactly one player, found {players}")
    if collectibles < 1:
        raise MapError("map must have at least one collectible")


def load_map(path: Path) -> MapData:
    """Read and fully validate a map file."""
    height = count_lines(path)
    if height < MIN_SIDE:
        raise MapError(f"map must have at least {MIN_SIDE} rows")
    rows = read_map(path, height)
    width = map_width(rows)
    if width < MIN_SIDE:
        raise MapError(f"map must have at least {MIN_SIDE} columns")
    exits, players, collectibles = count_components(rows)
    check_component_counts(exits, players, collectibles)
    check_outer_walls(rows)
    return MapData(
        height=height,
        width=width,
        content=rows,
        player=players,
        exit=exits,
        collectionable=collectibles,
    )