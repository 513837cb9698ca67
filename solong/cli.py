"""Command line entry point: validate a .ber map file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from solong.mapcheck import (
    MIN_SIDE,
    MapError,
    check_component_counts,
    check_outer_walls,
    count_components,
    count_lines,
    map_width,
    read_map,
)

_EXTENSION = ".ber"


def is_ber_file(path: str) -> bool:
    """True when path has something before a trailing '.ber'."""
    return len(path) > len(_EXTENSION) and path.endswith(_EXTENSION)


def _validate(path: str) -> None:
    if not is_ber_file(path):
        raise MapError(f"map file must end in {_EXTENSION}")
    height = count_lines(path)
    if height < MIN_SIDE:
        raise MapError(f"map must have at least {MIN_SIDE} rows")
    rows = read_map(path, height)
    for row in rows:
        print(row)
    width = map_width(rows)
    if width < MIN_SIDE:
        raise MapError(f"map must have at least {MIN_SIDE} columns")
    exits, players, collectibles = count_components(rows)
    check_component_counts(exits, players, collectibles)
    print(f"width: {width} height: {height}")
    print(f"exit: {exits} player: {players} collectionables: {collectibles}")
    check_outer_walls(rows)
    print("mapa bien")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: solong MAP.ber", file=sys.stderr)
        return 1
    try:
        _validate(args[0])
    except MapError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())