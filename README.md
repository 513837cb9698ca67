# solong

`solong` loads and validates `.ber` map files for a small collect-and-escape
puzzle game. A map is a rectangle of characters:

- `1`: wall
- `0`: empty floor
- `C`: collectible
- `E`: exit
- `P`: player start

A map is valid only if all of these hold:

- It has at least 3 rows.
- Every row has the same width, and that width is at least 3.
- It uses only the characters listed above.
- It has exactly one exit, exactly one player and at least one collectible.
- Walls surround it completely.

## Installation

```
pip install .
```

## Command line

```
solong maps/level1.ber
```

The command takes exactly one argument, the map file. It checks the file and
prints the following to standard output, in this order:

1. Each map row.
2. A line `width: W height: H`.
3. A line `exit: N player: N collectionables: N`.
4. The line `mapa bien` once every check has passed.

Output stops at the first check that fails. On failure the command writes
`Error` and the reason to standard error.

The command exits with status 0 if the map is valid and with status 1 if it
is not. It also exits with status 1 in these cases:

- The argument count is wrong. It then prints a usage line.
- The file name does not end in `.ber`, or has nothing in front of it.
- The file cannot be opened.

## Library use

```python
from solong.mapcheck import load_map, MapError

try:
    data = load_map("maps/level1.ber")
except MapError as err:
    print("invalid map:", err)
else:
    print(data.width, data.height, data.collectionable)
```

`load_map` returns a `MapData` with these fields:

- `height`
- `width`
- `content`: the rows, with newlines removed
- `player`
- `exit`
- `collectionable`

Every failed check raises `MapError`.

The building blocks in `solong.mapcheck` are public as well:

- `count_lines(path)`: the number of lines in the file.
- `read_map(path, height)`: the first `height` lines, with newlines removed.
- `map_width(rows)`: the common row length. Raises `MapError` if the rows differ.
- `count_components(rows)`: the number of exits, players and collectibles. Raises `MapError` on any unknown character.
- `check_component_counts(exits, players, collectibles)`
- `check_outer_walls(rows)`

`solong.cli.is_ber_file(path)` tells whether a file name has the map extension.

Files are read as Latin-1, and line endings are kept exactly as they are in
the file. Only `\n` is removed from each row.

### Smaller helpers

- `solong.lines.LineReader(stream, buffer_size=25)` reads lines from a text or binary stream, `buffer_size` characters at a time. Each line keeps its trailing newline. `readline()` returns `None` at the end of the stream, and the reader can be iterated. `read_lines(stream, buffer_size=25)` collects every remaining line into a list.
- `solong.strings` has text helpers:
  - `split`
  - `strtrim`
  - `substr`
  - `strnstr`
  - `strncmp`
  - `strmapi`
  - `strchr`
  - `strrchr`

  The search functions return indexes, or `None` when nothing is found.
- `solong.chars` has ASCII helpers:
  - Character classes: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`.
  - Case conversion: `to_lower`, `to_upper`.
  - Integer conversion: `atoi`, `itoa`, `number_len`.

## What it does not do

This package only reads and checks maps. These things are not part of it:

- It has no game window, graphics or input handling.
- It does not check whether the collectibles and the exit can be reached from the player start.

## Tests

```
pip install .[test]
pytest
```