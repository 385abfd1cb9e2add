# slidepuzzle

A sliding-tile puzzle for the terminal. You can play a randomly shuffled
square board, or load a board from a map file. Every game is written to a
session log when it ends.

## Installation

```
pip install .
```

Run the tests with `pip install .[test]` and then `pytest`.

## Playing

```
slidepuzzle                  # random board, standard mode
slidepuzzle -backward        # random board, moves can be taken back
slidepuzzle mymap            # load maps/mymap.txt
slidepuzzle mymap -backward  # load a map with undo enabled
```

All paths (`maps/`, `settings/config.txt`, `sessions/`) are relative to the
current directory. A map name is accepted only if the file can be opened;
if the arguments do not match any of the forms above, a short usage text is
printed instead. A map that is malformed, or a session file that cannot be
written, makes the command print `error: ...` and exit with status 1.

Keys:

- arrow keys and/or `W`/`A`/`S`/`D` (depending on the `ctrl` setting) move
  a tile into the empty cell
- `N` takes back the last move (backward mode only)
- `ESC` shows help: the control scheme, the mode, the map's creator, the
  empty-cell marker and the solved board; any key returns to the game
- `Q` ends the game and saves the session

The game ends by itself once the board matches the solved state. The
session (number of moves, seconds played, mode, whether the board was
solved, and every board state in order) is then written to
`sessions/session_<timestamp>.txt`, and a summary is shown. The `sessions/`
directory must already exist.

## Random boards

A random board of size `n` holds the numbers `1` to `n*n - 1` in order with
the empty cell in the bottom-right corner, and is then shuffled by `20 * n`
random moves of the empty cell. For `n` up to 3 the empty cell is `_`; for
larger boards it is `__` and the numbers 1 to 9 are written `_1` to `_9` so
that the columns line up.

## Settings

`settings/config.txt` is read at start-up, if it exists:

```
REM lines beginning with REM are comments
ctrl wasd
dim 4
```

- `ctrl wasd` uses WASD only, `ctrl >` uses the arrow keys only. With no
  `ctrl` line, both work. A `ctrl` line naming neither stops reading the
  file there.
- `dim` followed by one digit sets the size of random boards (default 3).

## Map files

Maps are kept in `maps/`; the `.txt` extension may be left off on the
command line.

```
#CREATOR someone
#EMPTY _
REM current
1;2;3
4;_;6
7;5;8
REM solved
1;2;3
4;5;6
7;8;_
```

`REM current` and `REM solved` start the two boards; any other `REM` line
ends the block. Cells are separated by `;` and spaces around them are
dropped. Both boards have to be square, and both have to contain the
empty-cell marker given by `#EMPTY`.

## Using it as a library

```python
from slidepuzzle.game import Game, Key, generate_solved

solved = generate_solved(3)
print(solved)
print(solved.find("_"))      # (2, 2)

game = Game(backward_mode=True, session_dir="sessions/")
game.handle_key(Key.UP)      # True if the board changed
game.handle_key(Key.BACK)    # undo
print(game.render_board())
print(game.is_solved())
```

- `slidepuzzle.field.Field` is the square board: `find`, `swap`, `plain`,
  `copy`, `max_length`, equality and a padded text form. It raises
  `FieldError`, `MoveError` and `EmptyCellError`.
- `slidepuzzle.mapfile.read_map(lines, meta)` parses map lines into a
  `slidepuzzle.settings.Meta`; `map_exists` checks for a map file.
- `slidepuzzle.settings.parse_settings` and `load_settings` read settings.
- `slidepuzzle.game.Game` holds the game; `save()` writes the session log
  and returns its path; `render_help()` and `render_summary()` give the
  help and end-of-game texts.
- `slidepuzzle.cli.run(game, read)` plays a game with any key source.

## Limitations

Key input needs a real terminal: on Windows it reads keys through the
console, elsewhere it switches standard input to raw mode. There is no
graphical interface and no way to resume a saved session; session files
are logs only.