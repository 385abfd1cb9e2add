"""Terminal front end: key reading, screen drawing and the command line."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, Optional, Sequence

from .field import EmptyCellError, FieldError
from .game import Game, Key
from .mapfile import FileReadError, map_exists

_LETTERS = {
    "w": Key.W,
    "a": Key.A,
    "s": Key.S,
    "d": Key.D,
    "n": Key.BACK,
    "q": Key.QUIT,
    "\x1b": Key.HELP,
}
_WINDOWS_ARROWS = {"H": Key.UP, "P": Key.DOWN, "K": Key.LEFT, "M": Key.RIGHT}
_ANSI_ARROWS = {"[A": Key.UP, "[B": Key.DOWN, "[D": Key.LEFT, "[C": Key.RIGHT}


def usage() -> str:
    """The help text shown for unrecognised arguments."""
    return (
        "15 Puzzle Game\n"
        "Game history is saved in sessions/\n"
        "Game settings are stored in settings/config.txt:\n"
        "- 'ctrl >' : arrow keys control\n"
        "- 'ctrl wasd' : WASD keys control\n"
        "- 'empty file or any other value' : both arrow keys and WASD control\n"
        "- 'dim n' : we give the value to the standard field size\n"
        "- 'empty file or any other value' : n = 3\n"
        "\n"
        "Map creation pseudosyntax:\n"
        "'REM' : comment\n"
        "# fn (-) : declaration, where '-' is:\n"
        "* 'solved' : solved field state\n"
        "* 'field' : initial field state\n"
        "* 'desc' : map description\n"
        "'# endfn' : end of declaration\n"
        "'#EMPTY' : empty cell value\n"
        "'#CREATOR' : map creator's name"
    )


def _decode(char: str) -> Key:
    return _LETTERS.get(char.lower(), Key.OTHER)


def read_key() -> Key:
    """Block until one key is pressed and return it decoded."""
    if os.name == "nt":
        import msvcrt

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            return _WINDOWS_ARROWS.get(msvcrt.getwch(), Key.OTHER)
        return _decode(char)

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        char = os.read(fd, 1).decode(errors="replace")
        if char == "\x1b":
            ready, _, _ = select.select([fd], [], [], 0.05)
            if not ready:
                return Key.HELP
            sequence = os.read(fd, 2).decode(errors="replace")
            return _ANSI_ARROWS.get(sequence, Key.OTHER)
        return _decode(char)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def clear_screen() -> None:
    """Clear the terminal."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def _show(text: str) -> None:
    clear_screen()
    print(text, end="", flush=True)


def run(game: Game, read: Callable[[], Key] = read_key) -> bool:
    """Play ``game`` until it is solved or the player quits.

    The session is saved either way; returns whether the board was solved.
    """
    _show(game.render_board())
    while True:
        key = read()
        if key is Key.QUIT:
            break
        if key is Key.HELP:
            _show(game.render_help())
            read()
        else:
            game.handle_key(key)
        _show(game.render_board())
        if game.is_solved():
            break
    game.save()
    clear_screen()
    print(game.render_summary())
    return game.is_solved()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        options: Optional[tuple[Optional[str], bool]] = (None, False)
    elif len(args) == 1 and args[0] == "-backward":
        options = (None, True)
    elif len(args) == 2 and map_exists(args[0]) and args[1] == "-backward":
        options = (args[0], True)
    elif len(args) == 1 and map_exists(args[0]):
        options = (args[0], False)
    else:
        options = None

    if options is None:
        print(usage())
        return 0

    map_name, backward_mode = options
    try:
        run(Game(map_name, backward_mode))
    except (FieldError, EmptyCellError, FileReadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())