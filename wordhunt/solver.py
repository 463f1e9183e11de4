"""Finding dictionary words on a board and the interactive command."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from wordhunt.board import Board, BoardError, ExitRequested, TILE_COUNT, Tile
from wordhunt.dictionary import DEFAULT_DICTIONARY, Trie, load_dictionary

MIN_WORD_LENGTH = 3
DEFAULT_OUTPUT = "words.txt"

_BANNER = (
    "\n************************************************************ \n"
    "             Welcome to the Word Hunt Solver! \n"
    " Input your letters in order and with no spaces in between \n"
    "   Your solved words will open up in the words.txt file\n"
    "                           Enjoy!"
    "\n************************************************************ \n"
)


def find_words(board: Board, dictionary: Trie) -> dict[int, list[str]]:
    """Return the dictionary words traceable on the board, grouped by length.

    Each group lists its words once, in the order they were first found.
    """
    found: dict[int, list[str]] = {}
    seen: set[str] = set()

    def visit(tile: Tile, word: str, visited: set[int]) -> None:
        if not dictionary._has_prefix(word):
            return
        if len(word) >= MIN_WORD_LENGTH and word in dictionary and word not in seen:
            seen.add(word)
            found.setdefault(len(word), []).append(word)
        for neighbor in board.neighbors(tile.index):
            if neighbor.index not in visited:
                visited.add(neighbor.index)
                visit(neighbor, word + neighbor.letter, visited)
                visited.discard(neighbor.index)

    for tile in board.tiles():
        visit(tile, tile.letter, {tile.index})
    return found


def format_words(found: dict[int, list[str]]) -> str:
    """Render the found words, longest first, as the solver's report."""
    sections = []
    for length in sorted(found, reverse=True):
        words = found[length]
        if not words:
            continue
        lines = [f"Words with {length} letters: ", "--------------------------"]
        lines.extend(words)
        sections.append("\n".join(lines) + "\n\n")
    return "".join(sections)


def write_words(found: dict[int, list[str]], file: TextIO) -> None:
    file.write(format_words(found))
    file.flush()


def _read_command(stream: TextIO) -> str:
    line = stream.readline()
    return line[:-1] if line.endswith("\n") else line


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordhunt", description="Solve 4x4 Word Hunt boards."
    )
    parser.add_argument("--dictionary", default=DEFAULT_DICTIONARY)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        dictionary = load_dictionary(args.dictionary)
    except OSError:
        print(f"File: {args.dictionary} cannot open")
        return 1

    print(_BANNER)
    while True:
        print(">> ", end="", flush=True)
        command = _read_command(sys.stdin)
        try:
            board = Board.from_letters(command)
        except ExitRequested:
            print("Exiting")
            return 0
        except BoardError:
            print(f"exiting - not {TILE_COUNT} letters")
            return 1
        found = find_words(board, dictionary)
        try:
            with open(args.output, "w", encoding="utf-8") as handle:
                write_words(found, handle)
        except OSError as exc:
            print(f"Error opening file: {exc}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())