# wordhunt

A solver for 4x4 Word Hunt boards. Give it the sixteen letters of a board, row
by row, and it finds every dictionary word of three or more letters that can be
traced through horizontally, vertically or diagonally adjacent tiles without
using a tile twice.

## Installing

```
pip install .
```

## Using the command

```
wordhunt
```

The command loads a word list, prints a welcome banner, then prompts with `>>`
for boards. Type the sixteen letters in order with no spaces, for example:

```
>> abcdefghijklmnop
```

Letters are lower-cased before searching. The words found are written to
`words.txt` in the current directory, grouped by length with the longest words
first; the file is overwritten for each board. Enter another board at the next
prompt, or type `exit` to quit.

Options:

- `--dictionary PATH` – the word list to load (default `/usr/share/dict/words`).
  Every run of ASCII letters in the file is taken as a word; anything else
  separates words. If the file cannot be read the command prints
  `File: PATH cannot open` and exits with status 1.
- `--output PATH` – where to write the found words (default `words.txt`).

Input that is not exactly sixteen characters (other than `exit`), including the
end of input, prints `exiting - not 16 letters` and ends the program with
status 1.

## Using the library

```python
from wordhunt.board import Board
from wordhunt.dictionary import Trie, parse_words
from wordhunt.solver import find_words, format_words

dictionary = Trie(parse_words("cat\nact\ntack\n"))

board = Board.from_letters("catkxxxxxxxxxxxx")
found = find_words(board, dictionary)   # {3: ['cat']}
print(format_words(found))
```

- `wordhunt.dictionary`
  - `Trie(words=())` – a set of words; `insert(word)` adds one and returns
    `False` if it was already there, `word in trie` tests membership, and
    `words()` yields every stored word.
  - `parse_words(text)` – splits text into runs of ASCII letters.
  - `load_dictionary(path)` – builds a `Trie` from a word-list file; raises
    `OSError` if the file cannot be read.
- `wordhunt.board`
  - `Board.from_letters(letters)` – builds a board; raises `BoardError` (a
    `ValueError`) for anything but sixteen characters and `ExitRequested` for
    the input `exit`.
  - `Board.tiles()` – the sixteen `Tile` objects (`letter`, `index`, `row`,
    `col`).
  - `Board.neighbors(index)` – the tiles adjacent to a tile.
  - `board[index]` or `board[row, col]` – a single tile.
- `wordhunt.solver`
  - `find_words(board, dictionary)` – a dict mapping word length to the words
    of that length, each listed once in the order first found.
  - `format_words(found)` – the report text, longest words first.
  - `write_words(found, file)` – writes the report to an open text file.
  - `main(argv=None)` – the `wordhunt` command; returns its exit status.

## Running the tests

```
pip install .[test]
pytest
```