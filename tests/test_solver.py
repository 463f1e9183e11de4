import io

import pytest

from wordhunt.board import Board
from wordhunt.dictionary import Trie
from wordhunt.solver import find_words, format_words, main, write_words

LETTERS = "catsxxxxxxxxxxxx"


@pytest.fixture
def board():
    return Board.from_letters(LETTERS)


def test_find_words_groups_by_length(board):
    found = find_words(board, Trie(["cat", "cats", "ca", "act"]))
    assert found == {3: ["cat"], 4: ["cats"]}


def test_find_words_keeps_discovery_order(board):
    found = find_words(board, Trie(["tac", "cat"]))
    assert found[3] == ["cat", "tac"]


def test_find_words_deduplicates():
    found = find_words(Board.from_letters("a" * 16), Trie(["aaa"]))
    assert found == {3: ["aaa"]}


def test_find_words_results_are_valid(board):
    words = ["cat", "cats", "tax", "xxx", "sxx", "zzz"]
    dictionary = Trie(words)
    found = find_words(board, dictionary)
    for length, group in found.items():
        for word in group:
            assert word in dictionary
            assert len(word) == length
    assert "zzz" not in found.get(3, [])


def test_format_words_longest_first():
    text = format_words({3: ["cat"], 4: ["cats"]})
    assert text == (
        "Words with 4 letters: \n--------------------------\ncats\n\n"
        "Words with 3 letters: \n--------------------------\ncat\n\n"
    )


def test_format_words_empty():
    assert format_words({}) == ""


def test_write_words(board):
    found = find_words(board, Trie(["cat"]))
    buffer = io.StringIO()
    write_words(found, buffer)
    assert buffer.getvalue() == format_words(found)


def test_main_solves_then_exits(tmp_path, monkeypatch, capsys):
    dictionary = tmp_path / "words"
    dictionary.write_text("cat\ncats\n")
    output = tmp_path / "out.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO(LETTERS + "\nexit\n"))
    code = main(["--dictionary", str(dictionary), "--output", str(output)])
    assert code == 0
    assert output.read_text() == format_words({3: ["cat"], 4: ["cats"]})
    out = capsys.readouterr().out
    assert "Welcome to the Word Hunt Solver!" in out
    assert out.rstrip().endswith("Exiting")


def test_main_rejects_bad_input(tmp_path, monkeypatch, capsys):
    dictionary = tmp_path / "words"
    dictionary.write_text("cat\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    code = main(["--dictionary", str(dictionary), "--output", str(tmp_path / "o")])
    assert code == 1
    assert "exiting - not 16 letters" in capsys.readouterr().out


def test_main_missing_dictionary(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert main(["--dictionary", str(missing)]) == 1
    assert f"File: {missing} cannot open" in capsys.readouterr().out