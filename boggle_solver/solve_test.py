import io

import pytest
from inline_snapshot import snapshot

from boggle_solver.solve import main

DICT_ARGS = ["--dictionary", "testdata/words.txt"]


def write_board(tmp_path, text: str) -> str:
    path = tmp_path / "board.txt"
    path.write_text(text)
    return str(path)


def test_solve_file(tmp_path, capsys):
    board = write_board(tmp_path, "s t a r\ne a e t\nn t s a\nd o g s\n")
    main([*DICT_ARGS, board])
    assert capsys.readouterr().out == snapshot(
        """\
Board
-----
S  T  A  R  \n\
E  A  E  T  \n\
N  T  S  A  \n\
D  O  G  S  \n\
There are 15 possible words.
STARE
ANTS
DOGS
EAST
NEST
RATS
SATE
SEAT
SENT
STAG
STAR
TATS
TEAT
TENT
TOGS
"""
    )


def test_solve_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("QU I T E\nX X X X\nX X X X\nX X X X\n"))
    main([*DICT_ARGS])
    out = capsys.readouterr().out
    assert out.startswith("Board\n-----\nQU I  T  E  \n")
    assert out.endswith("There are 2 possible words.\nQUITE\nQUIT\n")
    assert "Timings" not in out


def test_solve_parallel(tmp_path, capsys):
    board = write_board(tmp_path, "S T A R\nE A E T\nN T S A\nD O G S\n")
    main([*DICT_ARGS, board])
    sequential = capsys.readouterr().out
    main([*DICT_ARGS, "--processes", "2", board])
    assert capsys.readouterr().out == sequential


def test_timing(tmp_path, capsys):
    board = write_board(tmp_path, "S T A R\nE A E T\nN T S A\nD O G S\n")
    main([*DICT_ARGS, "--timing", board])
    out = capsys.readouterr().out
    _, timings = out.split("\nTimings\n-------\n")
    labels = [line.rsplit("  ", 1)[0].strip() for line in timings.strip().split("\n")]
    assert labels == [
        "read word list from file:",
        "insert all the words into a new trie",
        "find all words once the trie has been created",
        "total",
    ]


def test_random(capsys):
    main([*DICT_ARGS, "--random", "--random_seed", "808813", "--timing"])
    first = capsys.readouterr().out
    assert first.startswith("Board\n-----\n")
    assert "generate a random board" in first
    main([*DICT_ARGS, "--random", "--random_seed", "808813"])
    second = capsys.readouterr().out
    assert first.split("\nTimings\n")[0] == second


def test_bad_letter(tmp_path, capsys):
    board = write_board(tmp_path, "S T A R\nE A E T\nN T S A\nD O G 7\n")
    with pytest.raises(SystemExit) as e:
        main([*DICT_ARGS, board])
    assert e.value.code == "Bad letter: '7'"
    assert capsys.readouterr().out == ""


def test_bad_dimensions(tmp_path):
    board = write_board(tmp_path, "S T A R\nE A E T\nN T S A\n")
    with pytest.raises(SystemExit) as e:
        main([*DICT_ARGS, board])
    assert e.value.code == "Invalid board dimensions."


def test_missing_dictionary(tmp_path):
    board = write_board(tmp_path, "S T A R\nE A E T\nN T S A\nD O G S\n")
    with pytest.raises(SystemExit) as e:
        main(["--dictionary", str(tmp_path / "nope.txt"), board])
    assert e.value.code.startswith("Unable to read word list")
    assert "nope.txt" in e.value.code


def test_board_not_utf8(tmp_path):
    path = tmp_path / "board.txt"
    path.write_bytes(b"S T A R\nE A E T\nN T S A\nD O G \xff\n")
    with pytest.raises(SystemExit) as e:
        main([*DICT_ARGS, str(path)])
    assert e.value.code.startswith("Unable to read board:")
    assert "0xff" in e.value.code


def test_dictionary_not_utf8(tmp_path):
    board = write_board(tmp_path, "S T A R\nE A E T\nN T S A\nD O G S\n")
    dictionary = tmp_path / "latin1.txt"
    dictionary.write_bytes(b"star\ncaf\xe9s\n")
    with pytest.raises(SystemExit) as e:
        main(["--dictionary", str(dictionary), board])
    assert e.value.code.startswith(f"Unable to read word list {dictionary}:")
    assert "0xe9" in e.value.code
