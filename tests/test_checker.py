import io

import pytest

from pushswap.checker import apply_move, main
from pushswap.stacks import Board


def _board(values):
    out = io.StringIO()
    return Board(values, out), out


def test_swap_a_is_announced():
    board, out = _board([2, 1, 3])
    apply_move(board, "sa\n")
    assert list(board.a) == [1, 2, 3]
    assert out.getvalue() == "sa\n"


def test_rotate_a_is_silent():
    board, out = _board([1, 2, 3])
    apply_move(board, "ra\n")
    assert list(board.a) == [2, 3, 1]
    assert out.getvalue() == ""


def test_push_round_trip():
    board, out = _board([4, 5, 6])
    apply_move(board, "pb\n")
    assert list(board.a) == [5, 6]
    assert list(board.b) == [4]
    apply_move(board, "pa\n")
    assert list(board.a) == [4, 5, 6]
    assert len(board.b) == 0
    assert out.getvalue() == "pb\npa\n"


def test_rra_line_also_matches_rr():
    board, out = _board([1, 2, 3])
    apply_move(board, "pb\n")
    apply_move(board, "pb\n")
    before_a = list(board.a)
    before_b = list(board.b)
    apply_move(board, "rra\n")
    assert list(board.a) == before_a
    assert list(board.b) == before_b[1:] + before_b[:1]
    assert out.getvalue().endswith("rr\n")


def test_rrr_line_leaves_stacks_unchanged():
    board, out = _board([1, 2, 3, 4])
    apply_move(board, "pb\n")
    apply_move(board, "pb\n")
    before = (list(board.a), list(board.b))
    apply_move(board, "rrr\n")
    assert (list(board.a), list(board.b)) == before
    assert out.getvalue().endswith("rr\nrrr\n")


def test_unknown_line_does_nothing():
    board, out = _board([3, 1, 2])
    apply_move(board, "xx\n")
    assert list(board.a) == [3, 1, 2]
    assert out.getvalue() == ""


def test_rotate_empty_b_raises():
    board, _ = _board([1, 2])
    with pytest.raises(IndexError):
        apply_move(board, "rb\n")


def _run(monkeypatch, capsys, args, moves=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(moves))
    status = main(args)
    return status, capsys.readouterr().out


def test_main_without_arguments(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, []) == (0, "")


def test_main_rejects_bad_number(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, ["1", "a"]) == (0, "Error\n")


def test_main_rejects_duplicates(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, ["1", "1"]) == (0, "Error\n")


def test_main_sorted_input_prints_nothing(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, ["1", "2", "3"], "sa\n") == (0, "")


def test_main_reports_ok(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, ["2", "1", "3"], "sa\n")
    assert status == 0
    assert out == "sa\nOK\n"


def test_main_reports_ko(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, ["2", "1", "3"], "ra\n")
    assert status == 0
    assert out == "KO\n"