import io

from slidetile.cli import main


def test_reads_boards_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("123456708\n123456780\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("please give the initial configuration of the board\n")
    assert "\nplease give the desired configuration\n" in out
    assert out.endswith("Number of moves: 1. Path to get there: R\n")


def test_tokens_on_one_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("123456780 123456780"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("Number of moves: 0. Path to get there: \n")


def test_boards_from_arguments_skip_prompts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["123456708", "123456780"]) == 0
    out = capsys.readouterr().out
    assert "please give" not in out
    assert out == "Number of moves: 1. Path to get there: R\n"


def test_unsolvable_board_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["123456789", "123456780"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("slidetile:")
    assert "Number of moves" not in captured.out