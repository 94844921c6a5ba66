"""Tests for the console front end command handling and rendering."""

from Gomoku_Replay.Board import Mark
from Gomoku_Replay.GameSession import GameSession
from Gomoku_Replay.console import ConsoleFrontEnd, format_board


def _front_end(size=15, inputs=()):
    session = GameSession(board_size=size, logger=lambda *_: None)
    out = []
    feed = iter(inputs)

    def fake_input(prompt=""):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return ConsoleFrontEnd(session, input_fn=fake_input, output=out.append), session, out


def test_play_and_jump_commands():
    fe, session, out = _front_end()
    assert fe.handle_command("7 7") is True
    assert session.current_board[7][7] is Mark.X
    assert fe.handle_command("jump 0") is True
    assert session.current_move == 0
    assert fe.handle_command("j 1") is True
    assert session.current_move == 1
    assert out == []


def test_quit_and_blank_lines():
    fe, _, _ = _front_end()
    assert fe.handle_command("") is True
    assert fe.handle_command("   ") is True
    assert fe.handle_command("quit") is False
    assert fe.handle_command("Q") is False


def test_bad_input_is_reported_and_loop_continues():
    fe, session, out = _front_end()
    assert fe.handle_command("seven seven") is True
    assert fe.handle_command("1 2 3") is True
    assert fe.handle_command("jump") is True
    assert fe.handle_command("jump x") is True
    assert fe.handle_command("jump 4") is True
    assert session.history == (session.history[0],)
    assert len(out) == 5
    assert out[-1].startswith("Cannot jump:")


def test_rejected_move_is_reported():
    fe, session, out = _front_end()
    fe.handle_command("0 0")
    fe.handle_command("0 0")
    assert out == ["Move (0, 0) not allowed"]
    assert len(session.history) == 2


def test_render_shows_board_status_and_current_move_marker():
    fe, session, out = _front_end(size=5)
    session.play(0, 0)
    session.play(1, 1)
    session.jump_to(1)
    fe.render()
    board_text, status, moves = out
    assert board_text.splitlines()[0] == "  0 1 2 3 4"
    assert board_text.splitlines()[1] == "0 X . . . ."
    assert board_text.splitlines()[2] == "1 . . . . ."
    assert status == "Next player: O"
    assert moves.splitlines() == [
        "    0. Go to game start",
        ">   1. Go to move #1",
        "    2. Go to move #2",
    ]


def test_format_board_pads_two_digit_rows():
    session = GameSession(board_size=12, logger=lambda *_: None)
    lines = format_board(session.current_board).splitlines()
    assert lines[0].startswith("   0 1")
    assert lines[1].startswith(" 0 .")
    assert lines[11].startswith("10 .")
    assert lines[12].startswith("11 .")


def test_run_stops_on_quit_and_eof():
    fe, session, out = _front_end(inputs=["7 7", "7 8", "quit", "0 0"])
    fe.run()
    assert len(session.history) == 3

    fe2, session2, _ = _front_end(inputs=["1 1"])
    fe2.run()
    assert len(session2.history) == 2
