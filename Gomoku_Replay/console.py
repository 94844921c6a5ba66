"""Text front end: prints the board and move list, reads moves and jumps from stdin."""

try:
    from GameSession import HistoryIndexError
except ImportError:
    from Gomoku_Replay.GameSession import HistoryIndexError


HELP_TEXT = "Commands: 'row col' to play, 'jump N' to revisit move N, 'quit' to exit."


def format_board(board):
    """Board text with column indices on top and row indices on the left."""
    width = len(str(board.size - 1))
    header = " " * (width + 1) + " ".join(str(c % 10) for c in range(board.size))
    lines = [header]
    for r, text_row in enumerate(board.to_text().splitlines()):
        lines.append(f"{r:>{width}} {' '.join(text_row)}")
    return "\n".join(lines)


def format_move_list(view):
    lines = []
    for index, label in view.move_list:
        marker = ">" if index == view.current_move else " "
        lines.append(f"{marker} {index:>3}. {label}")
    return "\n".join(lines)


class ConsoleFrontEnd:
    def __init__(self, session, input_fn=input, output=print):
        self.session = session
        self.input_fn = input_fn
        self.output = output

    def render(self):
        view = self.session.current_view()
        self.output(format_board(view.board))
        self.output(view.status)
        self.output(format_move_list(view))

    def handle_command(self, line):
        """Apply one command; returns False when the user asked to quit."""
        parts = line.strip().lower().split()
        if not parts:
            return True
        if parts[0] in ("quit", "q", "exit"):
            return False
        if parts[0] in ("help", "h", "?"):
            self.output(HELP_TEXT)
            return True

        if parts[0] in ("jump", "j"):
            if len(parts) != 2:
                self.output("Invalid input format; expected 'jump N'")
                return True
            try:
                self.session.jump_to(int(parts[1]))
            except ValueError:
                self.output("Invalid input format; move number must be an integer")
            except HistoryIndexError as exc:
                self.output(f"Cannot jump: {exc}")
            return True

        try:
            row_str, col_str = parts
            row, col = int(row_str), int(col_str)
        except ValueError:
            self.output("Invalid input format; expected two integers")
            return True

        if not self.session.play(row, col):
            self.output(f"Move ({row}, {col}) not allowed")
        return True

    def run(self):
        self.output(HELP_TEXT)
        while True:
            self.render()
            try:
                line = self.input_fn("> ")
            except EOFError:
                self.output("")
                break
            if not self.handle_command(line):
                break
