import logging

logger = logging.getLogger(__name__)

PLAYER_X = 'X'
PLAYER_O = 'O'
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
CENTER = 4

# rows, cols, diags - checked in this order
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def other_player(mark):
    return PLAYER_O if mark == PLAYER_X else PLAYER_X


def _first_winning_line(board):
    for line in LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def detect_winner(board):
    """
    mark of the first completed line, or None
    """
    if len(board) != CELL_COUNT:
        raise ValueError(f"board must have {CELL_COUNT} cells, got {len(board)}")
    line = _first_winning_line(board)
    return board[line[0]] if line else None


class GameState:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        init board and flags
        """
        self.board = [None] * CELL_COUNT   # None, 'X' or 'O'
        self.current_player = PLAYER_X     # X always opens
        self.winner = None                 # 'X', 'O', or None
        self.is_draw = False               # full board, no winner

    @property
    def is_game_over(self):
        return self.winner is not None or self.is_draw

    @property
    def move_count(self):
        return sum(1 for cell in self.board if cell is not None)

    def apply_move(self, index):
        """
        place current player's mark, flip turn, check result
        returns True if the move was taken, False if it was ignored
        """
        # occupied, out of range or finished: quietly decline
        if self.is_game_over or not self.is_cell_empty(index):
            logger.debug("ignored move at %s", index)
            return False
        player = self.current_player
        self.board[index] = player
        self.current_player = other_player(player)
        self.winner = detect_winner(self.board)
        if self.winner is None and all(cell is not None for cell in self.board):
            self.is_draw = True
        logger.debug("%s took %d (winner=%s draw=%s)",
                     player, index, self.winner, self.is_draw)
        return True

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        return 0 <= index < CELL_COUNT and self.board[index] is None

    def empty_cells(self):
        return [i for i, cell in enumerate(self.board) if cell is None]

    def winning_line(self):
        return _first_winning_line(self.board)

    def status_text(self, labels=None):
        """
        status line for the view; labels can decorate the next-player mark
        e.g. {'X': 'X (You)'}
        """
        if self.winner:
            return f"Winner: {self.winner}"
        if self.is_draw:
            return "Draw!"
        mark = self.current_player
        if labels:
            mark = labels.get(mark, mark)
        return f"Next player: {mark}"

    def reset_game(self):
        """
        clear board and reset flags
        """
        # back to fresh state
        self.board = [None] * CELL_COUNT
        self.current_player = PLAYER_X
        self.winner = None; self.is_draw = False
