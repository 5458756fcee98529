import logging
import random

from .game_logic import CENTER, PLAYER_O, PLAYER_X, detect_winner

logger = logging.getLogger(__name__)


class OpponentPolicy:
    """
    rule-based computer player

    tiers, first match wins:
      1. win now
      2. block the other side's immediate win
      3. take the center
      4. random empty cell
    """
    def __init__(self, mark=PLAYER_O, rng=None):
        self.mark = mark
        self.opponent_mark = PLAYER_X if mark == PLAYER_O else PLAYER_O
        self.rng = rng or random.Random()   # seed it for reproducible games
        self.last_tier = None               # which tier picked the last move

    def _completing_move(self, board, empty, mark):
        # first empty cell (ascending) that finishes a line for mark
        for index in empty:
            scratch = list(board)
            scratch[index] = mark
            if detect_winner(scratch) == mark:
                return index
        return None

    def select_move(self, board):
        """
        pick a cell index for self.mark on board
        board is left untouched
        """
        empty = [i for i, cell in enumerate(board) if cell is None]
        if not empty:
            raise ValueError("no empty cell to play")

        index = self._completing_move(board, empty, self.mark)
        if index is not None:
            return self._chosen(index, "win")
        index = self._completing_move(board, empty, self.opponent_mark)
        if index is not None:
            return self._chosen(index, "block")
        if CENTER in empty:
            return self._chosen(CENTER, "center")
        return self._chosen(self.rng.choice(empty), "random")

    def _chosen(self, index, tier):
        self.last_tier = tier
        logger.info("opponent %s picks %d (%s)", self.mark, index, tier)
        return index
