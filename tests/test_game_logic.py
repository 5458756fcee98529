from __future__ import annotations

import unittest

from tictactoe.game_logic import (
    LINES,
    PLAYER_O,
    PLAYER_X,
    GameState,
    detect_winner,
    other_player,
)

X, O, _ = PLAYER_X, PLAYER_O, None


def play(state, *indices):
    for i in indices:
        state.apply_move(i)
    return state


def snapshot(state):
    return (list(state.board), state.current_player, state.winner, state.is_draw)


class DetectWinnerTests(unittest.TestCase):
    def test_every_line_wins_for_both_marks(self) -> None:
        for mark in (X, O):
            for line in LINES:
                board = [None] * 9
                for i in line:
                    board[i] = mark
                self.assertEqual(detect_winner(board), mark, line)

    def test_empty_and_mixed_lines_do_not_win(self) -> None:
        self.assertIsNone(detect_winner([None] * 9))
        self.assertIsNone(detect_winner([X, X, O, _, _, _, _, _, _]))
        self.assertIsNone(detect_winner([X, O, X, O, X, O, O, X, O]))

    def test_line_table_order(self) -> None:
        self.assertEqual(len(LINES), 8)
        self.assertEqual(LINES[0], (0, 1, 2))
        self.assertEqual(LINES[3], (0, 3, 6))
        self.assertEqual(LINES[-1], (2, 4, 6))

    def test_does_not_mutate_board(self) -> None:
        board = [X, O, _, _, X, _, O, _, X]
        before = list(board)
        detect_winner(board)
        self.assertEqual(board, before)

    def test_rejects_wrong_size(self) -> None:
        with self.assertRaises(ValueError):
            detect_winner([None] * 8)

    def test_other_player(self) -> None:
        self.assertEqual(other_player(X), O)
        self.assertEqual(other_player(O), X)


class GameStateTests(unittest.TestCase):
    def test_initial_state(self) -> None:
        state = GameState()
        self.assertEqual(state.board, [None] * 9)
        self.assertEqual(state.current_player, X)
        self.assertIsNone(state.winner)
        self.assertFalse(state.is_draw)
        self.assertFalse(state.is_game_over)
        self.assertEqual(state.empty_cells(), list(range(9)))

    def test_apply_move_places_mark_and_flips_turn(self) -> None:
        state = GameState()
        self.assertTrue(state.apply_move(4))
        self.assertEqual(state.board[4], X)
        self.assertEqual(state.current_player, O)
        self.assertTrue(state.apply_move(0))
        self.assertEqual(state.board[0], O)
        self.assertEqual(state.current_player, X)

    def test_turn_parity(self) -> None:
        state = GameState()
        for n, index in enumerate([0, 4, 8, 2, 6], start=1):
            state.apply_move(index)
            self.assertEqual(state.move_count, n)
            self.assertEqual(state.current_player, X if n % 2 == 0 else O)

    def test_occupied_cell_is_ignored(self) -> None:
        state = play(GameState(), 4)
        before = snapshot(state)
        self.assertFalse(state.apply_move(4))
        self.assertEqual(snapshot(state), before)

    def test_out_of_range_is_ignored(self) -> None:
        state = GameState()
        before = snapshot(state)
        self.assertFalse(state.apply_move(9))
        self.assertFalse(state.apply_move(-1))
        self.assertEqual(snapshot(state), before)

    def test_win_is_terminal(self) -> None:
        # X: 0,1,2   O: 3,4
        state = play(GameState(), 0, 3, 1, 4, 2)
        self.assertEqual(state.winner, X)
        self.assertFalse(state.is_draw)
        self.assertTrue(state.is_game_over)
        self.assertEqual(state.winning_line(), (0, 1, 2))
        self.assertEqual(state.status_text(), "Winner: X")
        before = snapshot(state)
        self.assertFalse(state.apply_move(5))
        self.assertEqual(snapshot(state), before)

    def test_win_on_last_cell_is_not_a_draw(self) -> None:
        # X completes 0-4-8 with the ninth move
        state = play(GameState(), 0, 1, 2, 3, 4, 5, 7, 6, 8)
        self.assertEqual(state.move_count, 9)
        self.assertEqual(state.winner, X)
        self.assertFalse(state.is_draw)

    def test_draw(self) -> None:
        state = play(GameState(), 0, 1, 2, 3, 4, 8, 7, 6, 5)
        self.assertEqual(state.board, [X, O, X, O, X, X, O, X, O])
        self.assertIsNone(state.winner)
        self.assertTrue(state.is_draw)
        self.assertEqual(state.status_text(), "Draw!")
        self.assertFalse(state.apply_move(0))

    def test_draw_scenario_board(self) -> None:
        state = GameState()
        state.board = [X, O, X, O, X, O, O, X, _]
        state.current_player = O
        self.assertTrue(state.apply_move(8))
        self.assertEqual(state.board, [X, O, X, O, X, O, O, X, O])
        self.assertTrue(state.is_draw)
        self.assertIsNone(state.winner)
        self.assertEqual(state.status_text(), "Draw!")

    def test_exactly_one_status_holds(self) -> None:
        for moves in ([], [4], [0, 3, 1, 4, 2], [0, 1, 2, 3, 4, 8, 7, 6, 5]):
            state = play(GameState(), *moves)
            in_progress = not state.is_game_over
            flags = [state.winner is not None, state.is_draw, in_progress]
            self.assertEqual(flags.count(True), 1, moves)

    def test_status_text(self) -> None:
        state = GameState()
        self.assertEqual(state.status_text(), "Next player: X")
        self.assertEqual(state.status_text({X: "X (You)"}), "Next player: X (You)")
        state.apply_move(0)
        self.assertEqual(state.status_text(), "Next player: O")

    def test_reset_restores_initial_state(self) -> None:
        fresh = snapshot(GameState())
        for moves in ([4], [0, 3, 1, 4, 2], [0, 1, 2, 3, 4, 8, 7, 6, 5]):
            state = play(GameState(), *moves)
            state.reset_game()
            self.assertEqual(snapshot(state), fresh)
            self.assertTrue(state.apply_move(0))
            self.assertEqual(state.board[0], X)


if __name__ == "__main__":
    unittest.main()
