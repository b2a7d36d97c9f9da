import unittest

from ludo_core.board import DEFAULT_TOPOLOGY
from ludo_core.dice import ScriptedDice
from ludo_core.game import LudoGame
from ludo_core.token import AtBase, Finished, InHomeLane, OnTrack, Token, capture_at
from ludo_core.turn import TurnPhase


class TestCaptures(unittest.TestCase):
    def setUp(self):
        self.dice = ScriptedDice([])
        self.game = LudoGame(3, dice=self.dice)

    def force_position(self, player_idx, token_idx, position):
        token = self.game.players[player_idx].tokens[token_idx]
        token.position = position
        return token

    def test_capture(self):
        opponent_token = self.force_position(1, 0, OnTrack(5))
        our_token = self.force_position(0, 0, OnTrack(2))
        self.dice.push(3)
        result = self.game.roll_dice()
        self.assertTrue(result.auto_applied)
        self.assertEqual(our_token.position, OnTrack(5))
        self.assertTrue(opponent_token.is_at_base())
        self.assertEqual(result.captured, ((1, 0),))

    def test_capture_is_all_or_nothing(self):
        first = self.force_position(1, 0, OnTrack(5))
        second = self.force_position(2, 3, OnTrack(5))
        stacked = self.force_position(1, 1, OnTrack(5))
        self.force_position(0, 0, OnTrack(2))
        self.dice.push(3)
        result = self.game.roll_dice()
        self.assertTrue(first.is_at_base())
        self.assertTrue(second.is_at_base())
        self.assertTrue(stacked.is_at_base())
        self.assertEqual(sorted(result.captured), [(1, 0), (1, 1), (2, 3)])

    def test_own_tokens_are_never_captured(self):
        friend = self.force_position(0, 1, OnTrack(5))
        mover = self.force_position(0, 0, OnTrack(2))
        self.dice.push(3)
        self.game.roll_dice()
        self.assertEqual(self.game.turn.phase, TurnPhase.AWAITING_MOVE)
        self.game.select_token(0)
        self.assertEqual(mover.position, OnTrack(5))
        self.assertEqual(friend.position, OnTrack(5))

    def test_no_capture_on_star_cell(self):
        opponent_token = self.force_position(1, 0, OnTrack(8))
        self.force_position(0, 0, OnTrack(5))
        self.dice.push(3)
        result = self.game.roll_dice()
        self.assertEqual(result.captured, ())
        self.assertEqual(opponent_token.position, OnTrack(8))

    def test_no_capture_when_entering_on_entry_cell(self):
        opponent_token = self.force_position(1, 0, OnTrack(0))
        for token_idx in range(1, 4):
            self.force_position(0, token_idx, Finished())
        self.dice.push(6)
        result = self.game.roll_dice()
        self.assertTrue(result.auto_applied)
        self.assertEqual(self.game.players[0].tokens[0].position, OnTrack(0))
        self.assertEqual(opponent_token.position, OnTrack(0))

    def test_home_lane_is_never_shared(self):
        mover = Token(token_id=0, player_id=0, position=InHomeLane(1))
        other = Token(token_id=0, player_id=1, position=InHomeLane(1))
        self.assertEqual(capture_at(mover, [mover, other]), [])
        self.assertEqual(other.position, InHomeLane(1))

    def test_safe_cells_never_capture(self):
        topology = DEFAULT_TOPOLOGY
        for safe_cell in sorted(topology.safe_cells):
            for mover_id in range(4):
                for dice in range(1, 7):
                    start = OnTrack((safe_cell - dice) % topology.ring_size)
                    mover = Token(token_id=0, player_id=mover_id, position=start)
                    if mover.get_target_position(dice) != OnTrack(safe_cell):
                        continue
                    victim_id = (mover_id + 1) % 4
                    victim = Token(token_id=0, player_id=victim_id, position=OnTrack(safe_cell))
                    with self.subTest(cell=safe_cell, mover=mover_id, dice=dice):
                        mover.move(dice)
                        self.assertEqual(capture_at(mover, [mover, victim]), [])
                        self.assertEqual(victim.position, OnTrack(safe_cell))


class TestWins(unittest.TestCase):
    def setUp(self):
        self.dice = ScriptedDice([])
        self.game = LudoGame(2, dice=self.dice)
        self.player = self.game.players[0]
        for token in self.player.tokens[1:]:
            token.position = Finished()

    def test_win_progress(self):
        for token in self.player.tokens:
            token.position = Finished()
        self.assertTrue(self.player.has_won())

    def test_last_token_home_wins(self):
        self.player.tokens[0].position = InHomeLane(3)
        self.dice.push(2)
        result = self.game.roll_dice()
        self.assertTrue(result.move.won)
        snapshot = self.game.get_snapshot()
        self.assertEqual(snapshot.phase, TurnPhase.GAME_OVER)
        self.assertEqual(snapshot.winner_id, 0)
        self.assertTrue(snapshot.is_game_over)

    def test_win_on_six_ends_instead_of_extra_turn(self):
        self.player.tokens[0].position = OnTrack(50)
        self.dice.push(6)
        result = self.game.roll_dice()
        self.assertFalse(result.move.extra_turn)
        self.assertEqual(self.game.turn.phase, TurnPhase.GAME_OVER)
        self.assertEqual(self.game.turn.winner_id, 0)

    def test_captured_token_restarts_from_base(self):
        victim = self.game.players[1].tokens[0]
        victim.position = OnTrack(30)
        self.player.tokens[0].position = OnTrack(27)
        self.dice.push(3)
        self.game.roll_dice()
        self.assertEqual(victim.position, AtBase())
        self.assertFalse(victim.can_move(5))
        self.assertTrue(victim.can_move(6))


if __name__ == "__main__":
    unittest.main()
