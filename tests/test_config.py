import os
import unittest
from unittest.mock import patch

from ludo_core.config import GameConfig


class TestGameConfig(unittest.TestCase):
    def test_defaults(self):
        config = GameConfig()
        self.assertTrue(config.auto_apply_single_move)
        self.assertIsNone(config.dice_seed)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.max_turns, 2000)

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_without_variables(self):
        self.assertEqual(GameConfig.from_env(), GameConfig())

    @patch.dict(
        os.environ,
        {
            "LUDO_AUTO_APPLY_SINGLE_MOVE": "no",
            "LUDO_DICE_SEED": "42",
            "LUDO_LOG_LEVEL": "debug",
            "LUDO_MAX_TURNS": "0",
        },
        clear=True,
    )
    def test_from_env(self):
        config = GameConfig.from_env()
        self.assertFalse(config.auto_apply_single_move)
        self.assertEqual(config.dice_seed, 42)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.max_turns, 1)

    @patch.dict(os.environ, {"LUDO_DICE_SEED": "  "}, clear=True)
    def test_blank_seed_means_unseeded(self):
        self.assertIsNone(GameConfig.from_env().dice_seed)


if __name__ == "__main__":
    unittest.main()
