"""
Unit tests for the Q-learning agent and action selection.
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

import numpy as np

from hangman_env import Choice, HangmanGame
from rl_agent import QTableAgent, next_action
from utils import ALPHABET


class TestQTableAgent(unittest.TestCase):
    """Test cases for QTableAgent."""

    def setUp(self):
        """Set up a fresh agent."""
        self.agent = QTableAgent(learning_rate=0.7, discount=1.0)
        self.rng = np.random.default_rng(0)

    def test_unseen_value_is_zero(self):
        """Test that unseen state/action pairs are worth 0."""
        game = HangmanGame("cat")
        self.assertEqual(self.agent.value(game, Choice('c')), 0.0)
        self.assertEqual(len(self.agent), 0)

    def test_learn_applies_action(self):
        """Test that learning applies the chosen action."""
        game = HangmanGame("cat")
        self.agent.learn(next_action(self.agent, game, self.rng), game)
        self.assertEqual(len(game.attempted), 1)

    def test_learn_correct_first_guess(self):
        """Test the update for a correct first guess."""
        game = HangmanGame("cat")
        action = next_action(self.agent, game, self.rng)
        action.action = Choice('c')

        self.agent.learn(action, game)

        self.assertAlmostEqual(self.agent.q["___"]["c"], 0.7 * 24.0)
        self.assertAlmostEqual(self.agent.value(HangmanGame("cat"), Choice('c')), 0.7 * 24.0)

    def test_learn_wrong_guess(self):
        """Test the update for a wrong guess."""
        game = HangmanGame("cat")
        action = next_action(self.agent, game, self.rng)
        action.action = Choice('z')

        self.agent.learn(action, game)

        # A miss leaves the pattern unchanged, so the next state is the current one.
        self.assertAlmostEqual(self.agent.q["___"]["z"], 0.7 * -1000)

    def test_learn_uses_next_state_value(self):
        """Test that the best value of the next state is added."""
        self.agent.q["c__"]["a"] = 10.0
        self.agent.q["c__"]["q"] = -5.0

        game = HangmanGame("cat")
        action = next_action(self.agent, game, self.rng)
        action.action = Choice('c')
        self.agent.learn(action, game)

        self.assertAlmostEqual(self.agent.q["___"]["c"], 0.7 * (24.0 + 10.0))

    def test_save_and_load(self):
        """Test saving and loading the value table."""
        self.agent.q["___"]["e"] = 3.5

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "qtable.pkl")
            with redirect_stdout(io.StringIO()):
                self.agent.save(path)
                loaded = QTableAgent.load(path)

        self.assertEqual(loaded.learning_rate, 0.7)
        self.assertEqual(loaded.discount, 1.0)
        self.assertEqual(loaded.value(HangmanGame("eel"), Choice('e')), 3.5)


class TestNextAction(unittest.TestCase):
    """Test cases for next_action."""

    def setUp(self):
        """Set up a fresh agent."""
        self.agent = QTableAgent()
        self.rng = np.random.default_rng(42)

    def test_picks_unique_best(self):
        """Test that the single best action is chosen."""
        self.agent.q["___"]["t"] = 1.0
        game = HangmanGame("cat")

        action = next_action(self.agent, game, self.rng)

        self.assertEqual(action.action, Choice('t'))
        self.assertEqual(action.value, 1.0)
        self.assertIs(action.state, game)

    def test_never_picks_attempted_letter(self):
        """Test that attempted letters are never chosen."""
        game = HangmanGame("cat", starting_lives=26)
        self.agent.q["___"]["x"] = 100.0
        game.choose('x')

        for _ in range(20):
            action = next_action(self.agent, game, self.rng)
            self.assertNotIn(str(action.action), game.attempted)

    def test_ties_broken_among_best(self):
        """Test that ties are broken among the best actions only."""
        self.agent.q["___"]["a"] = -1.0
        game = HangmanGame("cat")

        seen = {str(next_action(self.agent, game, self.rng).action) for _ in range(200)}

        self.assertNotIn('a', seen)
        self.assertGreater(len(seen), 1)

    def test_no_actions_raises(self):
        """Test that a state without actions raises ValueError."""
        game = HangmanGame(ALPHABET)
        for letter in ALPHABET:
            game.choose(letter)

        with self.assertRaises(ValueError):
            next_action(self.agent, game, self.rng)


if __name__ == "__main__":
    unittest.main()
