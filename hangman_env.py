"""
Hangman Game Environment.

This environment implements the Hangman game for a tabular Q-learning agent.
A single HangmanGame satisfies the State and Rewarder contracts, and Choice
satisfies the Action contract.

State key: the revealed pattern, with '_' for every hidden position
Actions: any letter of a-z that has not been attempted yet
Rewards:
    24 / (number of attempted letters, including the current one) for a correct guess
    -1000 for a wrong guess
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Set

from config import CORRECT_REWARD, INCORRECT_REWARD, STARTING_LIVES
from contracts import Action, Rewarder, State, StateAction
from utils import get_available_letters, render_pattern


class Status(IntEnum):
    LOST = -1
    ACTIVE = 0
    WON = 1


class HangmanGame(State, Rewarder):
    """
    The state of a single game of Hangman.
    """

    def __init__(self, word: str, starting_lives: int = STARTING_LIVES, debug: bool = False):
        """
        Initialize a new game.

        Args:
            word: The target word to guess
            starting_lives: Number of wrong guesses allowed
            debug: Whether log() prints to stdout
        """
        self.debug = debug
        self.new(word, starting_lives)

    def new(self, word: str, starting_lives: int = STARTING_LIVES):
        """
        Reset the game for the given word.

        Args:
            word: The target word to guess
            starting_lives: Number of wrong guesses allowed
        """
        self.word = word
        self.characters = len(word)
        self.starting_lives = starting_lives
        self.lives = starting_lives
        self.attempted: Set[str] = set()
        self.correct: List[Optional[str]] = [None] * len(word)

    def is_complete(self) -> Status:
        """
        Returns Status.WON, Status.ACTIVE or Status.LOST for the current game.

        A fully revealed word wins even if no lives remain.
        """
        if self.characters == 0:
            return Status.WON

        if self.lives < 1:
            return Status.LOST

        return Status.ACTIVE

    def choose(self, char: str) -> bool:
        """
        Apply a character attempt, returning True if char is in the word.

        Updates the game's state.

        Args:
            char: A letter that has not been attempted yet
        """
        assert self.is_complete() == Status.ACTIVE, "Cannot choose in a finished game"
        assert char not in self.attempted, f"'{char}' was already attempted"

        self.attempted.add(char)

        hit = False
        for i, check in enumerate(self.word):
            if check == char:
                self.correct[i] = char
                self.characters -= 1
                hit = True

        if not hit:
            self.lives -= 1

        return hit

    def score(self, char: str) -> float:
        """
        Score a candidate character without changing the game.

        The attempted count always includes char, so the result is the same
        whether it is computed before or after the character is applied.
        """
        if char in self.word:
            return CORRECT_REWARD / len(self.attempted | {char})

        return INCORRECT_REWARD

    def reward(self, state_action: StateAction) -> float:
        return self.score(str(state_action.action))

    def next(self) -> List['Choice']:
        """
        A Choice for every letter that has not been attempted, in alphabetical order.
        """
        return [Choice(char) for char in get_available_letters(self.attempted)]

    def log(self, msg: str, *args):
        """Print a progress message for this game when debug is enabled."""
        if self.debug:
            print(f"[GAME {self.word}] ({len(self.attempted)} moves, {self.lives} lives) {msg % args if args else msg}")

    def __str__(self) -> str:
        # Lives and attempted letters are intentionally not part of the key.
        return render_pattern(self.correct)


@dataclass(frozen=True)
class Choice(Action):
    """
    A character choice in a game of Hangman.
    """

    character: str

    def apply(self, state: HangmanGame) -> HangmanGame:
        """Apply this choice to the game and return it."""
        state.choose(self.character)
        return state

    def __str__(self) -> str:
        return self.character
