"""
Utility functions for the Hangman project.
Includes the alphabet, word preprocessing and small statistics helpers.
"""

import numpy as np
from typing import Iterable, List, Optional


# Constants
ALPHABET = 'abcdefghijklmnopqrstuvwxyz'
HIDDEN_MARKER = '_'


def preprocess_word(word: str) -> str:
    """Convert word to lowercase and strip surrounding whitespace."""
    return word.lower().strip()


def get_available_letters(attempted: Iterable[str]) -> List[str]:
    """
    Get list of letters that haven't been attempted yet.
    
    Args:
        attempted: Letters already attempted
        
    Returns:
        Remaining letters in alphabetical order
    """
    attempted = set(attempted)
    return [letter for letter in ALPHABET if letter not in attempted]


def render_pattern(revealed: List[Optional[str]]) -> str:
    """
    Render a revealed pattern as a fixed-width string.
    
    Args:
        revealed: One slot per word position, None where still hidden
        
    Returns:
        Pattern string (e.g., "c__" for "cat" after guessing 'c')
    """
    return "".join(HIDDEN_MARKER if slot is None else slot for slot in revealed)


def moving_average(values: List[float], window: int) -> np.ndarray:
    """Moving average over a window; empty when there are fewer values than the window."""
    if len(values) < window:
        return np.array([])
    return np.convolve(values, np.ones(window) / window, mode='valid')
