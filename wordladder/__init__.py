"""
Word Ladder - Game Engine
=========================

Turn a start word into a target word one letter at a time, every step a
dictionary word. Includes a BFS solver for the shortest ladder and
Wordle-style letter feedback.
"""

__version__ = "1.0.0"

from .config import GameConfig, load_config
from .dictionary import Dictionary
from .errors import ConfigurationError, StateError, ValidationError, WordLadderError
from .feedback import CharacterStatus, feedback_to_string, score
from .game import AttemptResult, Event, GameSession, GameState, is_single_letter_change
from .solver import LadderSolver, benchmark, print_results, solve
