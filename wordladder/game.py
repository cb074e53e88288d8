"""
Game Session
============

State machine for one word ladder game:

    UNINITIALIZED --initialize--> ACTIVE --winning attempt--> WON
    ACTIVE | WON --reset--> ACTIVE (same start and target, path = [start])

Every mutating call either applies completely or leaves the session as it
was. Subscribers are told *what* changed through an Event and re-query the
session for details.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np

from .config import GameConfig
from .dictionary import Dictionary
from .errors import StateError, ValidationError
from .feedback import CharacterStatus, score
from .solver import LadderSolver


logger = logging.getLogger(__name__)


class GameState(Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    WON = "won"


class Event(Enum):
    STATE_UPDATE = "state_update"
    CONFIG_CHANGED = "config_changed"
    GAME_RESET = "game_reset"
    GAME_WON = "game_won"
    ERROR = "error"


class AttemptResult(Enum):
    APPLIED = "applied"
    REJECTED = "rejected"
    WON = "won"

    def __bool__(self):
        return self is not AttemptResult.REJECTED


Subscriber = Callable[[Event], None]


def is_single_letter_change(current: str, attempt: str) -> bool:
    """True iff the words have equal length and differ at exactly one index."""
    if len(current) != len(attempt):
        return False
    diff = 0
    for a, b in zip(current.lower(), attempt.lower()):
        if a != b:
            diff += 1
            if diff > 1:
                return False
    return diff == 1


class GameSession:
    """
    One game against a shared dictionary.

    Args:
        dictionary: Word list used for validation and solving
        config: Display/play flags (a default GameConfig when omitted)
        solver: Solver for optimal ladders and hints (built from the
            dictionary when omitted)
    """

    def __init__(self, dictionary: Dictionary, config: Optional[GameConfig] = None,
                 solver: Optional[LadderSolver] = None):
        self.dictionary = dictionary
        self.config = config if config is not None else GameConfig()
        self.solver = solver if solver is not None else LadderSolver(dictionary)

        self._state = GameState.UNINITIALIZED
        self._start: Optional[str] = None
        self._target: Optional[str] = None
        self._current: Optional[str] = None
        self._path: List[str] = []
        self._solution: Optional[List[str]] = None
        self._last_error: Optional[ValidationError] = None
        self._subscribers: List[Subscriber] = []

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback(event)``; returns a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _emit(self, event: Event):
        for callback in list(self._subscribers):
            callback(event)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def initialize(self, start: str, target: str):
        """
        Start a game from ``start`` to ``target``.

        Raises:
            ValidationError: a word has the wrong length, is not in the
                dictionary, or both words are the same. The previous game
                (if any) is kept and an ERROR event is emitted first.
        """
        try:
            start, target = self._check_pair(start, target)
        except ValidationError as e:
            self._last_error = e
            logger.info("Rejected new game: %s", e.message)
            self._emit(Event.ERROR)
            raise

        self._start = start
        self._target = target
        self._current = start
        self._path = [start]
        self._solution = None
        self._last_error = None
        self._state = GameState.ACTIVE
        logger.info("New game %s -> %s", start, target)
        self._emit(Event.GAME_RESET)

    def new_game(self, rng: Optional[np.random.Generator] = None):
        """Initialize with a random pair or the configured default pair."""
        if self.config.use_random_words:
            start, target = self.random_pair(rng)
        else:
            start, target = self.config.default_start, self.config.default_target
        self.initialize(start, target)

    def submit_attempt(self, word: str) -> AttemptResult:
        """
        Try to move from the current word to ``word``.

        A rejected attempt changes nothing and emits nothing; the reason is
        available from ``last_error``.

        Raises:
            StateError: no game has been initialized
        """
        self._require_game()

        reason = self._rejection_reason(word)
        if reason is not None:
            self._last_error = ValidationError(reason)
            logger.debug("Rejected attempt %r: %s", word, reason)
            return AttemptResult.REJECTED

        word = word.lower()
        won = word == self._target
        self._path.append(word)
        self._current = word
        self._last_error = None
        if won:
            self._state = GameState.WON
            logger.info("Game won in %d attempts", self.attempt_count)

        # subscribers only ever see a fully updated session
        self._emit(Event.STATE_UPDATE)
        if won:
            self._emit(Event.GAME_WON)
            return AttemptResult.WON
        return AttemptResult.APPLIED

    def reset(self):
        """Back to the start word, keeping start and target."""
        self._require_game()
        self._current = self._start
        self._path = [self._start]
        self._state = GameState.ACTIVE
        self._last_error = None
        self._emit(Event.GAME_RESET)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_won(self) -> bool:
        return self._state is GameState.WON

    @property
    def start_word(self) -> str:
        self._require_game()
        return self._start

    @property
    def target_word(self) -> str:
        self._require_game()
        return self._target

    @property
    def current_word(self) -> str:
        self._require_game()
        return self._current

    @property
    def attempt_count(self) -> int:
        return max(len(self._path) - 1, 0)

    @property
    def last_error(self) -> Optional[ValidationError]:
        return self._last_error

    def path(self) -> Optional[List[str]]:
        """Words played so far, or None when path display is off."""
        if self._state is GameState.UNINITIALIZED or not self.config.show_path:
            return None
        return list(self._path)

    def solution_path(self) -> List[str]:
        """Shortest ladder from start to target, [] if none exists."""
        self._require_game()
        if self._solution is None:
            self._solution = self.solver.solve(self._start, self._target)
        return list(self._solution)

    def next_hint(self) -> Optional[str]:
        """Next word of a shortest ladder from the current word."""
        self._require_game()
        if self.is_won:
            return None
        ladder = self.solver.solve(self._current, self._target)
        return ladder[1] if len(ladder) > 1 else None

    def feedback(self, word: str) -> List[CharacterStatus]:
        """Letter statuses of ``word`` against the target."""
        self._require_game()
        return score(word, self._target)

    def random_pair(self, rng: Optional[np.random.Generator] = None) -> Tuple[str, str]:
        return self.dictionary.random_distinct_pair(rng)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def show_errors(self) -> bool:
        return self.config.show_errors

    @show_errors.setter
    def show_errors(self, enabled: bool):
        self.config.show_errors = bool(enabled)
        self._emit(Event.CONFIG_CHANGED)

    @property
    def show_path(self) -> bool:
        return self.config.show_path

    @show_path.setter
    def show_path(self, enabled: bool):
        self.config.show_path = bool(enabled)
        self._emit(Event.CONFIG_CHANGED)

    @property
    def use_random_words(self) -> bool:
        return self.config.use_random_words

    @use_random_words.setter
    def use_random_words(self, enabled: bool):
        self.config.use_random_words = bool(enabled)
        self._emit(Event.CONFIG_CHANGED)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _require_game(self):
        if self._state is GameState.UNINITIALIZED:
            raise StateError("Game not initialized")

    def _check_pair(self, start: str, target: str) -> Tuple[str, str]:
        length = self.dictionary.word_length
        for word in (start, target):
            if not isinstance(word, str) or len(word) != length:
                raise ValidationError(f"Invalid {length}-letter word: {word!r}")
        for word in (start, target):
            if not self.dictionary.is_valid(word):
                raise ValidationError(f"Invalid word: {word}")
        start, target = start.lower(), target.lower()
        if start == target:
            raise ValidationError("Start and target words must differ")
        return start, target

    def _rejection_reason(self, word: str) -> Optional[str]:
        length = self.dictionary.word_length
        if not isinstance(word, str):
            return f"Not a word: {word!r}"
        if self._state is GameState.WON:
            return "Game is already won"
        if len(word) != length:
            return f"Must be {length} characters"
        if not self.dictionary.is_valid(word):
            return f"'{word}' is not in the dictionary"
        if word.lower() == self._current:
            return "Cannot repeat the current word"
        if not is_single_letter_change(self._current, word):
            return "Must change exactly one letter"
        return None
