"""
Study session engine.

Drives one pass over a deck's cards entirely in memory: the current
position, which face is showing, optional shuffling and a right/wrong tally.
Nothing here touches the network or the database; the card list is fixed
when the session starts and the whole state is discarded with the session.
"""

import math
import time
from collections.abc import Mapping, Sequence
from enum import StrEnum
from types import MappingProxyType
from typing import TypeVar

from flashdeck.domain.common.exceptions import InvalidStudySessionError
from flashdeck.domain.common.value_objects import CardId
from flashdeck.domain.learning.entities.card import Card

T = TypeVar("T")

# Constants of the linear congruential generator used by seeded_shuffle
_LCG_MULTIPLIER = 9301
_LCG_INCREMENT = 49297
_LCG_MODULUS = 233280


def seeded_shuffle(items: Sequence[T], seed: int) -> list[T]:
    """
    Return a copy of ``items`` in a pseudo-random order fixed by ``seed``.

    Fisher-Yates driven by a toy linear congruential formula. The same seed
    always yields the same order, which is all this is for: it is neither
    cryptographically nor statistically strong.

    The formula is evaluated in IEEE double precision with truncated
    remainders, so clock-sized seeds, whose products exceed 2**53, give the
    same order as a browser client running the same formula.
    """
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        value = float(seed) * (i + 1) * _LCG_MULTIPLIER + _LCG_INCREMENT
        j = int(math.fmod(abs(math.fmod(value, _LCG_MODULUS)), i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def current_time_seed() -> int:
    """Seed derived from the wall clock in milliseconds."""
    return time.time_ns() // 1_000_000


class CardFace(StrEnum):
    """What the learner has seen of a card during the session."""

    UNSEEN = "unseen"
    SHOWN_FRONT = "shown_front"
    SHOWN_BACK = "shown_back"


class StudySession:
    """
    In-memory state machine for studying a fixed list of cards.

    Operations are synchronous and meant to be driven by one user
    interaction at a time.
    """

    def __init__(self, cards: Sequence[Card]) -> None:
        if not cards:
            raise InvalidStudySessionError("Cannot study a deck without cards")
        self._original: tuple[Card, ...] = tuple(cards)
        self._order: tuple[Card, ...] = self._original
        self._position = 0
        self._flipped = False
        self._shuffle_seed: int | None = None
        self._answers: dict[CardId, bool] = {}
        self._flipped_cards: set[CardId] = set()
        self._seen: set[CardId] = {self._order[0].id}

    # State

    @property
    def cards(self) -> tuple[Card, ...]:
        """Cards in the order they are being studied."""
        return self._order

    @property
    def position(self) -> int:
        return self._position

    @property
    def current_card(self) -> Card:
        return self._order[self._position]

    @property
    def is_flipped(self) -> bool:
        """True while the back of the current card is showing."""
        return self._flipped

    @property
    def is_shuffled(self) -> bool:
        return self._shuffle_seed is not None

    @property
    def shuffle_seed(self) -> int | None:
        return self._shuffle_seed

    @property
    def answers(self) -> Mapping[CardId, bool]:
        """Read-only view of the judgment recorded for each card."""
        return MappingProxyType(self._answers)

    @property
    def is_first_card(self) -> bool:
        return self._position == 0

    @property
    def is_last_card(self) -> bool:
        return self._position == len(self._order) - 1

    # Derived values

    @property
    def progress(self) -> float:
        """Fraction of the deck reached, counting the current card."""
        return (self._position + 1) / len(self._order)

    @property
    def progress_percent(self) -> float:
        return self.progress * 100

    @property
    def correct_count(self) -> int:
        return sum(1 for correct in self._answers.values() if correct)

    @property
    def incorrect_count(self) -> int:
        return self.answered_count - self.correct_count

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    @property
    def accuracy(self) -> int:
        """Percentage of judged cards answered correctly, 0 when nothing is judged."""
        if not self._answers:
            return 0
        return round(self.correct_count / self.answered_count * 100)

    @property
    def is_complete(self) -> bool:
        """The last card of the current order has been judged."""
        return self._order[-1].id in self._answers

    def judgment_for(self, card_id: CardId) -> bool | None:
        """Judgment recorded for a card, or None if it has not been judged."""
        return self._answers.get(card_id)

    def card_state(self, card_id: CardId) -> CardFace:
        """
        Report how far the learner got with a card in this pass.

        A card counts as shown from the moment it becomes the current card,
        and as shown on the back once it has been flipped.
        """
        if card_id in self._flipped_cards:
            return CardFace.SHOWN_BACK
        if card_id in self._seen:
            return CardFace.SHOWN_FRONT
        return CardFace.UNSEEN

    # Operations

    def flip(self) -> None:
        """Toggle between the front and back of the current card."""
        self._flipped = not self._flipped
        if self._flipped:
            self._flipped_cards.add(self.current_card.id)

    def next(self) -> None:
        """Move to the next card; no-op on the last card."""
        if not self.is_last_card:
            self._move_to(self._position + 1)

    def previous(self) -> None:
        """Move to the previous card; no-op on the first card."""
        if not self.is_first_card:
            self._move_to(self._position - 1)

    def judge(self, correct: bool) -> None:
        """
        Record whether the current card was answered correctly.

        A later judgment for the same card replaces the earlier one. The
        session advances to the next card, except on the last card where it
        stays put with the front showing.
        """
        self._answers[self.current_card.id] = correct
        if self.is_last_card:
            self._flipped = False
        else:
            self.next()

    def mark_correct(self) -> None:
        self.judge(True)

    def mark_incorrect(self) -> None:
        self.judge(False)

    def toggle_shuffle(self, seed: int | None = None) -> None:
        """
        Switch shuffling on or off and start a fresh pass.

        Switching on orders the cards by ``seeded_shuffle`` with ``seed``
        (the current time when omitted); switching off restores the original
        order.
        """
        if self.is_shuffled:
            self._shuffle_seed = None
            self._order = self._original
        else:
            self._shuffle_seed = current_time_seed() if seed is None else seed
            self._order = tuple(seeded_shuffle(self._original, self._shuffle_seed))
        self._reset_pass()

    def restart(self) -> None:
        """Start over from the first card, keeping the current order."""
        self._reset_pass()

    def _move_to(self, position: int) -> None:
        self._position = position
        self._flipped = False
        self._seen.add(self.current_card.id)

    def _reset_pass(self) -> None:
        self._answers.clear()
        self._flipped_cards.clear()
        self._seen.clear()
        self._move_to(0)
