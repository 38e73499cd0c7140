"""Playing cards, a deck of them and five-card poker hands."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    CLUBS = "Clubs"
    SPADES = "Spades"
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    NONE = "None"


class Face(Enum):
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"
    FIVE = "Five"
    SIX = "Six"
    SEVEN = "Seven"
    EIGHT = "Eight"
    NINE = "Nine"
    TEN = "Ten"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"
    ACE = "Ace"
    NONE = "None"


REAL_SUITS = tuple(suit for suit in Suit if suit is not Suit.NONE)
REAL_FACES = tuple(face for face in Face if face is not Face.NONE)
HAND_SIZE = 5
DECK_SIZE = 52

# Faces in order, wrapping around so that an ace can also start low.
_FACES_WITH_WRAP = REAL_FACES + REAL_FACES[:4]


def face_from_name(name: str) -> Face:
    """Return the face with this name, or ``Face.NONE``."""
    try:
        return Face(name)
    except ValueError:
        return Face.NONE


def suit_from_name(name: str) -> Suit:
    """Return the suit with this name, or ``Suit.NONE``."""
    try:
        return Suit(name)
    except ValueError:
        return Suit.NONE


@dataclass(frozen=True)
class Card:
    face: Face = Face.NONE
    suit: Suit = Suit.NONE

    def __str__(self) -> str:
        return f"{self.face.value} of {self.suit.value}"


class HandOfCards:
    """Five cards, with checks for the usual poker combinations."""

    def __init__(self, *args: Card) -> None:
        self.cards: list[Card] = []
        for card in args:
            if len(self.cards) >= HAND_SIZE:
                raise ValueError("Already 5 cards in hand.")
            self.cards.append(card)
        if len(self.cards) < HAND_SIZE:
            raise ValueError("A hand needs 5 cards.")

    def _ranks(self) -> Counter:
        return Counter(card.face for card in self.cards)

    def _contains_group_of(self, n: int) -> bool:
        if n > 4 or n < 0:
            raise ValueError("Invalid number of cards in face group.")
        return max(self._ranks().values()) >= n

    def contains_pair(self) -> bool:
        return len(self._ranks()) <= 4

    def contains_two_pairs(self) -> bool:
        return len(self._ranks()) == 3 and not self._contains_group_of(3)

    def contains_three_of_kind(self) -> bool:
        return len(self._ranks()) == 3 and self._contains_group_of(3)

    def contains_four_of_kind(self) -> bool:
        return len(self._ranks()) == 2 and self._contains_group_of(4)

    def contains_flush(self) -> bool:
        return len({card.suit for card in self.cards}) == 1

    def contains_straight(self) -> bool:
        faces = {card.face for card in self.cards}
        return any(
            faces.issuperset(_FACES_WITH_WRAP[start : start + HAND_SIZE])
            for start in range(len(_FACES_WITH_WRAP) - HAND_SIZE + 1)
        )

    def __str__(self) -> str:
        return "Poker Hand: \n" + " ".join(str(card) for card in self.cards)


class DeckOfCards:
    """A 52-card deck dealt from the top."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.cards = [Card(face, suit) for suit in REAL_SUITS for face in REAL_FACES]
        self.current = 0

    def shuffle(self) -> None:
        """Swap 52 randomly chosen pairs of cards."""
        for _ in range(DECK_SIZE):
            first = self.rng.randrange(DECK_SIZE)
            second = self.rng.randrange(DECK_SIZE)
            self.cards[first], self.cards[second] = self.cards[second], self.cards[first]

    def deal_card(self) -> Card:
        if not self.more_cards():
            raise IndexError("No more cards in deck.")
        card = self.cards[self.current]
        self.current += 1
        return card

    def more_cards(self) -> bool:
        return self.current < DECK_SIZE

    def deal_poker_hand(self) -> HandOfCards:
        if self.current > DECK_SIZE - HAND_SIZE:
            raise ValueError("Not enough cards to deal poker hand.")
        return HandOfCards(*(self.deal_card() for _ in range(HAND_SIZE)))

    def __str__(self) -> str:
        return "Deck: " + "\n".join(str(card) for card in self.cards)