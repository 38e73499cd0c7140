import random

import pytest

from exercisebook.cards import (
    Card,
    DeckOfCards,
    Face,
    HandOfCards,
    Suit,
    face_from_name,
    suit_from_name,
)

F, S = Face, Suit


def hand(*pairs):
    return HandOfCards(*(Card(face, suit) for face, suit in pairs))


HAND1 = ((F.ACE, S.CLUBS), (F.TWO, S.CLUBS), (F.THREE, S.CLUBS), (F.JACK, S.CLUBS), (F.QUEEN, S.CLUBS))
HAND2 = ((F.ACE, S.CLUBS), (F.ACE, S.SPADES), (F.THREE, S.CLUBS), (F.JACK, S.CLUBS), (F.QUEEN, S.CLUBS))
HAND3 = ((F.ACE, S.CLUBS), (F.ACE, S.SPADES), (F.THREE, S.CLUBS), (F.THREE, S.DIAMONDS), (F.QUEEN, S.CLUBS))
HAND3B = ((F.ACE, S.CLUBS), (F.ACE, S.SPADES), (F.ACE, S.DIAMONDS), (F.THREE, S.CLUBS), (F.THREE, S.SPADES))
HAND4 = ((F.ACE, S.CLUBS), (F.ACE, S.SPADES), (F.ACE, S.DIAMONDS), (F.THREE, S.CLUBS), (F.QUEEN, S.CLUBS))
HAND5 = ((F.ACE, S.CLUBS), (F.ACE, S.SPADES), (F.ACE, S.DIAMONDS), (F.ACE, S.HEARTS), (F.QUEEN, S.CLUBS))
HAND6 = ((F.ACE, S.CLUBS), (F.THREE, S.CLUBS), (F.TWO, S.CLUBS), (F.JACK, S.CLUBS), (F.TEN, S.CLUBS))
HAND7 = ((F.ACE, S.CLUBS), (F.THREE, S.SPADES), (F.TWO, S.HEARTS), (F.JACK, S.DIAMONDS), (F.TEN, S.DIAMONDS))
HAND8 = ((F.SEVEN, S.CLUBS), (F.NINE, S.SPADES), (F.EIGHT, S.HEARTS), (F.JACK, S.DIAMONDS), (F.TEN, S.DIAMONDS))
HAND9 = ((F.KING, S.CLUBS), (F.TWO, S.SPADES), (F.ACE, S.HEARTS), (F.FOUR, S.DIAMONDS), (F.THREE, S.DIAMONDS))


def make(pairs):
    return HandOfCards(*[Card(face, suit) for face, suit in pairs])


def test_pair():
    assert HandOfCards(*[Card(f, s) for f, s in HAND1]).contains_pair() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND2]).contains_pair() is True


def test_two_pairs():
    assert HandOfCards(*[Card(f, s) for f, s in HAND2]).contains_two_pairs() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND3]).contains_two_pairs() is True
    assert HandOfCards(*[Card(f, s) for f, s in HAND4]).contains_two_pairs() is False


def test_three_of_kind():
    assert HandOfCards(*[Card(f, s) for f, s in HAND3]).contains_three_of_kind() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND3B]).contains_three_of_kind() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND4]).contains_three_of_kind() is True


def test_four_of_kind():
    assert HandOfCards(*[Card(f, s) for f, s in HAND4]).contains_four_of_kind() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND5]).contains_four_of_kind() is True


def test_flush():
    assert HandOfCards(*[Card(f, s) for f, s in HAND5]).contains_flush() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND6]).contains_flush() is True


def test_straight():
    assert HandOfCards(*[Card(f, s) for f, s in HAND6]).contains_straight() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND7]).contains_straight() is False
    assert HandOfCards(*[Card(f, s) for f, s in HAND8]).contains_straight() is True
    assert HandOfCards(*[Card(f, s) for f, s in HAND9]).contains_straight() is True


def test_straight_wraps_past_ace():
    wrapped = hand((F.JACK, S.CLUBS), (F.QUEEN, S.SPADES), (F.KING, S.HEARTS), (F.ACE, S.CLUBS), (F.TWO, S.DIAMONDS))
    assert wrapped.contains_straight() is True


def test_hand_size_enforced():
    card = Card(F.TWO, S.CLUBS)
    with pytest.raises(ValueError, match="Already 5 cards in hand."):
        HandOfCards(*[card] * 6)
    with pytest.raises(ValueError):
        HandOfCards(card, card)


def test_card_string():
    assert str(Card(F.ACE, S.CLUBS)) == "Ace of Clubs"
    assert str(Card()) == "None of None"


def test_names_round_trip():
    for face in Face:
        assert face_from_name(face.value) is face
    for suit in Suit:
        assert suit_from_name(suit.value) is suit
    assert face_from_name("Joker") is Face.NONE
    assert suit_from_name("Stars") is Suit.NONE


def test_new_deck_order_and_uniqueness():
    deck = DeckOfCards(random.Random(1))
    assert len(set(deck.cards)) == 52
    assert deck.cards[0] == Card(F.TWO, S.CLUBS)
    assert deck.cards[-1] == Card(F.ACE, S.DIAMONDS)


def test_shuffle_keeps_cards_and_is_reproducible():
    first = DeckOfCards(random.Random(7))
    second = DeckOfCards(random.Random(7))
    first.shuffle()
    second.shuffle()
    assert first.cards == second.cards
    assert set(first.cards) == set(DeckOfCards().cards)


def test_deal_all_cards():
    deck = DeckOfCards()
    dealt = [deck.deal_card() for _ in range(52)]
    assert dealt == DeckOfCards().cards
    assert deck.more_cards() is False
    with pytest.raises(IndexError):
        deck.deal_card()


def test_deal_poker_hand():
    deck = DeckOfCards()
    dealt = deck.deal_poker_hand()
    assert dealt.cards == DeckOfCards().cards[:5]
    for _ in range(44):
        deck.deal_card()
    with pytest.raises(ValueError, match="Not enough cards to deal poker hand."):
        deck.deal_poker_hand()


def test_deck_and_hand_strings():
    deck = DeckOfCards()
    text = str(deck)
    assert text.startswith("Deck: ")
    assert text.count("\n") == 51
    first_hand = make(HAND1)
    assert str(first_hand).startswith("Poker Hand: \n")
    assert str(Card(F.QUEEN, S.CLUBS)) in str(first_hand)