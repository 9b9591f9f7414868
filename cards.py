from collections import namedtuple
from enum import Enum
from typing import Iterable, List

JACK = 11
QUEEN = 12
KING = 13
ACE = 14

RankInfo = namedtuple('RankInfo', ['symbol', 'name', 'plural'])

RANK_INFO = {
    2:     RankInfo("2",  "deuce", "deuces"),
    3:     RankInfo("3",  "three", "threes"),
    4:     RankInfo("4",  "four",  "fours"),
    5:     RankInfo("5",  "five",  "fives"),
    6:     RankInfo("6",  "six",   "sixes"),
    7:     RankInfo("7",  "seven", "sevens"),
    8:     RankInfo("8",  "eight", "eights"),
    9:     RankInfo("9",  "nine",  "nines"),
    10:    RankInfo("10", "ten",   "tens"),
    JACK:  RankInfo("J",  "jack",  "jacks"),
    QUEEN: RankInfo("Q",  "queen", "queens"),
    KING:  RankInfo("K",  "king",  "kings"),
    ACE:   RankInfo("A",  "ace",   "aces"),
}

# The four suits, each carrying the symbol used when printing a card
class Suit(Enum):
    CLUB = '♣'
    DIAMOND = '♦'
    HEART = '♥'
    SPADE = '♠'

    @property
    def label(self) -> str:
        return self.name.capitalize()

# Raised when the cards handed to us can't make up a valid set to evaluate
class InvalidCardsError(ValueError):
    pass

# A simple, immutable class representing a card. Being a tuple, two cards are
# only the same card if both the rank and suit match
class Card(namedtuple('Card', ['rank', 'suit'])):
    __slots__ = ()

    def __new__(cls, rank: int, suit: Suit) -> 'Card':
        # bool is a subclass of int, but True isn't a card rank
        if not isinstance(rank, int) or isinstance(rank, bool) \
                or rank not in RANK_INFO:
            raise InvalidCardsError(f"{rank!r} is not a valid rank, "
                                    "ranks go from 2 to 14.")
        if not isinstance(suit, Suit):
            raise InvalidCardsError(f"{suit!r} is not a valid suit.")
        return super().__new__(cls, rank, suit)

    # When ordering two cards, suit doesn't matter, just the rank of the card
    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return RANK_INFO[self.rank].symbol + self.suit.value

    def __repr__(self) -> str:
        return f"Card({self.rank}, Suit.{self.suit.name})"

    @property
    def name(self) -> str:
        return RANK_INFO[self.rank].name

    @property
    def plural(self) -> str:
        return RANK_INFO[self.rank].plural

# Makes sure we were given exactly `count` distinct cards, returning them as a
# list. Raises InvalidCardsError otherwise
def validate_cards(cards: Iterable[Card], count: int = 7) -> List[Card]:
    if cards is None:
        raise InvalidCardsError("No cards were given.")
    try:
        cards = list(cards)
    except TypeError:
        raise InvalidCardsError(f"{cards!r} is not a collection of cards.") \
            from None
    if len(cards) != count:
        raise InvalidCardsError(f"Expected {count} cards, but got "
                                f"{len(cards)}.")
    for card in cards:
        if not isinstance(card, Card):
            raise InvalidCardsError(f"{card!r} is not a card.")
    if len(set(cards)) != len(cards):
        dups = sorted({str(card) for card in cards if cards.count(card) > 1})
        raise InvalidCardsError("The same card can't appear twice: "
                                + " ".join(dups))
    return cards
