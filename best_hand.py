from collections import namedtuple
from enum import Enum
from functools import total_ordering
from typing import Dict, Iterable, List, Optional
import logging

from cards import ACE, Card, Suit, validate_cards

logger = logging.getLogger(__name__)

# An enumeration for ranking poker hands, along with the name each category
# is reported under
@total_ordering
class HandRanking(Enum):
    HIGH_CARD = (1, "High card")
    PAIR = (2, "One Pair")
    TWO_PAIR = (3, "Two Pair")
    THREE_OF_KIND = (4, "Three of a kind")
    STRAIGHT = (5, "Straight")
    FLUSH = (6, "Flush")
    FULL_HOUSE = (7, "Full House")
    FOUR_OF_KIND = (8, "Four of a kind")
    STRAIGHT_FLUSH = (9, "Straight Flush")
    # Royal flush is just a special case of the straight flush

    def __init__(self, strength: int, label: str) -> None:
        self.strength = strength
        self.label = label

    def __lt__(self, other):
        if not isinstance(other, HandRanking):
            return NotImplemented
        return self.strength < other.strength

    @classmethod
    def from_label(cls, label: str) -> 'HandRanking':
        for ranking in cls:
            if ranking.label == label:
                return ranking
        raise ValueError(f"'{label}' is not a poker hand")

HAND_NAMES = tuple(ranking.label for ranking in HandRanking)

# Raised if a set of cards somehow doesn't fall into any hand category. This
# can't happen for a valid set of seven cards
class UnclassifiedHandError(RuntimeError):
    pass

# The result of an evaluation: the name of the hand, and the five cards making
# it up, ordered so the cards that define the hand come before the kickers
class BestHand(namedtuple('BestHand', ['name', 'cards'])):
    __slots__ = ()

    @property
    def ranking(self) -> HandRanking:
        return HandRanking.from_label(self.name)

    def __str__(self):
        rank = self.ranking
        cards = self.cards
        if rank == HandRanking.HIGH_CARD:
            return cards[0].name + " high"
        elif rank == HandRanking.PAIR:
            return "pair of " + cards[0].plural
        elif rank == HandRanking.TWO_PAIR:
            return "two pair, " + cards[0].plural + " and " + cards[2].plural
        elif rank == HandRanking.THREE_OF_KIND:
            return "three of a kind, " + cards[0].plural
        elif rank == HandRanking.STRAIGHT:
            return cards[0].name + "-high straight"
        elif rank == HandRanking.FLUSH:
            return cards[0].name + "-high flush"
        elif rank == HandRanking.FULL_HOUSE:
            return "full house, " + cards[0].plural + " over " + cards[3].plural
        elif rank == HandRanking.FOUR_OF_KIND:
            return "four of a kind, " + cards[0].plural
        if cards[0].rank == ACE:
            return "royal flush"
        return cards[0].name + "-high straight flush"

def _make_hand(ranking: HandRanking, cards: List[Card]) -> BestHand:
    return BestHand(ranking.label, list(cards))

# Splits the cards up by rank. Each group keeps the cards in the order given
def group_by_rank(cards: Iterable[Card]) -> Dict[int, List[Card]]:
    groups: Dict[int, List[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, []).append(card)
    return groups

# Splits the cards up by suit. Each group keeps the cards in the order given
def group_by_suit(cards: Iterable[Card]) -> Dict[Suit, List[Card]]:
    groups: Dict[Suit, List[Card]] = {}
    for card in cards:
        groups.setdefault(card.suit, []).append(card)
    return groups

# Keeps only the first card seen of each rank
def dedup_by_rank(cards: Iterable[Card]) -> List[Card]:
    return [group[0] for group in group_by_rank(cards).values()]

# Returns the rank with the most cards. When two ranks have the same number of
# cards, the higher rank wins
def highest_count_rank(groups: Dict[int, List[Card]]) -> int:
    return max(groups, key=lambda rank: (len(groups[rank]), rank))

# Looks for five cards in a row, returning the highest run found from highest
# to lowest, or None if there isn't one. The cards are expected to have no
# repeated ranks. With ace_low, an ace can also sit below a deuce.
def find_sequence(cards: Iterable[Card],
                  ace_low: bool = False) -> Optional[List[Card]]:
    ordered = sorted(cards, reverse=True)
    ranks = [card.rank for card in ordered]
    if ace_low:
        aces = [card for card in ordered if card.rank == ACE]
        ordered += aces
        ranks += [1] * len(aces)

    count = 0
    for i in range(1, len(ordered)):
        # Check to see if each card is exactly one lower than the previous card
        if ranks[i - 1] == ranks[i] + 1:
            count += 1
            if count == 4:
                return ordered[i - 4:i + 1]
        else:
            count = 0
    return None

# Takes up to `count` of the highest cards whose rank is still in `remaining`,
# to fill out a hand with kickers
def fill_remaining_hand(sorted_cards: List[Card],
                        remaining: Dict[int, List[Card]],
                        count: int) -> List[Card]:
    kickers: List[Card] = []
    for card in sorted_cards:
        if count <= 0:
            break
        if card.rank in remaining:
            kickers.append(card)
            count -= 1
    return kickers

# Returns a flush or straight flush if five or more of the cards share a suit
def _suited_hand(by_suit: Dict[Suit, List[Card]],
                 ace_low: bool) -> Optional[BestHand]:
    # Only one suit can have five cards out of seven
    for suited in by_suit.values():
        if len(suited) < 5:
            continue
        run = find_sequence(suited, ace_low)
        if run:
            return _make_hand(HandRanking.STRAIGHT_FLUSH, run)
        return _make_hand(HandRanking.FLUSH, sorted(suited, reverse=True)[:5])
    return None

# Works out the hand from the largest groups of cards sharing a rank, falling
# back on a straight where one beats what the groups make
def _grouped_hand(cards: List[Card], by_rank: Dict[int, List[Card]],
                  ace_low: bool) -> BestHand:
    sorted_cards = sorted(cards, reverse=True)
    top_rank = highest_count_rank(by_rank)
    best = list(by_rank[top_rank])
    remaining = {rank: group for rank, group in by_rank.items()
                 if rank != top_rank}
    deduped = dedup_by_rank(cards)

    if len(best) == 4:
        return _make_hand(HandRanking.FOUR_OF_KIND,
                          best + fill_remaining_hand(sorted_cards, remaining, 1))

    if len(best) == 3:
        second = remaining[highest_count_rank(remaining)]
        if len(second) > 1:
            return _make_hand(HandRanking.FULL_HOUSE, best + second[:2])
        straight = find_sequence(deduped, ace_low)
        if straight:
            return _make_hand(HandRanking.STRAIGHT, straight)
        return _make_hand(HandRanking.THREE_OF_KIND,
                          best + fill_remaining_hand(sorted_cards, remaining, 2))

    if len(best) == 2:
        straight = find_sequence(deduped, ace_low)
        if straight:
            return _make_hand(HandRanking.STRAIGHT, straight)
        second_rank = highest_count_rank(remaining)
        second = remaining[second_rank]
        if len(second) > 1:
            rest = {rank: group for rank, group in remaining.items()
                    if rank != second_rank}
            return _make_hand(HandRanking.TWO_PAIR,
                              best + second
                              + fill_remaining_hand(sorted_cards, rest, 1))
        return _make_hand(HandRanking.PAIR,
                          best + fill_remaining_hand(sorted_cards, remaining, 3))

    if len(best) == 1:
        straight = find_sequence(deduped, ace_low)
        if straight:
            return _make_hand(HandRanking.STRAIGHT, straight)
        return _make_hand(HandRanking.HIGH_CARD, sorted_cards[:5])

    raise UnclassifiedHandError(
        f"No hand matches a group of {len(best)} cards: "
        + " ".join(str(card) for card in cards))

# Returns the best possible 5-card hand that can be made out of seven cards.
# Raises InvalidCardsError if the cards aren't seven distinct cards
def evaluate_best_hand(cards: Iterable[Card], ace_low: bool = False) -> BestHand:
    cards = validate_cards(cards)

    hand = _suited_hand(group_by_suit(cards), ace_low)
    if hand is None:
        hand = _grouped_hand(cards, group_by_rank(cards), ace_low)

    if len(hand.cards) != 5:
        raise UnclassifiedHandError(
            f"{hand.name} came out with {len(hand.cards)} cards instead of 5")
    logger.debug("Best hand from %s is %s: %s",
                 " ".join(str(card) for card in cards), hand.name,
                 " ".join(str(card) for card in hand.cards))
    return hand
