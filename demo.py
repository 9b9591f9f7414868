from typing import List, Optional, Sequence
import logging

from best_hand import BestHand, evaluate_best_hand
from cards import JACK, KING, QUEEN, Card, Suit
from options import load_options

logger = logging.getLogger(__name__)

# The seven cards shown off when running the demo
DEMO_CARDS: List[Card] = [
    Card(JACK, Suit.CLUB),
    Card(QUEEN, Suit.HEART),
    Card(7, Suit.DIAMOND),
    Card(6, Suit.DIAMOND),
    Card(2, Suit.CLUB),
    Card(KING, Suit.DIAMOND),
    Card(3, Suit.DIAMOND),
]

# Returns the lines to print for an evaluated hand
def describe(hand: BestHand) -> List[str]:
    lines = [hand.name]
    for card in hand.cards:
        lines.append(f"Rank: {card.rank}, Suit: {card.suit.label}")
    lines.append(f"({hand})")
    return lines

def main(cards: Optional[Sequence[Card]] = None) -> None:
    options = load_options()
    logging.basicConfig(level=options["log-level"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if cards is None:
        cards = DEMO_CARDS
    logger.info("Evaluating %s (ace-low straights %s)",
                " ".join(str(card) for card in cards),
                "on" if options["ace-low"] else "off")
    hand = evaluate_best_hand(cards, ace_low=options["ace-low"])
    print("\n".join(describe(hand)))

if __name__ == "__main__":
    main()
