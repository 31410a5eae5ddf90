"""Hand evaluation, card counting and playing of player and dealer hands."""

import enum
from dataclasses import dataclass

from .cards import card_char, rank_index
from .constants import WONG_HALVES
from .strategy import Action, hard_action, pair_action, soft_action

_RANKS = 13
_ACE = 12
_HISTORY_LIMIT = 31

_DOUBLES = frozenset({Action.DOUBLE, Action.DOUBLE_OR_HIT, Action.DOUBLE_OR_STAND})
_SPLITS = frozenset({Action.SPLIT, Action.SPLIT_OR_HIT, Action.SPLIT_OR_STAND})

_ACTION_CODES = {
    Action.HIT: "H",
    Action.STAND: "S",
    Action.DOUBLE: "D",
    Action.SPLIT: "P",
    Action.DOUBLE_OR_HIT: "D/H",
    Action.DOUBLE_OR_STAND: "D/S",
    Action.SPLIT_OR_HIT: "P/H",
    Action.SPLIT_OR_STAND: "P/S",
}


class HandType(enum.IntEnum):
    HARD = 0
    SOFT = 1
    PAIR = 2
    BLACKJACK = 3


def _counts(bits):
    return [(bits >> (idx * 3)) & 0x7 for idx in range(_RANKS)]


def _rank_value(idx):
    if idx <= 7:
        return idx + 2
    if idx <= 11:
        return 10
    return 11


def _total(bits):
    """Return the best total and how many aces still count as 11."""
    counts = _counts(bits)
    aces = counts[_ACE]
    value = sum(_rank_value(idx) * count for idx, count in enumerate(counts[:_ACE]))
    value += 11 * aces
    while value > 21 and aces > 0:
        value -= 10
        aces -= 1
    return value, aces


def hand_value(bits):
    """Best blackjack total of a hand, counting aces as 11 where possible."""
    return _total(bits)[0]


def hand_type(bits):
    """Classify a hand as blackjack, pair, soft or hard."""
    counts = _counts(bits)
    total_cards = sum(counts)
    value, soft_aces = _total(bits)
    if total_cards == 2 and value == 21:
        return HandType.BLACKJACK
    if total_cards == 2 and 2 in counts:
        return HandType.PAIR
    if soft_aces > 0:
        return HandType.SOFT
    return HandType.HARD


class CardCounter:
    """Wong Halves running and true count, optionally logged as CSV lines."""

    def __init__(self, log=None):
        self.log = log
        self.running_count = 0.0
        self.true_count = 0.0

    def observe(self, card, cards_remaining):
        """Count a seen card given how many cards are left in the shoe."""
        self.running_count += WONG_HALVES[rank_index(card)]
        decks = max(1, (cards_remaining + 26) // 52)
        self.true_count = self.running_count / decks
        if self.log is not None:
            self.log.write(
                f"{card_char(card)},{self.running_count:.1f},"
                f"{self.true_count:.2f},{decks}\n"
            )
        return self.true_count

    def reset(self):
        self.running_count = 0.0
        self.true_count = 0.0


@dataclass
class Hand:
    """A hand of cards with its play state and outcome."""

    bits: int = 0
    initial_bits: int = 0
    value: int = 0
    kind: HandType = HandType.HARD
    blackjack: bool = False
    finished: bool = False
    from_split: bool = False
    is_double: bool = False
    bet: float = 0.0
    pnl: float = 0.0
    history: str = ""
    result: str = "?"

    @classmethod
    def from_bits(cls, bits, from_split=False):
        hand = cls(bits=bits, initial_bits=bits, from_split=from_split)
        hand._refresh()
        return hand

    def _refresh(self):
        self.value = hand_value(self.bits)
        self.kind = hand_type(self.bits)
        self.blackjack = self.kind is HandType.BLACKJACK

    def add_card(self, card):
        """Add a card and re-evaluate the hand."""
        self.bits += card
        self._refresh()

    def record(self, code):
        """Append an action code to the history, up to its length limit."""
        if len(self.history) < _HISTORY_LIMIT:
            self.history += code

    def settle(self, dealer):
        """Set the result against the dealer: 'V' win, 'E' push, 'D' loss."""
        if dealer.blackjack:
            result = "E" if self.blackjack else "D"
        elif self.blackjack:
            result = "V"
        elif dealer.value > 21:
            result = "V" if self.value <= 21 else "D"
        elif self.value > 21:
            result = "D"
        elif self.value == dealer.value:
            result = "E"
        elif self.value > dealer.value:
            result = "V"
        else:
            result = "D"
        self.result = result
        return result

    def compute_pnl(self):
        """Set and return the profit or loss implied by the result."""
        if self.result == "V":
            if self.blackjack:
                self.pnl = 1.5 * self.bet
            elif self.is_double:
                self.pnl = 2.0 * self.bet
            else:
                self.pnl = self.bet
        elif self.result == "E":
            self.pnl = 0.0
        elif self.result == "D":
            self.pnl = -2.0 * self.bet if self.is_double else -self.bet
        return self.pnl


def decide_action(hand, dealer_up_rank):
    """Basic-strategy action for a hand against the dealer upcard (2-11)."""
    if hand.blackjack:
        return Action.STAND
    if hand.kind is HandType.PAIR:
        counts = _counts(hand.bits)
        pair_rank = next(
            (_rank_value(idx) for idx, count in enumerate(counts) if count == 2), 0
        )
        return pair_action(pair_rank, dealer_up_rank)
    if hand.kind is HandType.SOFT:
        return soft_action(hand.value, dealer_up_rank)
    return hard_action(hand.value, dealer_up_rank)


def action_code(action):
    """Short code of an action, '?' when unknown."""
    return _ACTION_CODES.get(action, "?")


def _deal(hand, shoe, counter):
    card = shoe.draw()
    hand.add_card(card)
    if counter is not None:
        counter.observe(card, shoe.remaining())
    return card


def _hit(hand, shoe, counter):
    hand.record("H")
    _deal(hand, shoe, counter)
    if hand.value >= 21:
        hand.finished = True


def _stand(hand):
    hand.record("S")
    hand.finished = True


def _split(hand, shoe, counter, action):
    hand.record("P")
    split_idx = next(
        (idx for idx, count in enumerate(_counts(hand.bits)) if count >= 2), None
    )
    if split_idx is None:
        if action is Action.SPLIT_OR_HIT:
            hand.record("H")
            _deal(hand, shoe, counter)
        else:
            _stand(hand)
        return None

    rank_bit = 1 << (split_idx * 3)
    hand.bits -= rank_bit
    hand.value = hand_value(hand.bits)
    hand.kind = hand_type(hand.bits)

    new_hand = Hand.from_bits(rank_bit, from_split=True)
    new_hand.bet = hand.bet
    _deal(hand, shoe, counter)
    _deal(new_hand, shoe, counter)

    hand.from_split = True
    new_hand.initial_bits = new_hand.bits
    if split_idx == _ACE:
        hand.finished = True
        new_hand.finished = True
    return new_hand


def play_hand(hand, shoe, dealer_up_rank, counter=None):
    """Play a hand by basic strategy; return the new hand when it splits."""
    if hand.blackjack:
        hand.finished = True
        return None

    while not hand.finished:
        action = decide_action(hand, dealer_up_rank)
        if action is Action.STAND:
            _stand(hand)
        elif action is Action.HIT:
            _hit(hand, shoe, counter)
        elif action in _DOUBLES:
            if not hand.from_split:
                hand.record("D")
                _deal(hand, shoe, counter)
                hand.finished = True
                hand.is_double = True
            elif action is Action.DOUBLE_OR_HIT:
                _hit(hand, shoe, counter)
            else:
                _stand(hand)
        elif action in _SPLITS:
            return _split(hand, shoe, counter, action)
        else:
            hand.finished = True
    return None


def play_dealer(dealer, shoe, counter=None):
    """Draw for the dealer until reaching at least 17."""
    while dealer.value < 17:
        dealer.record("H")
        _deal(dealer, shoe, counter)
    dealer.finished = True
    return dealer