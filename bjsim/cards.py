"""Cards, hands encoded as 3-bit rank counters, and the shoe."""

from .constants import DECKS, RANK_CHARS

_RANKS = 13
_SUITS = 4


class EmptyShoeError(RuntimeError):
    """Raised when a card is drawn from an exhausted shoe."""


def encode_rank(index):
    """Return the card value for a rank index (0 = '2' ... 12 = 'A')."""
    if not 0 <= index < _RANKS:
        raise ValueError(f"rank index out of range: {index}")
    return 1 << (index * 3)


def rank_index(card):
    """Return the rank index of a single-card value."""
    if card <= 0:
        raise ValueError(f"invalid card: {card}")
    index = ((card & -card).bit_length() - 1) // 3
    if index >= _RANKS:
        raise ValueError(f"invalid card: {card}")
    return index


def card_char(card):
    """Return the rank character of a card."""
    return RANK_CHARS[rank_index(card)]


def hand_to_string(bits):
    """Render a hand as its rank characters in rank order."""
    return "".join(
        char * ((bits >> (idx * 3)) & 0x7) for idx, char in enumerate(RANK_CHARS)
    )


class Shoe:
    """A multi-deck shoe dealt from the top."""

    def __init__(self, decks=DECKS):
        self._cards = [
            encode_rank(rank)
            for _ in range(decks)
            for rank in range(_RANKS)
            for _ in range(_SUITS)
        ]
        self._top = 0

    @property
    def total(self):
        return len(self._cards)

    @property
    def position(self):
        """Number of cards already dealt."""
        return self._top

    @property
    def cards(self):
        return tuple(self._cards)

    def shuffle(self, rng):
        """Fisher-Yates shuffle using ``rng.below``; resets the top."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = rng.below(i + 1)
            cards[i], cards[j] = cards[j], cards[i]
        self._top = 0

    def draw(self):
        """Deal the next card."""
        if self._top >= len(self._cards):
            raise EmptyShoeError("shoe is empty")
        card = self._cards[self._top]
        self._top += 1
        return card

    def remaining(self):
        """Number of cards not yet dealt."""
        return len(self._cards) - self._top