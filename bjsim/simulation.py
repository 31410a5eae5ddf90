"""Shoe-by-shoe blackjack simulation writing a hand log and a count log."""

from dataclasses import dataclass
from pathlib import Path

from .cards import Shoe, card_char, hand_to_string, rank_index
from .constants import DECKS, NUM_PLAYERS, NUM_SHOES, OUT_DIR, PENETRATION, UNIT
from .game import CardCounter, Hand, play_dealer, play_hand
from .rng import clock_seeded_rng

LOG_HEADER = (
    "Inicial,Upcard,Acoes,Final,Valor,DealerFinal,Resultado,Aposta,PNL,"
    "Double,Split,BJ_Jogador,BJ_Dealer"
)
COUNT_HEADER = "carta,running_count,true_count,decks_remaining"
LOG_FILENAME = "log.csv"
COUNT_FILENAME = "count_check.csv"

_ACE_RANK = 11


@dataclass(frozen=True)
class SimulationResult:
    """Where a simulation wrote its output and how much it played."""

    log_path: Path
    count_path: Path
    shoes: int
    hands: int


def upcard_rank(card):
    """Strategy rank of a dealer upcard: 2-9, 10 for tens and faces, 11 for ace."""
    idx = rank_index(card)
    if idx <= 7:
        return idx + 2
    if idx <= 11:
        return 10
    return _ACE_RANK


def _flag(value):
    return "S" if value else "N"


def _observe(counter, shoe, card):
    if counter is not None:
        counter.observe(card, shoe.remaining())


def _draw_seen(shoe, counter):
    card = shoe.draw()
    _observe(counter, shoe, card)
    return card


def _row(hand, upcard_char, actions, dealer, doubled, split):
    return [
        hand_to_string(hand.initial_bits),
        upcard_char,
        actions,
        hand_to_string(hand.bits),
        str(hand.value),
        hand_to_string(dealer.bits),
        hand.result,
        f"{hand.bet:.1f}",
        f"{hand.pnl:.1f}",
        _flag(doubled),
        _flag(split),
        _flag(hand.blackjack),
        _flag(dealer.blackjack),
    ]


def play_round(shoe, counter, bet=UNIT, players=NUM_PLAYERS):
    """Deal and play one round; return one log row (list of fields) per hand."""
    player_bits = [_draw_seen(shoe, counter) for _ in range(players)]
    upcard = _draw_seen(shoe, counter)
    player_bits = [bits + _draw_seen(shoe, counter) for bits in player_bits]
    hole_card = shoe.draw()

    dealer = Hand.from_bits(upcard + hole_card)
    up_rank = upcard_rank(upcard)
    up_char = card_char(upcard)

    if up_rank == _ACE_RANK and dealer.blackjack:
        _observe(counter, shoe, hole_card)
        rows = []
        for bits in player_bits:
            hand = Hand.from_bits(bits)
            hand.bet = bet
            hand.finished = True
            hand.settle(dealer)
            hand.compute_pnl()
            rows.append(_row(hand, up_char, "-", dealer, False, False))
        return rows

    hands = []
    for bits in player_bits:
        seat = [Hand.from_bits(bits)]
        seat[0].bet = bet
        for hand in seat:
            new_hand = play_hand(hand, shoe, up_rank, counter)
            if new_hand is not None:
                new_hand.bet = bet
                seat.append(new_hand)
        hands.extend(seat)

    _observe(counter, shoe, hole_card)
    play_dealer(dealer, shoe, counter)

    rows = []
    for hand in hands:
        hand.settle(dealer)
        hand.compute_pnl()
        rows.append(
            _row(
                hand,
                up_char,
                hand.history or "-",
                dealer,
                hand.is_double,
                hand.from_split,
            )
        )
    return rows


def run_simulation(out_dir=OUT_DIR, num_shoes=NUM_SHOES, rng=None, progress=None):
    """Play ``num_shoes`` shoes, writing log.csv and count_check.csv to ``out_dir``.

    The count log holds the first shoe only. ``progress`` is called with
    ``(shoes_played, num_shoes)`` after every tenth shoe.
    """
    out = Path(out_dir)
    out.mkdir(mode=0o755, exist_ok=True)
    log_path = out / LOG_FILENAME
    count_path = out / COUNT_FILENAME
    if rng is None:
        rng = clock_seeded_rng()

    hands = 0
    with open(log_path, "w", newline="") as log_file, open(
        count_path, "w", newline=""
    ) as count_file:
        count_file.write(COUNT_HEADER + "\n")
        log_file.write(LOG_HEADER + "\n")
        counter = CardCounter()

        for shoe_index in range(num_shoes):
            shoe = Shoe(DECKS)
            shoe.shuffle(rng)
            limit = int(shoe.total * PENETRATION)
            counter.reset()
            counter.log = count_file if shoe_index == 0 else None

            while shoe.position <= limit:
                for row in play_round(shoe, counter):
                    log_file.write(",".join(row) + "\n")
                    hands += 1

            played = shoe_index + 1
            if progress is not None and played % 10 == 0:
                progress(played, num_shoes)

    return SimulationResult(log_path, count_path, num_shoes, hands)