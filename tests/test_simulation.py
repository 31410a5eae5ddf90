import pytest

from bjsim.cards import Shoe, encode_rank, rank_index
from bjsim.constants import RANK_CHARS, WONG_HALVES
from bjsim.game import CardCounter
from bjsim.rng import XorShift64Star
from bjsim.simulation import (
    COUNT_HEADER,
    LOG_HEADER,
    play_round,
    run_simulation,
    upcard_rank,
)


class StackedShoe:
    """A shoe dealing a fixed sequence of ranks."""

    def __init__(self, ranks):
        self.cards = [encode_rank(RANK_CHARS.index(ch)) for ch in ranks]
        self.position = 0

    def draw(self):
        card = self.cards[self.position]
        self.position += 1
        return card

    def remaining(self):
        return len(self.cards) - self.position


def _tag_sum(cards):
    return sum(WONG_HALVES[rank_index(c)] for c in cards)


@pytest.mark.parametrize(
    "char, expected",
    [("2", 2), ("9", 9), ("T", 10), ("J", 10), ("K", 10), ("A", 11)],
)
def test_upcard_rank(char, expected):
    assert upcard_rank(encode_rank(RANK_CHARS.index(char))) == expected


def test_dealer_blackjack_players_do_not_play():
    shoe = StackedShoe("TA9K")
    counter = CardCounter()
    rows = play_round(shoe, counter, players=1)
    assert len(rows) == 1
    row = rows[0]
    assert row[1] == "A"
    assert row[2] == "-"
    assert row[6] == "D"
    assert float(row[8]) == -1.0
    assert row[12] == "S"
    assert shoe.remaining() == 0
    assert counter.running_count == pytest.approx(_tag_sum(shoe.cards))


def test_player_blackjack_wins_three_to_two():
    shoe = StackedShoe("ATK7")
    rows = play_round(shoe, CardCounter(), bet=2.0, players=1)
    row = rows[0]
    assert row[2] == "-"
    assert row[6] == "V"
    assert float(row[8]) == pytest.approx(1.5 * 2.0)
    assert row[11] == "S"
    assert row[12] == "N"


def test_double_down_pays_double():
    shoe = StackedShoe("566TT2")
    counter = CardCounter()
    rows = play_round(shoe, counter, players=1)
    row = rows[0]
    assert row[2] == "D"
    assert row[4] == "21"
    assert row[6] == "V"
    assert float(row[8]) == pytest.approx(2.0 * float(row[7]))
    assert row[9] == "S"
    assert shoe.remaining() == 0
    assert counter.running_count == pytest.approx(_tag_sum(shoe.cards))


def test_split_produces_two_split_hands():
    shoe = StackedShoe("868T3T9")
    rows = play_round(shoe, CardCounter(), players=1)
    assert len(rows) == 2
    assert all(row[10] == "S" for row in rows)
    assert all(row[6] == "V" for row in rows)
    assert rows[0][2] == "P"
    assert rows[1][2] == "S"
    assert rows[0][0] == "88"
    assert shoe.remaining() == 0


def test_round_on_real_shoe_invariants():
    shoe = Shoe(8)
    shoe.shuffle(XorShift64Star(12345))
    counter = CardCounter()
    bet = 3.0
    rows = play_round(shoe, counter, bet=bet)
    assert len(rows) >= 7
    allowed = {0.0, bet, -bet, 2 * bet, -2 * bet, 1.5 * bet}
    for row in rows:
        assert len(row) == 13
        assert row[6] in {"V", "E", "D"}
        assert float(row[8]) in allowed
        assert float(row[7]) == bet
    dealt = shoe.cards[: shoe.position]
    assert counter.running_count == pytest.approx(_tag_sum(dealt))


def test_round_without_counter_deals_cards():
    shoe = Shoe(1)
    shoe.shuffle(XorShift64Star(99))
    rows = play_round(shoe, None, players=2)
    assert len(rows) >= 2
    assert shoe.position >= 6


def _read_lines(path):
    return path.read_text().splitlines()


def test_run_simulation_writes_headers_and_rows(tmp_path):
    result = run_simulation(tmp_path, num_shoes=1, rng=XorShift64Star(7))
    log_lines = _read_lines(result.log_path)
    count_lines = _read_lines(result.count_path)
    assert log_lines[0] == LOG_HEADER
    assert count_lines[0] == COUNT_HEADER
    assert len(log_lines) - 1 == result.hands
    assert result.hands > 0
    assert all(len(line.split(",")) == 13 for line in log_lines[1:])
    assert all(len(line.split(",")) == 4 for line in count_lines[1:])


def test_run_simulation_is_deterministic(tmp_path):
    first = run_simulation(tmp_path / "a", num_shoes=2, rng=XorShift64Star(42))
    second = run_simulation(tmp_path / "b", num_shoes=2, rng=XorShift64Star(42))
    assert first.log_path.read_text() == second.log_path.read_text()
    assert first.count_path.read_text() == second.count_path.read_text()


def test_count_log_covers_first_shoe_only(tmp_path):
    one = run_simulation(tmp_path / "one", num_shoes=1, rng=XorShift64Star(5))
    two = run_simulation(tmp_path / "two", num_shoes=2, rng=XorShift64Star(5))
    assert one.count_path.read_text() == two.count_path.read_text()
    assert two.hands > one.hands


def test_progress_reported_every_ten_shoes(tmp_path):
    calls = []
    run_simulation(
        tmp_path,
        num_shoes=10,
        rng=XorShift64Star(3),
        progress=lambda played, total: calls.append((played, total)),
    )
    assert calls == [(10, 10)]


def test_missing_parent_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_simulation(tmp_path / "missing" / "out", num_shoes=1, rng=XorShift64Star(1))