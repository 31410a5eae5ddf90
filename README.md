# bjsim

A blackjack simulator. It deals eight-deck shoes to a table of seven players.
Every player follows a fixed basic-strategy table for hard totals, soft totals
and pairs, and that table includes doubles and splits. Every finished hand is
written to a CSV log. The Wong Halves running count and true count are kept
for every card that is seen.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
bjsim [--out-dir DIR] [--shoes N] [--seed SEED]
```

- `--out-dir`: the output directory. The default is
  `/mnt/dados/BJ_Binario/Resultados`. The directory is created if it is
  missing, but its parent directory must already exist.
- `--shoes`: how many shoes to play. The default is 100 and the value must
  not be negative.
- `--seed`: an integer seed for the xorshift64* shuffle generator. If you
  leave it out, the generator is seeded from the clock and the process id.

A progress line `Shoes jogados: n/total` is printed after every ten shoes.
When the run finishes, the paths of the two output files are printed. If the
output cannot be written, the error goes to standard error and the command
exits with status 1.

The command writes two files into the output directory:

- `log.csv` has one row per finished hand, with these columns:
  `Inicial,Upcard,Acoes,Final,Valor,DealerFinal,Resultado,Aposta,PNL,Double,Split,BJ_Jogador,BJ_Dealer`.
  - `Resultado` is `V` for a win, `E` for a push and `D` for a loss.
  - The flag columns hold `S` for yes and `N` for no.
  - `Acoes` is the sequence of actions taken: `H` hit, `S` stand,
    `D` double, `P` split. It is `-` when the hand took no action.
- `count_check.csv` has one line for every counted card. Each line holds the
  card, the running count, the true count and the decks remaining. The file
  covers the first shoe only.

## Library use

```python
from bjsim.rng import XorShift64Star
from bjsim.simulation import run_simulation

result = run_simulation("results", num_shoes=10, rng=XorShift64Star(12345))
print(result.log_path, result.count_path, result.shoes, result.hands)
```

`run_simulation` takes an optional `progress` callable. It is called with
`(shoes_played, num_shoes)` after every tenth shoe.

The lower-level pieces can also be used on their own:

- `bjsim.rng.XorShift64Star` is the seeded generator, with `next_u64`, `u32`
  and `below`. `clock_seeded_rng()` builds one seeded from the clock.
- `bjsim.cards.Shoe` builds, shuffles (`shuffle(rng)`) and deals (`draw()`)
  the shoe. `draw()` raises `EmptyShoeError` when the shoe is exhausted.
  A hand is an integer made of 3-bit counters, one per rank, and
  `hand_to_string` renders it.
- `bjsim.strategy`: `hard_action`, `soft_action` and `pair_action` look up
  the basic-strategy table and return an `Action`.
- `bjsim.game` evaluates hands with `hand_value` and `hand_type`, and models
  hands with `Hand`. `play_hand` plays a player hand and `play_dealer` plays
  the dealer. `CardCounter` keeps the count.
- `bjsim.simulation.play_round` plays a single round and returns its log rows.

## Game rules as played

- The shoe has eight decks. Rounds are dealt until half the shoe has been
  used, and then a fresh shuffled shoe is started. The count is reset with
  each new shoe.
- The dealer draws to 17 and stands on every 17, soft or hard.
- A winning two-card 21 pays 3:2. A winning doubled hand pays 2:1.
- A hand can double whenever the strategy calls for it, unless that hand
  came from a split. After a split, "double or hit" becomes a hit and
  "double or stand" becomes a stand.
- Splits can be repeated. Split aces receive one card each.
- The dealer checks for blackjack only when the upcard is an ace. In that
  case the players do not act. With any other upcard, the players play out
  their hands before the hole card is revealed.
- Every hand bets one unit. There is no bet spreading, no insurance and no
  surrender.