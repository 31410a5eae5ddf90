"""Fixed parameters of the blackjack simulation."""

NUM_PLAYERS = 7
DECKS = 8
PENETRATION = 0.5
UNIT = 1.0
NUM_SHOES = 100
OUT_DIR = "/mnt/dados/BJ_Binario/Resultados"

RANK_CHARS = "23456789TJQKA"

# Wong Halves count tag for each rank index (2..9, T, J, Q, K, A).
WONG_HALVES = (
    0.5,   # 2
    1.0,   # 3
    1.0,   # 4
    1.5,   # 5
    1.0,   # 6
    0.5,   # 7
    0.0,   # 8
    -0.5,  # 9
    -1.0,  # T
    -1.0,  # J
    -1.0,  # Q
    -1.0,  # K
    -1.0,  # A
)