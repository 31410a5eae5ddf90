"""Basic strategy tables for hard totals, soft totals and pairs."""

import enum


class Action(enum.IntEnum):
    HIT = 0
    STAND = 1
    DOUBLE = 2
    SPLIT = 3
    DOUBLE_OR_HIT = 4
    DOUBLE_OR_STAND = 5
    SPLIT_OR_HIT = 6
    SPLIT_OR_STAND = 7


_H = Action.HIT
_S = Action.STAND
_DH = Action.DOUBLE_OR_HIT
_DS = Action.DOUBLE_OR_STAND
_PH = Action.SPLIT_OR_HIT
_PS = Action.SPLIT_OR_STAND

# Columns are dealer upcards 2..10, then A (11).
_HARD = (
    (_H,) * 10,                                       # 3
    (_H,) * 10,                                       # 4
    (_H,) * 10,                                       # 5
    (_H,) * 10,                                       # 6
    (_H,) * 10,                                       # 7
    (_H,) * 10,                                       # 8
    (_H, _DH, _DH, _DH, _DH, _H, _H, _H, _H, _H),     # 9
    (_DH,) * 8 + (_H, _H),                            # 10
    (_DH,) * 9 + (_H,),                               # 11
    (_H, _H, _S, _S, _S, _H, _H, _H, _H, _H),         # 12
    (_S,) * 5 + (_H,) * 5,                            # 13
    (_S,) * 5 + (_H,) * 5,                            # 14
    (_S,) * 5 + (_H,) * 5,                            # 15
    (_S,) * 5 + (_H,) * 5,                            # 16
    (_S,) * 10,                                       # 17
    (_S,) * 10,                                       # 18
    (_S,) * 10,                                       # 19
    (_S,) * 10,                                       # 20
    (_S,) * 10,                                       # 21
)

_SOFT = (
    (_H, _H, _H, _DH, _DH, _H, _H, _H, _H, _H),       # 13 (A2)
    (_H, _H, _H, _DH, _DH, _H, _H, _H, _H, _H),       # 14 (A3)
    (_H, _H, _DH, _DH, _DH, _H, _H, _H, _H, _H),      # 15 (A4)
    (_H, _H, _DH, _DH, _DH, _H, _H, _H, _H, _H),      # 16 (A5)
    (_H, _DH, _DH, _DH, _DH, _H, _H, _H, _H, _H),     # 17 (A6)
    (_S, _DS, _DS, _DS, _DS, _S, _S, _H, _H, _H),     # 18 (A7)
    (_S, _S, _S, _S, _DS, _S, _S, _S, _S, _S),        # 19 (A8)
    (_S,) * 10,                                       # 20 (A9)
)

_PAIRS = (
    (_H, _H, _PH, _PH, _PH, _PH, _H, _H, _H, _H),             # 2,2
    (_H, _H, _PH, _PH, _PH, _PH, _H, _H, _H, _H),             # 3,3
    (_H,) * 10,                                               # 4,4
    (_DH,) * 8 + (_H, _H),                                    # 5,5
    (_H, _PH, _PH, _PH, _PH, _H, _H, _H, _H, _H),             # 6,6
    (_PS, _PS, _PS, _PS, _PS, _PH, _H, _H, _H, _H),           # 7,7
    (_PS, _PS, _PS, _PS, _PS, _PH, _PH, _PH, _PH, _PH),       # 8,8
    (_PS, _PS, _PS, _PS, _PS, _S, _PS, _PS, _S, _S),          # 9,9
    (_S,) * 10,                                               # 10,10
    (_PS,) * 10,                                              # A,A
)


def _lookup(table, low, value, upcard):
    row = value - low
    if not 0 <= row < len(table) or not 2 <= upcard <= 11:
        return Action.HIT
    return table[row][upcard - 2]


def hard_action(total, upcard):
    """Action for a hard total (3-21) against an upcard (2-11, 11 = ace)."""
    return _lookup(_HARD, 3, total, upcard)


def soft_action(total, upcard):
    """Action for a soft total (13-20) against an upcard (2-11)."""
    return _lookup(_SOFT, 13, total, upcard)


def pair_action(pair_rank, upcard):
    """Action for a pair of rank value 2-11 against an upcard (2-11)."""
    return _lookup(_PAIRS, 2, pair_rank, upcard)