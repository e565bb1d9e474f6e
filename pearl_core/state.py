from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional


class CellState(Enum):
    """One cell of a pearl row."""
    EMPTY = 'empty'
    WALL = 'wall'
    PEARL = 'pearl'
    BLOCK_ODD = 'block_odd'
    BLOCK_EVEN = 'block_even'
    CLOSED_GATE = 'closed_gate'
    OPEN_GATE = 'open_gate'
    SPIKES_ALL = 'spikes_all'
    PORTAL = 'portal'


# None marks a slot whose symbol could not be decoded.
Cell = Optional[CellState]
CellSequence = List[Cell]


# Every predicate table lists every member; tests check the coverage.
_MOVABLE: Dict[CellState, bool] = {
    CellState.EMPTY: False,
    CellState.WALL: False,
    CellState.PEARL: False,
    CellState.BLOCK_ODD: True,
    CellState.BLOCK_EVEN: True,
    CellState.CLOSED_GATE: False,
    CellState.OPEN_GATE: False,
    CellState.SPIKES_ALL: False,
    CellState.PORTAL: False,
}

# 1 / 0 for the two block parities, None for everything else.
_PARITY: Dict[CellState, Optional[int]] = {
    CellState.EMPTY: None,
    CellState.WALL: None,
    CellState.PEARL: None,
    CellState.BLOCK_ODD: 1,
    CellState.BLOCK_EVEN: 0,
    CellState.CLOSED_GATE: None,
    CellState.OPEN_GATE: None,
    CellState.SPIKES_ALL: None,
    CellState.PORTAL: None,
}

# (boundary while blocks are present, boundary with no blocks)
_BOUNDARY: Dict[CellState, tuple] = {
    CellState.EMPTY: (False, False),
    CellState.WALL: (True, True),
    CellState.PEARL: (False, False),
    CellState.BLOCK_ODD: (False, False),
    CellState.BLOCK_EVEN: (False, False),
    CellState.CLOSED_GATE: (True, True),
    CellState.OPEN_GATE: (True, False),
    CellState.SPIKES_ALL: (True, True),
    CellState.PORTAL: (True, False),
}


def is_movable(s: Cell) -> bool:
    """True for the two block parities."""
    if s is None:
        return False
    return _MOVABLE[s]


def can_merge(a: Cell, b: Cell) -> bool:
    """True when a and b are blocks of opposite parity."""
    if not (is_movable(a) and is_movable(b)):
        return False
    return _PARITY[a] != _PARITY[b]


def is_boundary(s: Cell, has_movable: bool) -> bool:
    """
    Whether s stops movement along the row.
    Walls, closed gates and spikes always do. Open gates and portals only stop
    blocks, so they count as boundaries only while the row holds a movable block.
    """
    if s is None:
        return False
    with_blocks, without_blocks = _BOUNDARY[s]
    return with_blocks if has_movable else without_blocks
