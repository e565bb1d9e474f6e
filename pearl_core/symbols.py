from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .state import Cell, CellSequence, CellState

PLAYER_CHAR = 'X'
UNKNOWN_CHAR = '?'

_CHAR_TO_STATE: Dict[str, CellState] = {
    '.': CellState.EMPTY,
    '#': CellState.WALL,
    'o': CellState.PEARL,
    '+': CellState.BLOCK_ODD,
    '-': CellState.BLOCK_EVEN,
    '|': CellState.CLOSED_GATE,
    '_': CellState.OPEN_GATE,
    '*': CellState.SPIKES_ALL,
    '@': CellState.PORTAL,
}
_STATE_TO_CHAR: Dict[CellState, str] = {s: ch for ch, s in _CHAR_TO_STATE.items()}


def char_to_state(ch: str) -> Optional[CellState]:
    """Maps a single character to its CellState, or None if it has no mapping."""
    return _CHAR_TO_STATE.get(ch)


def state_to_char(s: Cell) -> str:
    """Maps a CellState back to its character; the None placeholder renders as '?'."""
    if s is None:
        return UNKNOWN_CHAR
    return _STATE_TO_CHAR[s]


def create_from_string(text: str) -> CellSequence:
    """
    Builds a cell sequence from text, one cell per non-whitespace character.
    Characters without a mapping leave None in their slot instead of failing the build.
    """
    return [char_to_state(ch) for ch in text if not ch.isspace()]


def to_string(seq: Iterable[Cell], player: Optional[int] = None) -> str:
    """Renders a sequence back to text. If player is given, that index shows as 'X'."""
    out: List[str] = []
    for i, s in enumerate(seq):
        if player is not None and i == player:
            out.append(PLAYER_CHAR)
        else:
            out.append(state_to_char(s))
    return ''.join(out)


def unknown_positions(seq: Iterable[Cell]) -> List[int]:
    """Indices that hold the None placeholder left by an undecodable character."""
    return [i for i, s in enumerate(seq) if s is None]
