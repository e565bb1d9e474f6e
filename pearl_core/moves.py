from __future__ import annotations

from typing import List, Tuple

from .state import CellSequence, CellState, can_merge, is_boundary, is_movable

# The player always starts on one of these.
START_STATES = (CellState.EMPTY, CellState.OPEN_GATE, CellState.PORTAL)


def collect_pearls(seq: CellSequence, start: int, end: int) -> None:
    """Replaces every PEARL with EMPTY between start and end, inclusive."""
    if start > end:
        return
    if start < 0 or end > len(seq) - 1:
        raise IndexError(f'pearl range [{start}, {end}] outside sequence of length {len(seq)}')
    for i in range(start, end + 1):
        if seq[i] is CellState.PEARL:
            seq[i] = CellState.EMPTY


def find_rightmost_movable_block(seq: CellSequence, start: int) -> int:
    """
    Returns the index of the first movable block found searching left from start
    (inclusive), or -1 if there is none at or before start.
    """
    if start < 0 or start > len(seq) - 1:
        raise IndexError(f'start {start} outside sequence of length {len(seq)}')
    for i in range(start, -1, -1):
        if is_movable(seq[i]):
            return i
    return -1


def _boundary_scan(seq: CellSequence) -> Tuple[List[int], bool]:
    """Boundary indices, judging each cell by whether a block was seen up to and including it."""
    seen = False
    found: List[int] = []
    for i, s in enumerate(seq):
        if is_movable(s):
            seen = True
        if is_boundary(s, seen):
            found.append(i)
    return found, seen


def _well_formed(seq: CellSequence) -> bool:
    if len(seq) < 2:
        return False
    if seq[0] not in START_STATES:
        return False
    return all(s is not None for s in seq)


def is_valid_for_move_blocks(seq: CellSequence) -> bool:
    """
    A sequence is valid for move_blocks if it has at least two cells, starts on
    EMPTY, OPEN_GATE or PORTAL, and its only boundary cell is the last one.
    """
    if not _well_formed(seq):
        return False
    boundaries, _ = _boundary_scan(seq)
    return boundaries == [len(seq) - 1]


def is_valid_for_move_player(seq: CellSequence) -> bool:
    """
    Valid for move_player means the sequence could be the output of move_blocks:
    the move_blocks shape rules hold (except that, with no blocks left, the last
    cell may be an open gate or portal) and every block sits in one contiguous
    run ending just before the last cell.
    """
    if not _well_formed(seq):
        return False
    n = len(seq)
    boundaries, has_movable = _boundary_scan(seq)
    if boundaries != [n - 1]:
        # The player treats the last cell as a wall whatever it holds.
        terminal_ok = (
            not has_movable
            and not boundaries
            and seq[n - 1] in (CellState.OPEN_GATE, CellState.PORTAL)
        )
        if not terminal_ok:
            return False
    if not has_movable:
        return True
    i = find_rightmost_movable_block(seq, n - 1)
    if i != n - 2:
        return False
    while i >= 0 and is_movable(seq[i]):
        i -= 1
    while i >= 0 and not is_movable(seq[i]):
        i -= 1
    return i == -1


def move_blocks(seq: CellSequence) -> None:
    """
    Shifts every movable block as far right as it goes, in place. Adjacent blocks
    of opposite parity annihilate, resolved from the right, and pearls the blocks
    pass over are collected. Invalid sequences are left untouched.
    """
    if not is_valid_for_move_blocks(seq):
        return
    n = len(seq)
    last_open = n - 2
    end_search = n - 2
    collect_from = n - 1
    while end_search >= 0:
        i = find_rightmost_movable_block(seq, end_search)
        if i < 0:
            break
        top = last_open + 1  # most recently settled block
        if i > 0 and can_merge(seq[i], seq[i - 1]):
            seq[i] = CellState.EMPTY
            seq[i - 1] = CellState.EMPTY
            end_search = i - 2
            collect_from = i - 1
        elif top <= n - 2 and can_merge(seq[i], seq[top]):
            seq[i] = CellState.EMPTY
            seq[top] = CellState.EMPTY
            last_open = top
            end_search = i - 1
            collect_from = i
        elif i != last_open:
            seq[last_open] = seq[i]
            seq[i] = CellState.EMPTY
            end_search = i
            collect_from = i
            last_open -= 1
        else:
            # Already resting; it still sweeps the cell on its left.
            end_search = i - 1
            collect_from = i - 1
            last_open -= 1
    collect_pearls(seq, max(collect_from, 0), n - 2)


def move_player(seq: CellSequence) -> int:
    """
    Moves the player from index 0 as far right as possible and returns its new index.
    The player stops just before the first block, on terminal spikes when there are
    no blocks, and otherwise on the next-to-last cell. Open gates it passes close
    behind it; a gate it stops on stays open. Pearls up to the stop are collected.
    Returns 0 without touching the sequence when it is not valid for move_player.
    """
    if not is_valid_for_move_player(seq):
        return 0
    n = len(seq)
    rest = n - 2
    blocked = False
    for i in range(n - 1):
        s = seq[i]
        if is_movable(s):
            rest = i - 1
            blocked = True
            break
        if s is CellState.OPEN_GATE:
            seq[i] = CellState.CLOSED_GATE
    if not blocked and seq[n - 1] is CellState.SPIKES_ALL:
        rest = n - 1
    if seq[rest] is CellState.CLOSED_GATE:
        seq[rest] = CellState.OPEN_GATE
    collect_pearls(seq, 0, rest)
    return rest


def shift_right(seq: CellSequence) -> int:
    """A full rightward move: blocks first, then the player. Returns the player's index."""
    move_blocks(seq)
    return move_player(seq)
