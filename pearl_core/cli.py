from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .state import CellSequence
from .symbols import create_from_string, to_string, unknown_positions
from .moves import (
    is_valid_for_move_blocks,
    is_valid_for_move_player,
    move_blocks,
    move_player,
)


def _debug_enabled() -> bool:
    return os.getenv('PEARLS_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def _trace(enabled: bool, label: str, seq: CellSequence, player: Optional[int] = None) -> None:
    if enabled:
        print(f"[pearls] {label}: {to_string(seq, player)}")


def run(text: str, op: str = 'shift', show_player: bool = False, debug: bool = False) -> int:
    """Runs one operation on the row described by text and prints the outcome. Returns an exit status."""
    seq = create_from_string(text)
    bad = unknown_positions(seq)
    if bad:
        print(f"error: unrecognized symbol at index {', '.join(str(i) for i in bad)}", file=sys.stderr)
        return 2
    _trace(debug, 'input', seq)

    if op == 'validate':
        print(f"valid for moveBlocks: {is_valid_for_move_blocks(seq)}")
        print(f"valid for movePlayer: {is_valid_for_move_player(seq)}")
        return 0

    if op in ('blocks', 'shift'):
        if not is_valid_for_move_blocks(seq):
            if op == 'blocks':
                print('error: sequence is not valid for moveBlocks', file=sys.stderr)
                return 2
            _trace(debug, 'moveBlocks skipped', seq)
        else:
            move_blocks(seq)
            _trace(debug, 'after moveBlocks', seq)
        if op == 'blocks':
            print(to_string(seq))
            return 0

    if not is_valid_for_move_player(seq):
        print('error: sequence is not valid for movePlayer', file=sys.stderr)
        return 2
    player = move_player(seq)
    _trace(debug, 'after movePlayer', seq, player)
    print(to_string(seq, player if show_player else None))
    print(f"player: {player}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Shift blocks and the player along a row of pearl cells')
    parser.add_argument('text', help="Row of cell symbols, e.g. '.+-+#' (whitespace is ignored)")
    parser.add_argument('--op', choices=['blocks', 'player', 'shift', 'validate'], default='shift',
                        help='Operation to run (default: shift = blocks then player)')
    parser.add_argument('--show-player', action='store_true', help="Mark the player's cell with X")
    parser.add_argument('--debug', action='store_true', help='Print intermediate rows (same as PEARLS_DEBUG=1)')
    args = parser.parse_args(argv)
    status = run(args.text, op=args.op, show_player=args.show_player, debug=args.debug or _debug_enabled())
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
