"""
Pearls core Python package.

Pure-logic engine for a one-dimensional row of pearl cells: blocks slide right
and annihilate in opposite-parity pairs, and the player slides right to rest.
Modules:
- state.py: CellState and the movable / merge / boundary predicates
- symbols.py: one-character-per-cell text codec
- moves.py: validity checks, move_blocks, move_player
- cli.py: command line driver
"""
