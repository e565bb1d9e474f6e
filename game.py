from __future__ import annotations

# Facade module that re-exports the Pearls core functionality.
# Tests and the command line import from here; the logic lives under pearl_core/*.

from pearl_core.state import (  # noqa: F401
    CellState,
    Cell,
    CellSequence,
    is_movable,
    can_merge,
    is_boundary,
)
from pearl_core.symbols import (  # noqa: F401
    char_to_state,
    state_to_char,
    create_from_string,
    to_string,
    unknown_positions,
)
from pearl_core.moves import (  # noqa: F401
    START_STATES,
    collect_pearls,
    find_rightmost_movable_block,
    is_valid_for_move_blocks,
    is_valid_for_move_player,
    move_blocks,
    move_player,
    shift_right,
)


def main() -> None:
    # CLI driver delegated to pearl_core.cli
    from pearl_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
