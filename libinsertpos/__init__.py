from libinsertpos.config import Config
from libinsertpos.placement import (
    Focus,
    InsertPosition,
    Position,
    insert_position,
    setup_insert_position,
)

__all__ = [
    "Config",
    "Focus",
    "InsertPosition",
    "Position",
    "insert_position",
    "setup_insert_position",
]
