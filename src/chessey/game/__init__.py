"""Game layer: move history and replay from history text.

Quick start::

    from chessey.game import game_from_text

    game = game_from_text("e4 e5; Nf3")
    print(game.available_moves())
"""

from chessey.game.history import (
    Game,
    GameHistory,
    check_text_move_history_format,
    create_game,
    game_from_text,
    history_to_text,
    split_history_text,
)

__all__ = [
    "Game",
    "GameHistory",
    "check_text_move_history_format",
    "create_game",
    "game_from_text",
    "history_to_text",
    "split_history_text",
]
