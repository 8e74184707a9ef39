"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game_service, websocket_game_required
from .helpers import get_user_identity
from .game_logger import game_logger
from .normalize import normalize_diacritics, words_match

__all__ = [
    'require_game_service', 'websocket_game_required', 'get_user_identity', 'game_logger',
    'normalize_diacritics', 'words_match'
]
