"""
Configuration for the chain reaction engine.
"""

import logging
import os
from dataclasses import dataclass

from chain_reaction.errors import InvalidSize


# Game Configuration
GAME_CONFIG = {
    # Squares along one edge of the board
    'board_size': 6,

    # Who plays each side by default: 'human' or 'auto'
    'red_player': 'human',
    'blue_player': 'auto',
}

# AI Configuration
AI_CONFIG = {
    # Plies the search looks ahead
    'depth': 4,

    # Disable to run plain minimax (same values, more nodes)
    'use_pruning': True,
}

# Logging Configuration
LOGGING_CONFIG = {
    'level': 'WARNING',
    'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
}

DEFAULT_BOARD_SIZE = GAME_CONFIG['board_size']
DEFAULT_DEPTH = AI_CONFIG['depth']

ENV_PREFIX = 'CHAIN_REACTION_'


def validate_size(size) -> int:
    """Return SIZE if it is a usable board dimension, else raise InvalidSize."""
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidSize(size)
    return size


@dataclass
class GameConfig:
    board_size: int = DEFAULT_BOARD_SIZE
    depth: int = DEFAULT_DEPTH
    use_pruning: bool = AI_CONFIG['use_pruning']
    red_player: str = GAME_CONFIG['red_player']
    blue_player: str = GAME_CONFIG['blue_player']
    log_level: str = LOGGING_CONFIG['level']

    def __post_init__(self):
        validate_size(self.board_size)
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")
        for kind in (self.red_player, self.blue_player):
            if kind not in ('human', 'auto'):
                raise ValueError(f"Player kind must be 'human' or 'auto', got {kind!r}")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_dict(cls, config: dict) -> "GameConfig":
        """Build from a flat dict; unknown keys are ignored."""
        known = {k: v for k, v in config.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        """Defaults, overridden by CHAIN_REACTION_* environment variables."""
        environ = os.environ if environ is None else environ
        values = {**GAME_CONFIG, **AI_CONFIG, 'log_level': LOGGING_CONFIG['level']}
        if ENV_PREFIX + 'BOARD_SIZE' in environ:
            values['board_size'] = _parse_int(environ[ENV_PREFIX + 'BOARD_SIZE'], 'board size')
        if ENV_PREFIX + 'AI_DEPTH' in environ:
            values['depth'] = _parse_int(environ[ENV_PREFIX + 'AI_DEPTH'], 'AI depth')
        if ENV_PREFIX + 'LOG_LEVEL' in environ:
            values['log_level'] = environ[ENV_PREFIX + 'LOG_LEVEL'].upper()
        return cls.from_dict(values)


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid {what}: {text!r}") from None


def configure_logging(level=None) -> None:
    """Install a basic stderr handler for scripts."""
    level = level or LOGGING_CONFIG['level']
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(level=level, format=LOGGING_CONFIG['format'])
