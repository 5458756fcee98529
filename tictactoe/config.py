"""
settings for the game window, read from TICTACTOE_* env vars
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "TICTACTOE_"
THEMES = ("light", "dark")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_OPPONENT_DELAY_MS = 500     # computer "thinking" pause
DEFAULT_MIN_PASSWORD_LENGTH = 6


class ConfigError(ValueError):
    """bad value in the environment"""


def _env_int(environ, name, default, minimum=0):
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def _env_choice(environ, name, default, choices, normalize=str.lower):
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    value = normalize(raw.strip())
    if value not in choices:
        raise ConfigError(f"{ENV_PREFIX}{name} must be one of {', '.join(choices)}, got {raw!r}")
    return value


@dataclass
class GameConfig:
    opponent_delay_ms: int = DEFAULT_OPPONENT_DELAY_MS
    theme: str = "dark"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH
    seed: Optional[int] = None

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        """
        build a config from environ (os.environ by default)
        unset or blank vars keep their defaults
        """
        environ = os.environ if environ is None else environ
        seed_raw = environ.get(ENV_PREFIX + "SEED", "").strip()
        return cls(
            opponent_delay_ms=_env_int(environ, "OPPONENT_DELAY_MS", DEFAULT_OPPONENT_DELAY_MS),
            theme=_env_choice(environ, "THEME", "dark", THEMES),
            log_level=_env_choice(environ, "LOG_LEVEL", "INFO", LOG_LEVELS, normalize=str.upper),
            log_file=environ.get(ENV_PREFIX + "LOG_FILE") or None,
            min_password_length=_env_int(environ, "MIN_PASSWORD_LENGTH",
                                         DEFAULT_MIN_PASSWORD_LENGTH, minimum=1),
            seed=_env_int(environ, "SEED", None) if seed_raw else None,
        )
