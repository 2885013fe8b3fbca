"""
Service configuration, read from the environment.

A `.env` file next to the process is honoured through python-dotenv.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _get_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _get_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """
    Attributes:
        host, port: address the HTTP server binds to
        debug: run Flask in debug mode
        author, color, head, tail: appearance returned by GET /
        shout: text attached to every move response (omitted when empty)
        strict_bounds: bound y by height - 1 instead of height + 1
        seed: fixed seed for the move generator, random when None
        cors_origins: origins allowed to call the service from a browser
        log_level: root log level name
    """

    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    author: str = "jayuuza"
    color: str = "#ff6600"
    head: str = "pixel"
    tail: str = "pixel"
    shout: str = ""
    strict_bounds: bool = False
    seed: Optional[int] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from `env`, or from os.environ after loading `.env`.

        Raises:
            ValueError: if a numeric or boolean variable cannot be parsed.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        origins_env = env.get("CORS_ALLOWED_ORIGINS")
        if origins_env:
            cors_origins = [o.strip() for o in origins_env.split(",") if o.strip()]
        else:
            cors_origins = ["*"]

        return cls(
            host=env.get("HOST", cls.host),
            port=_get_int(env, "PORT", cls.port),
            debug=_get_bool(env, "FLASK_DEBUG"),
            author=env.get("SNAKE_AUTHOR", cls.author),
            color=env.get("SNAKE_COLOR", cls.color),
            head=env.get("SNAKE_HEAD", cls.head),
            tail=env.get("SNAKE_TAIL", cls.tail),
            shout=env.get("SNAKE_SHOUT", cls.shout),
            strict_bounds=_get_bool(env, "SNAKE_STRICT_BOUNDS"),
            seed=_get_int(env, "SNAKE_SEED", None),
            cors_origins=cors_origins,
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
        )
