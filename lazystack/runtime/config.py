"""Persistent JSON config helpers.

Stores the default show-stack count, the ``self`` clip width, and the pager
preference. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..commands.parsing import DEFAULT_SHOW_STACK_COUNT
from ..frames.describe import DEFAULT_SELF_CLIP_WIDTH

logger = logging.getLogger(__name__)

APP_NAME = "lazystack"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
MIN_SELF_CLIP_WIDTH = 10


@dataclass(frozen=True)
class Settings:
    show_stack_count: int = DEFAULT_SHOW_STACK_COUNT
    self_clip_width: int = DEFAULT_SELF_CLIP_WIDTH
    use_pager: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_int(value: object, minimum: int, default: int) -> int:
    """Accept real integers (not booleans) at or above ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value if value >= minimum else default


def load_show_stack_count() -> int:
    return _coerce_int(load_config().get("show_stack_count"), 1, DEFAULT_SHOW_STACK_COUNT)


def save_show_stack_count(count: int) -> None:
    if count < 1:
        return
    config = load_config()
    config["show_stack_count"] = int(count)
    save_config(config)


def load_self_clip_width() -> int:
    return _coerce_int(load_config().get("self_clip_width"), MIN_SELF_CLIP_WIDTH, DEFAULT_SELF_CLIP_WIDTH)


def save_self_clip_width(width: int) -> None:
    if width < MIN_SELF_CLIP_WIDTH:
        return
    config = load_config()
    config["self_clip_width"] = int(width)
    save_config(config)


def load_use_pager() -> bool:
    """Only explicit booleans are honored; anything else means ``True``."""
    value = load_config().get("use_pager")
    return value if isinstance(value, bool) else True


def save_use_pager(use_pager: bool) -> None:
    config = load_config()
    config["use_pager"] = bool(use_pager)
    save_config(config)


def load_settings() -> Settings:
    return Settings(
        show_stack_count=load_show_stack_count(),
        self_clip_width=load_self_clip_width(),
        use_pager=load_use_pager(),
    )
