from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = 'zeus> '


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_log_level() -> int:
    name = os.environ.get('ZEUS_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # Unknown names come back as the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def get_prompt() -> str:
    return os.environ.get('ZEUS_PROMPT', _DEFAULT_PROMPT)


def get_prelude_paths() -> List[Path]:
    """Prelude files evaluated by the console before the first prompt, in order."""
    return [p for p in paths_from_env('ZEUS_PRELUDE_PATH', []) if p.is_file()]
