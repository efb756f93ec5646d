from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Lisp>>> "


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched by `load` for relative paths missing from the cwd."""
    return paths_from_env('SCHEMELET_PATH', [])


def get_prompt() -> str:
    return os.environ.get('SCHEMELET_PROMPT', DEFAULT_PROMPT)


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('SCHEMELET_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        logger.warning("Ignoring SCHEMELET_RECURSION_LIMIT=%r: not an integer", raw)
        return None
    if limit <= 0:
        logger.warning("Ignoring SCHEMELET_RECURSION_LIMIT=%r: must be positive", raw)
        return None
    return limit


def get_log_level() -> int:
    """Log level from the LOGLEVEL environment variable, WARNING by default."""
    name = os.environ.get('LOGLEVEL', '').upper()
    if name:
        level = getattr(logging, name, None)
        if isinstance(level, int):
            return level
    return logging.WARNING
