"""Логування trigeom.

Бібліотека лише пише в логер 'trigeom' (рівень DEBUG) і не чіпає кореневий
логер процесу. Побачити повідомлення: configure_logging('DEBUG').
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT = "trigeom"
_FORMAT = logging.Formatter("%(levelname)s %(name)s: %(message)s")


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return value


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Під'єднати один stdout-обробник до логера 'trigeom' і виставити рівень.
    Повторний виклик обробник не дублює.
    """
    lvl = _to_level(level)
    root = logging.getLogger(ROOT)
    if not any(getattr(h, "_trigeom", False) for h in root.handlers):
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        handler._trigeom = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(lvl)
    root.propagate = False
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Логер у просторі імен 'trigeom'; без `level` успадковує рівень батька."""
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    return log
