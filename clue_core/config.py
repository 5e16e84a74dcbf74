from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from .errors import ConfigNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = os.path.join('data', 'ClueLayout.csv')
DEFAULT_LEGEND = os.path.join('data', 'ClueLegend.txt')

# Repository root (parent of the package dir), used as a fallback for relative paths.
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').lower() in ('1', 'true', 'yes', 'on')


def resolve_path(p: str) -> str:
    """Resolves a config path: absolute paths as-is, relative ones against the
    working directory first and the repository root second."""
    if os.path.isabs(p):
        return p
    local = os.path.join(os.getcwd(), p)
    if os.path.exists(local):
        return local
    fallback = os.path.join(_REPO_ROOT, p)
    if os.path.exists(fallback):
        return fallback
    return local


def read_config_lines(path: str) -> List[str]:
    """Reads a text config file, mapping any OS-level failure to ConfigNotFoundError."""
    try:
        with open(path, encoding='utf-8') as fh:
            return fh.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigNotFoundError(f"cannot read config file {path}: {e}") from e


@dataclass(frozen=True)
class BoardConfig:
    """Where the layout and legend files live, plus the debug toggle."""
    layout_path: str
    legend_path: str
    debug: bool = False

    @classmethod
    def from_env(cls, layout: Optional[str] = None, legend: Optional[str] = None) -> 'BoardConfig':
        """Explicit arguments win over CLUE_LAYOUT / CLUE_LEGEND, which win over the bundled data/ files."""
        layout_p = layout or os.getenv('CLUE_LAYOUT') or DEFAULT_LAYOUT
        legend_p = legend or os.getenv('CLUE_LEGEND') or DEFAULT_LEGEND
        cfg = cls(
            layout_path=resolve_path(layout_p),
            legend_path=resolve_path(legend_p),
            debug=_env_flag('CLUE_DEBUG'),
        )
        logger.debug("config resolved: layout=%s legend=%s", cfg.layout_path, cfg.legend_path)
        return cfg

    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO
