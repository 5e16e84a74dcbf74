from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from .config import read_config_lines
from .errors import ConfigFormatError

logger = logging.getLogger(__name__)

WALKWAY_NAME = 'Walkway'
KIND_CARD = 'Card'
KIND_OTHER = 'Other'
FIELD_SEP = ', '


@dataclass(frozen=True)
class Legend:
    """Maps single-character room codes to room names. `walkway_code` is the code
    whose name is 'Walkway', or None if the legend has no walkway entry."""
    rooms: Mapping[str, str]
    kinds: Mapping[str, str]  # code -> 'Card' or 'Other'
    walkway_code: Optional[str] = None

    def __contains__(self, code: str) -> bool:
        return code in self.rooms

    def __len__(self) -> int:
        return len(self.rooms)

    def name(self, code: str) -> str:
        return self.rooms[code]

    def is_walkway(self, code: str) -> bool:
        return self.walkway_code is not None and code == self.walkway_code

    def card_rooms(self) -> List[str]:
        """Names of the rooms that belong in the card deck, in legend order."""
        return [self.rooms[code] for code, kind in self.kinds.items() if kind == KIND_CARD]

    def as_dict(self) -> Dict[str, str]:
        return dict(self.rooms)


def _kind_of(tag: str) -> Optional[str]:
    if KIND_CARD in tag:
        return KIND_CARD
    if KIND_OTHER in tag:
        return KIND_OTHER
    return None


def parse_legend(lines: Iterable[str], source: str = '') -> Legend:
    """Parses legend lines of the form 'K, Kitchen, Card'. Blank lines are skipped."""
    rooms: Dict[str, str] = {}
    kinds: Dict[str, str] = {}
    walkway: Optional[str] = None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        fields = line.split(FIELD_SEP)
        if len(fields) != 3:
            raise ConfigFormatError(f"expected 3 fields, got {len(fields)}: {line!r}", source, lineno)
        code, name, tag = (f.strip() for f in fields)
        if len(code) != 1:
            raise ConfigFormatError(f"room code must be one character: {code!r}", source, lineno)
        kind = _kind_of(tag)
        if kind is None:
            raise ConfigFormatError(f"kind must contain '{KIND_CARD}' or '{KIND_OTHER}': {tag!r}", source, lineno)
        if code in rooms:
            raise ConfigFormatError(f"duplicate room code {code!r}", source, lineno)
        rooms[code] = name
        kinds[code] = kind
        if name == WALKWAY_NAME:
            walkway = code
    return Legend(rooms=rooms, kinds=kinds, walkway_code=walkway)


def load_legend(path: str) -> Legend:
    legend = parse_legend(read_config_lines(path), source=path)
    logger.info("loaded legend %s: %d codes, walkway=%r", path, len(legend), legend.walkway_code)
    return legend
