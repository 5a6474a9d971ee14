# -------------------------------------------------------------
# @file          rewrite_rule.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Pattern -> replacement pairs and the
#                search-and-advance loop shared by all passes
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from dataclasses import dataclass
from typing import Iterator

import regex as re


def scan(pattern: re.Pattern, src: str) -> Iterator[re.Match]:
    """Yield every non-overlapping match of `pattern`, left to right."""
    search_pos: int = 0
    while match := pattern.search(src, search_pos):
        yield match
        # always move forward, even on an empty match
        search_pos = max(match.end(), match.start() + 1)


@dataclass(slots=True, frozen=True)
class RewriteRule:
    name: str
    pattern: re.Pattern
    replacement: str

    def apply(self, src: str) -> str:
        out, count = self.pattern.subn(self.replacement, src)
        logger.debug("Rule '%s' rewrote %d occurrence(s)", self.name, count)
        return out
