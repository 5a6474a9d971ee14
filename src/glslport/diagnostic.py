# -------------------------------------------------------------
# @file          diagnostic.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Diagnostics reported by the preprocessor and
#                the sinks that receive them
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from dataclasses import dataclass
from typing import Callable

import regex as re

# (snapshot, matched region or None, message)
ReportError = Callable[[str, re.Match | None, str], None]


@dataclass(slots=True, frozen=True)
class Diagnostic:
    snapshot: str
    match: re.Match | None
    message: str

    @property
    def matched_text(self) -> str | None:
        return self.match.group(0) if self.match else None

    @property
    def line_no(self) -> int | None:
        """1-based line of the match start inside the snapshot."""
        if self.match is None: return None
        return self.snapshot.count('\n', 0, self.match.start()) + 1

    def __str__(self) -> str:
        if (line := self.line_no) is None: return self.message
        return f"line {line}: {self.message} ('{self.matched_text.strip()}')"


def no_report(snapshot: str, match: re.Match | None, message: str) -> None:
    pass


def log_report(snapshot: str, match: re.Match | None, message: str) -> None:
    logger.warning("%s", Diagnostic(snapshot, match, message))


class DiagnosticCollector:
    """Report sink keeping every diagnostic in arrival order."""

    def __init__(self) -> None:
        self.items: list[Diagnostic] = []

    def __call__(self, snapshot: str, match: re.Match | None, message: str) -> None:
        self.items.append(Diagnostic(snapshot, match, message))

    def __iter__(self):
        return iter(self.items)

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.items]


def guard(report: ReportError) -> ReportError:
    # a failing sink is logged, the pipeline keeps going
    def guarded(snapshot: str, match: re.Match | None, message: str) -> None:
        try:
            report(snapshot, match, message)
        except Exception:
            logger.exception("Error sink failed while reporting '%s'", message)
    return guarded
