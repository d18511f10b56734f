"""Non-fatal reports about input that could not be transliterated"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

_LOGGER = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    UNRECOGNIZED_CELL = "unrecognized-cell"
    """Braille cell or cell sequence that matches no rule (decode)"""

    UNRECOGNIZED_TOKEN = "unrecognized-token"
    """Romanization that is not a syllable, number or punctuation (encode)"""


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    text: str
    """Offending input, passed through verbatim to the output"""

    position: int
    """Index of the first character within its line (of the romanized line when encoding)"""

    line: int = 0
    """0-based line number"""

    def __str__(self) -> str:
        return f"{self.kind.value} {self.text!r} at line {self.line + 1}, position {self.position}"


def report(
    diagnostic: Diagnostic, diagnostics: Optional[List[Diagnostic]] = None
) -> None:
    """Log *diagnostic* and append it to *diagnostics* when given."""
    _LOGGER.warning("Unrecognized input: %s", diagnostic)

    if diagnostics is not None:
        diagnostics.append(diagnostic)
