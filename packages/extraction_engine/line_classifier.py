from dataclasses import dataclass
from typing import Iterable

from .constants import MIN_LINE_LENGTH, STRUCTURAL_MARKERS


@dataclass(frozen=True)
class LineVerdict:
    keep: bool
    reason: str = ""


class LineClassifier:
    """Filters out lines that cannot be transaction rows."""

    def __init__(
        self,
        min_length: int = MIN_LINE_LENGTH,
        markers: Iterable[str] = STRUCTURAL_MARKERS,
    ):
        self.min_length = min_length
        self.markers = tuple(marker.lower() for marker in markers)

    def classify(self, line: str) -> LineVerdict:
        if len(line) < self.min_length:
            return LineVerdict(keep=False, reason="too_short")

        line_lower = line.lower()
        for marker in self.markers:
            if marker in line_lower:
                return LineVerdict(keep=False, reason=marker)

        return LineVerdict(keep=True)
