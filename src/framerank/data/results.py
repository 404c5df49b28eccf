"""
Ranked classification results.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, NamedTuple


class RankedLabel(NamedTuple):
    """A label and its score. Compares equal to a plain ``(label, score)`` pair."""

    label: str
    score: float


@dataclass(frozen=True)
class RankedResult:
    """
    Top-K labels of one frame, best first.

    Entries are ordered by descending score, ties by ascending label index.
    ``indices`` holds each entry's position in the vocabulary.
    """

    entries: tuple[RankedLabel, ...]
    indices: tuple[int, ...]

    def __post_init__(self):
        if len(self.entries) != len(self.indices):
            raise ValueError("entries and indices must have the same length")

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RankedLabel]:
        return iter(self.entries)

    def __getitem__(self, position: int) -> RankedLabel:
        return self.entries[position]

    @property
    def top(self) -> RankedLabel | None:
        return self.entries[0] if self.entries else None

    @property
    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries]

    @property
    def scores(self) -> list[float]:
        return [entry.score for entry in self.entries]

    def to_list(self) -> list[tuple[str, float]]:
        return [tuple(entry) for entry in self.entries]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "results": [
                {"rank": rank, "label": entry.label, "score": entry.score, "index": index}
                for rank, (entry, index) in enumerate(
                    zip(self.entries, self.indices), start=1
                )
            ]
        }
