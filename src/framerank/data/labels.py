"""
Label vocabulary for classifier outputs.

The vocabulary maps each index of a classifier's score vector to a label
name. It is fixed at construction and shared read-only by the smoothing
filter and the ranker.
"""

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from ..utils.exceptions import InvalidConfiguration
from ..utils.logging import get_logger


class LabelVocabulary(Sequence):
    """Ordered, immutable sequence of distinct label names."""

    def __init__(self, labels: Iterable[str]):
        """
        Initialize the vocabulary.

        Args:
            labels: Label names in classifier output order

        Raises:
            InvalidConfiguration: If empty, if a name is blank or duplicated
        """
        names = tuple(labels)

        if not names:
            raise InvalidConfiguration("Label vocabulary must not be empty")

        positions: dict[str, int] = {}
        for index, name in enumerate(names):
            if not isinstance(name, str) or not name.strip():
                raise InvalidConfiguration(f"Invalid label name at index {index}: {name!r}")
            if name in positions:
                raise InvalidConfiguration(
                    f"Duplicate label {name!r} at indices {positions[name]} and {index}"
                )
            positions[name] = index

        self._names = names
        self._positions = positions

    def __getitem__(self, index):
        return self._names[index]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name) -> bool:
        return name in self._positions

    def __eq__(self, other) -> bool:
        if isinstance(other, LabelVocabulary):
            return self._names == other._names
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"LabelVocabulary({list(self._names)!r})"

    def index_of(self, name: str) -> int:
        """
        Get the index of a label.

        Raises:
            KeyError: If the label is not in the vocabulary
        """
        return self._positions[name]

    @property
    def names(self) -> tuple[str, ...]:
        return self._names


def load_label_list(label_path: str | Path) -> LabelVocabulary:
    """
    Read a label list, one label per line.

    Surrounding whitespace is stripped and blank lines are skipped.

    Args:
        label_path: Path to the label file

    Returns:
        Vocabulary in file order
    """
    label_path = Path(label_path)

    with open(label_path, encoding="utf-8") as f:
        labels = [line.strip() for line in f if line.strip()]

    vocabulary = LabelVocabulary(labels)
    get_logger().info(f"Loaded {len(vocabulary)} labels from {label_path}")

    return vocabulary
