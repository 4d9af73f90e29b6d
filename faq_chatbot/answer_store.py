"""
Loads the labeled training corpus and the category answer map.
"""

import logging
import string
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from .models.data_models import TrainingExample, TrainingCorpus, CategoryAnswerMap
from .exceptions import ResourceLoadError, UnmappedCategoryError


logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", "!")
KEY_SEPARATORS = ("=", ":")
PROPERTY_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _read_lines(filepath: str, kind: str) -> List[str]:
    """
    Read a UTF-8 resource file as a list of lines.

    Raises:
        ResourceLoadError: If the file is missing or unreadable
    """
    if not filepath:
        raise ResourceLoadError(f"No {kind} path provided")

    path = Path(filepath)
    if not path.exists():
        raise ResourceLoadError(f"{kind.capitalize()} file not found: {filepath}")

    if not path.is_file():
        raise ResourceLoadError(f"{kind.capitalize()} path is not a file: {filepath}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadError(f"Failed to read {kind} file {filepath}: {str(e)}") from e


def load_training_corpus(filepath: str) -> TrainingCorpus:
    """
    Load the training corpus from a line-oriented file.

    Each non-blank line holds a category label followed by whitespace and the
    example text.

    Args:
        filepath: Path to the corpus file

    Returns:
        TrainingCorpus with examples in file order

    Raises:
        ResourceLoadError: If the file is missing or a line is malformed
    """
    examples = []
    for line_number, line in enumerate(_read_lines(filepath, "corpus"), 1):
        if not line.strip():
            continue

        parts = line.split(None, 1)
        if len(parts) < 2 or not parts[1].strip():
            raise ResourceLoadError(
                f"{filepath}:{line_number}: line must contain a category label followed by example text"
            )

        examples.append(TrainingExample(label=parts[0], text=parts[1].strip()))

    if not examples:
        raise ResourceLoadError(f"Corpus file contains no training examples: {filepath}")

    corpus = TrainingCorpus(tuple(examples))
    logger.info(f"Loaded {len(corpus)} training examples across {len(corpus.labels)} categories from {filepath}")
    return corpus


def _is_continued(line: str) -> bool:
    """A line continues when it ends with an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _unescape(text: str) -> str:
    """Decode \\t, \\n, \\r, \\f, \\uXXXX and backslash-escaped characters."""
    chars = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\" or i + 1 == len(text):
            chars.append(char)
            i += 1
            continue

        escaped = text[i + 1]
        if escaped == "u":
            digits = text[i + 2:i + 6]
            if len(digits) != 4 or not all(c in string.hexdigits for c in digits):
                raise ValueError(f"malformed \\uXXXX escape '\\u{digits}'")
            chars.append(chr(int(digits, 16)))
            i += 6
        else:
            chars.append(PROPERTY_ESCAPES.get(escaped, escaped))
            i += 2
    return "".join(chars)


def _split_property(line: str) -> Tuple[str, str]:
    """Split a properties line at the first unescaped separator."""
    index = None
    i = 0
    while i < len(line):
        if line[i] == "\\":
            i += 2
            continue
        if line[i] in KEY_SEPARATORS:
            index = i
            break
        i += 1

    if index is None:
        raise ValueError("missing '=' separator")

    key = _unescape(line[:index].strip())
    value = _unescape(line[index + 1:].lstrip())
    if not key:
        raise ValueError("empty category key")
    return key, value


def load_answer_map(filepath: str) -> CategoryAnswerMap:
    """
    Load the category answer map from a key=value properties file.

    Lines starting with '#' or '!' are comments. A trailing backslash continues
    the value on the next line, while an escaped trailing backslash does not.
    Keys and values decode the \\t, \\n, \\r, \\f and \\uXXXX escapes, and a
    backslash before any other character keeps that character, so \\= and \\:
    can appear in keys. Keys must be separated from values by '=' or ':';
    the whitespace-only separator of java.util.Properties is not supported.

    Args:
        filepath: Path to the properties file

    Returns:
        Read-only mapping from category label to answer text

    Raises:
        ResourceLoadError: If the file is missing, a line is malformed or a
            category is defined twice
    """
    answers: Dict[str, str] = {}
    pending: Optional[str] = None
    pending_line = 0

    for line_number, raw_line in enumerate(_read_lines(filepath, "answer map"), 1):
        if pending is not None:
            line = pending + raw_line.lstrip()
        else:
            line = raw_line.lstrip()
            pending_line = line_number
            if not line or line.startswith(COMMENT_PREFIXES):
                continue

        if _is_continued(line):
            pending = line[:-1]
            continue
        pending = None

        try:
            key, value = _split_property(line)
        except ValueError as e:
            raise ResourceLoadError(f"{filepath}:{pending_line}: {str(e)}") from e

        if key in answers:
            raise ResourceLoadError(f"{filepath}:{pending_line}: duplicate category '{key}'")
        answers[key] = value

    if pending is not None:
        try:
            key, value = _split_property(pending)
        except ValueError as e:
            raise ResourceLoadError(f"{filepath}:{pending_line}: {str(e)}") from e
        if key in answers:
            raise ResourceLoadError(f"{filepath}:{pending_line}: duplicate category '{key}'")
        answers[key] = value

    if not answers:
        raise ResourceLoadError(f"Answer map file contains no answers: {filepath}")

    logger.info(f"Loaded {len(answers)} category answers from {filepath}")
    return MappingProxyType(answers)


class AnswerStore:
    """
    Immutable holder of the training corpus and the category answer map.

    Both tables are loaded once and shared read-only by every request.
    """

    def __init__(self, corpus: TrainingCorpus, answers: CategoryAnswerMap):
        """
        Initialize the store with already loaded tables.

        Args:
            corpus: Training corpus
            answers: Category answer map
        """
        self._corpus = corpus
        self._answers = MappingProxyType(dict(answers))

        missing = self.unanswered_labels()
        if missing:
            logger.warning(f"Corpus categories without an answer: {missing}")

    @classmethod
    def load(cls, corpus_path: str, answers_path: str) -> 'AnswerStore':
        """
        Load both resources from disk.

        Raises:
            ResourceLoadError: If either resource is missing or malformed
        """
        return cls(load_training_corpus(corpus_path), load_answer_map(answers_path))

    @classmethod
    def from_config(cls, resource_config) -> 'AnswerStore':
        """Load both resources from the paths in a ResourceConfig."""
        return cls.load(resource_config.corpus_path, resource_config.answers_path)

    @property
    def corpus(self) -> TrainingCorpus:
        return self._corpus

    @property
    def answers(self) -> CategoryAnswerMap:
        return self._answers

    @property
    def categories(self) -> List[str]:
        """Sorted list of categories that have an answer."""
        return sorted(self._answers)

    def has_category(self, category: str) -> bool:
        return category in self._answers

    def get_answer(self, category: str) -> str:
        """
        Get the canned answer for a category.

        Args:
            category: Category label

        Returns:
            Answer text

        Raises:
            UnmappedCategoryError: If the category has no answer
        """
        try:
            return self._answers[category]
        except KeyError:
            raise UnmappedCategoryError(category) from None

    def unanswered_labels(self) -> List[str]:
        """Corpus labels that have no entry in the answer map."""
        return [label for label in self._corpus.labels if label not in self._answers]
