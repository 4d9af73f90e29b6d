"""
Core data models for the FAQ chatbot.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple, Mapping, Iterator


# Category label -> canned answer text
CategoryAnswerMap = Mapping[str, str]


@dataclass(frozen=True)
class TrainingExample:
    """A single labeled example from the training corpus."""
    label: str
    text: str

    def __post_init__(self):
        """Validate training example after initialization."""
        if not self.label or not self.label.strip():
            raise ValueError("Example label cannot be empty")
        if not self.text or not self.text.strip():
            raise ValueError("Example text cannot be empty")

    @property
    def tokens(self) -> List[str]:
        """Whitespace-delimited tokens of the example text."""
        return self.text.split()


@dataclass(frozen=True)
class TrainingCorpus:
    """Ordered, non-empty sequence of training examples."""
    examples: Tuple[TrainingExample, ...]

    def __post_init__(self):
        """Validate training corpus after initialization."""
        if not self.examples:
            raise ValueError("Training corpus must contain at least one example")

    def __len__(self) -> int:
        return len(self.examples)

    def __iter__(self) -> Iterator[TrainingExample]:
        return iter(self.examples)

    @property
    def labels(self) -> List[str]:
        """Sorted unique labels observed in the corpus."""
        return sorted({example.label for example in self.examples})


@dataclass(frozen=True)
class ClassificationModel:
    """
    Trained category model.

    Holds the fitted bag-of-words vectorizer, the maximum-entropy estimator and
    the sorted label set. ``estimator`` is None when the corpus has a single
    label, in which case that label is always predicted.
    """
    labels: Tuple[str, ...]
    vectorizer: Any
    estimator: Optional[Any] = None
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def feature_count(self) -> int:
        """Number of bag-of-words features known to the model."""
        if self.vectorizer is None or not hasattr(self.vectorizer, "vocabulary_"):
            return 0
        return len(self.vectorizer.vocabulary_)


@dataclass(frozen=True)
class SentenceAnalysis:
    """Successive representations of one sentence of input text."""
    sentence: str
    tokens: Tuple[str, ...]
    tags: Tuple[str, ...]
    lemmas: Tuple[str, ...]

    def __post_init__(self):
        """Tags and lemmas must be positionally aligned with tokens."""
        if len(self.tags) != len(self.tokens):
            raise ValueError(
                f"Tag sequence length {len(self.tags)} does not match token count {len(self.tokens)}"
            )
        if len(self.lemmas) != len(self.tokens):
            raise ValueError(
                f"Lemma sequence length {len(self.lemmas)} does not match token count {len(self.tokens)}"
            )


@dataclass
class ClassificationResult:
    """Best category for one sentence with the score distribution over all labels."""
    category: str
    scores: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        """Validate classification result after initialization."""
        if not self.category:
            raise ValueError("Category cannot be empty")
        if self.scores and self.category not in self.scores:
            raise ValueError(f"Category '{self.category}' missing from score distribution")

    @property
    def confidence(self) -> float:
        """Probability assigned to the chosen category."""
        return self.scores.get(self.category, 0.0)

    def get_top_categories(self, max_categories: int = 3) -> List[Tuple[str, float]]:
        """
        Get the highest scoring categories.

        Args:
            max_categories: Maximum number of categories to return

        Returns:
            List of (category, score) pairs, highest score first
        """
        ranked = sorted(self.scores.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:max_categories]


@dataclass(frozen=True)
class ChatResponse:
    """Answer to a question plus whether the conversation should end."""
    answer: str
    conversation_complete: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the response to a dictionary.

        Returns:
            Dictionary with ``answer`` and ``conversationComplete`` keys
        """
        return {
            "answer": self.answer,
            "conversationComplete": self.conversation_complete,
        }
