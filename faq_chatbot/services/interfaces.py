"""
Core interfaces for the linguistic preprocessing stages.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Sequence, TypeVar

from ..exceptions import PreprocessingError


T = TypeVar("T")


class PreprocessingStage(ABC):
    """
    Base interface for a preprocessing stage backed by a pretrained resource.

    A stage acquires its model only for the duration of one invocation.
    """

    #: Stage name reported in PreprocessingError
    name: str = "stage"

    @property
    @abstractmethod
    def resource_name(self) -> str:
        """Identifier of the pretrained resource driving this stage."""
        pass

    @abstractmethod
    def load_model(self) -> Any:
        """
        Load the pretrained model for this stage.

        Returns:
            A ready-to-use model object
        """
        pass

    @contextmanager
    def acquire(self) -> Iterator[Any]:
        """
        Scoped access to the stage model.

        Yields:
            The loaded model, released when the block exits

        Raises:
            PreprocessingError: If the stage resource cannot be found
        """
        try:
            model = self.load_model()
        except LookupError as e:
            raise PreprocessingError(
                self.name, f"resource '{self.resource_name}' is not available"
            ) from e
        try:
            yield model
        finally:
            self.release_model(model)

    def release_model(self, model: Any) -> None:
        """Release a model obtained from load_model(). No-op by default."""
        pass

    def run(self, operation: Callable[[Any], T]) -> T:
        """
        Apply an operation to the stage model inside a scoped acquisition.

        Args:
            operation: Callable receiving the loaded model

        Returns:
            The operation result

        Raises:
            PreprocessingError: If loading or applying the model fails
        """
        try:
            with self.acquire() as model:
                return operation(model)
        except PreprocessingError:
            raise
        except Exception as e:
            raise PreprocessingError(self.name, f"{type(e).__name__}: {str(e)}") from e


class SentenceSegmenterInterface(PreprocessingStage):
    """Interface for splitting raw text into sentences."""

    name = "sentence-segmenter"

    @abstractmethod
    def segment(self, text: str) -> List[str]:
        """
        Split raw text into sentences.

        Args:
            text: Raw input text

        Returns:
            Ordered list of sentences, empty for empty input
        """
        pass


class TokenizerInterface(PreprocessingStage):
    """Interface for splitting a sentence into tokens."""

    name = "tokenizer"

    @abstractmethod
    def tokenize(self, sentence: str) -> List[str]:
        """
        Split a sentence into word and punctuation tokens.

        Args:
            sentence: One sentence of text

        Returns:
            Ordered list of tokens
        """
        pass


class PosTaggerInterface(PreprocessingStage):
    """Interface for part-of-speech tagging."""

    name = "pos-tagger"

    @abstractmethod
    def tag(self, tokens: Sequence[str]) -> List[str]:
        """
        Assign one grammatical tag per token.

        Args:
            tokens: Token sequence

        Returns:
            Tag sequence aligned with tokens
        """
        pass


class LemmatizerInterface(PreprocessingStage):
    """Interface for reducing tokens to their base form."""

    name = "lemmatizer"

    @abstractmethod
    def lemmatize(self, tokens: Sequence[str], tags: Sequence[str]) -> List[str]:
        """
        Reduce each token to its lemma given its tag.

        Args:
            tokens: Token sequence
            tags: Tag sequence aligned with tokens

        Returns:
            Lemma sequence aligned with tokens
        """
        pass
