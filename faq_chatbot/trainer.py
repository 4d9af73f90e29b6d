"""
Trains the category model from the labeled training corpus.

Features are a bag of words over the example tokens and the learner is a
multinomial logistic regression, the maximum-entropy classifier in
scikit-learn. Training uses no randomness, so the same corpus and parameters
always produce the same model.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.linear_model import LogisticRegression

from .models.data_models import ClassificationModel, TrainingExample
from .exceptions import TrainingError


logger = logging.getLogger(__name__)

BAG_OF_WORDS = "bag-of-words"
FEATURE_PREFIX = "bow="


def bag_of_words(tokens: Sequence[str]) -> List[str]:
    """
    Generate bag-of-words features for a token sequence.

    Every token becomes one ``bow=<token>`` feature; repeated tokens are
    counted, order is ignored.
    """
    return [FEATURE_PREFIX + token.lower() for token in tokens if token and token.strip()]


@dataclass
class TrainingParameters:
    """Parameters controlling model training."""
    feature_generator: str = BAG_OF_WORDS
    cutoff: int = 0  # minimum total count for a feature to be kept
    language: str = "en"
    max_iterations: int = 100
    regularization: float = 1.0

    def __post_init__(self):
        """Validate training parameters after initialization."""
        if self.cutoff < 0:
            raise ValueError("cutoff cannot be negative")
        if self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        if self.regularization <= 0:
            raise ValueError("regularization must be positive")

    @classmethod
    def from_config(cls, training_config) -> 'TrainingParameters':
        """
        Create parameters from a TrainingConfig.

        Raises:
            TrainingError: If the configured parameters are invalid
        """
        try:
            return cls(
                feature_generator=training_config.feature_generator,
                cutoff=training_config.cutoff,
                language=training_config.language,
                max_iterations=training_config.max_iterations,
                regularization=training_config.regularization,
            )
        except ValueError as e:
            raise TrainingError(f"Invalid training configuration: {str(e)}") from e


class ModelTrainer:
    """Builds a ClassificationModel from a training corpus."""

    def __init__(self, params: TrainingParameters = None):
        self.params = params or TrainingParameters()

    def train(self, corpus: Iterable[TrainingExample]) -> ClassificationModel:
        """
        Train a category model.

        Args:
            corpus: Training examples

        Returns:
            Trained ClassificationModel

        Raises:
            TrainingError: If the corpus is empty, has no labels or fitting fails
        """
        if self.params.feature_generator != BAG_OF_WORDS:
            raise TrainingError(f"Unsupported feature generator: {self.params.feature_generator}")

        examples = list(corpus) if corpus is not None else []
        if not examples:
            raise TrainingError("Training corpus is empty")

        labels = sorted({example.label for example in examples if example.label})
        if not labels:
            raise TrainingError("Training corpus contains no labels")

        documents = [example.tokens for example in examples]
        targets = [example.label for example in examples]

        vectorizer = self._fit_vectorizer(documents)
        features = vectorizer.transform(documents)

        metadata = {
            "language": self.params.language,
            "cutoff": self.params.cutoff,
            "examples": len(examples),
        }

        if len(labels) == 1:
            logger.info(f"Corpus has a single category '{labels[0]}', skipping estimator fit")
            return ClassificationModel(labels=tuple(labels), vectorizer=vectorizer, metadata=metadata)

        estimator = LogisticRegression(
            C=self.params.regularization,
            max_iter=self.params.max_iterations,
            solver="lbfgs",
        )
        try:
            estimator.fit(features, targets)
        except ValueError as e:
            raise TrainingError(f"Failed to fit category model: {str(e)}") from e

        model = ClassificationModel(
            labels=tuple(str(label) for label in estimator.classes_),
            vectorizer=vectorizer,
            estimator=estimator,
            metadata=metadata,
        )
        logger.info(
            f"Trained category model on {len(examples)} examples with "
            f"{model.feature_count} features and {len(model.labels)} categories"
        )
        return model

    def _fit_vectorizer(self, documents: List[List[str]]) -> CountVectorizer:
        """
        Fit the bag-of-words vocabulary, dropping features below the cutoff.

        Raises:
            TrainingError: If no features remain
        """
        vectorizer = CountVectorizer(analyzer=bag_of_words)
        try:
            counts = vectorizer.fit_transform(documents)
        except ValueError as e:
            raise TrainingError(f"Failed to extract features: {str(e)}") from e

        if self.params.cutoff <= 1:
            return vectorizer

        totals = np.asarray(counts.sum(axis=0)).ravel()
        names = vectorizer.get_feature_names_out()
        kept = sorted(str(name) for name, total in zip(names, totals) if total >= self.params.cutoff)
        if not kept:
            raise TrainingError(f"No features occur at least {self.params.cutoff} times")

        logger.debug(f"Cutoff {self.params.cutoff} kept {len(kept)} of {len(names)} features")
        pruned = CountVectorizer(analyzer=bag_of_words, vocabulary=kept)
        pruned.fit(documents)
        return pruned
