"""
Category classification of lemmatized sentences.
"""

import logging
from typing import Sequence

import numpy as np

from .models.data_models import ClassificationModel, ClassificationResult
from .exceptions import ClassificationError


logger = logging.getLogger(__name__)


class CategoryClassifier:
    """
    Scores a lemma sequence against a trained model and picks the best category.

    Equal top scores resolve to the lexically lowest label.
    """

    def __init__(self, model: ClassificationModel):
        if model is None:
            raise ClassificationError("Classification model cannot be None")
        if not model.labels:
            raise ClassificationError("Classification model has no labels")
        self.model = model

    def classify(self, lemmas: Sequence[str]) -> ClassificationResult:
        """
        Classify one sentence.

        Args:
            lemmas: Lemma sequence of the sentence

        Returns:
            ClassificationResult with the best category and all label scores

        Raises:
            ClassificationError: If the model is malformed
        """
        labels = list(self.model.labels)
        probabilities = self._score(lemmas)

        if probabilities.shape != (len(labels),):
            raise ClassificationError(
                f"Model produced {probabilities.size} scores for {len(labels)} labels"
            )
        if not np.all(np.isfinite(probabilities)):
            raise ClassificationError("Model produced non-finite scores")

        # argmax over sorted labels returns the first maximum, the lowest label
        order = np.argsort(labels, kind="stable")
        ranked_labels = [labels[i] for i in order]
        ranked_scores = probabilities[order]
        best = int(np.argmax(ranked_scores))

        result = ClassificationResult(
            category=ranked_labels[best],
            scores={label: float(score) for label, score in zip(ranked_labels, ranked_scores)},
        )
        logger.debug(f"Category: {result.category}")
        return result

    def _score(self, lemmas: Sequence[str]) -> np.ndarray:
        """Probability distribution over model labels, in model label order."""
        if self.model.estimator is None:
            if len(self.model.labels) != 1:
                raise ClassificationError("Classification model has no fitted estimator")
            return np.ones(1)

        try:
            features = self.model.vectorizer.transform([list(lemmas)])
            probabilities = self.model.estimator.predict_proba(features)
        except (AttributeError, ValueError) as e:
            raise ClassificationError(f"Failed to score sentence: {str(e)}") from e

        return np.asarray(probabilities[0], dtype=float)
