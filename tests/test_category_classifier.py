"""
Tests for the category classifier.
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from faq_chatbot.category_classifier import CategoryClassifier
from faq_chatbot.exceptions import ClassificationError
from faq_chatbot.models.data_models import ClassificationModel, ClassificationResult, TrainingCorpus, TrainingExample
from faq_chatbot.trainer import ModelTrainer


def mock_model(labels, probabilities):
    """Model whose estimator always returns the given probabilities."""
    vectorizer = MagicMock()
    estimator = MagicMock()
    estimator.predict_proba.return_value = np.array([probabilities])
    return ClassificationModel(labels=tuple(labels), vectorizer=vectorizer, estimator=estimator)


class TestCategoryClassifier:
    """Test cases for CategoryClassifier."""

    def test_classify_scenario(self, scenario_model):
        """Test sentences are mapped to the category sharing their words."""
        classifier = CategoryClassifier(scenario_model)

        assert classifier.classify(["hello"]).category == "greeting"
        assert classifier.classify(["hello", "."]).category == "greeting"
        assert classifier.classify(["goodbye", "now", "."]).category == "conversation-complete"
        assert classifier.classify(["bye"]).category == "farewell"

    def test_scores_cover_every_label(self, scenario_model):
        """Test the score distribution includes all labels and sums to one."""
        result = CategoryClassifier(scenario_model).classify(["hello"])

        assert isinstance(result, ClassificationResult)
        assert set(result.scores) == {"greeting", "farewell", "conversation-complete"}
        assert sum(result.scores.values()) == pytest.approx(1.0)
        assert result.confidence == max(result.scores.values())

    def test_identical_input_identical_decision(self, scenario_store):
        """Test separately trained models decide identically."""
        first = CategoryClassifier(ModelTrainer().train(scenario_store.corpus))
        second = CategoryClassifier(ModelTrainer().train(scenario_store.corpus))

        for lemmas in (["hello"], ["goodbye"], ["now"], ["something", "else"], []):
            assert first.classify(lemmas).category == second.classify(lemmas).category
            assert first.classify(lemmas).scores == second.classify(lemmas).scores

    def test_tie_resolves_to_lowest_label(self):
        """Test equal top scores pick the lexically lowest label."""
        model = mock_model(["zeta", "alpha", "mid"], [0.4, 0.4, 0.2])

        result = CategoryClassifier(model).classify(["anything"])

        assert result.category == "alpha"
        assert result.scores == {"alpha": 0.4, "mid": 0.2, "zeta": 0.4}

    def test_single_label_model(self):
        """Test a model without estimator always predicts its only label."""
        corpus = TrainingCorpus((TrainingExample("greeting", "hello"),))
        model = ModelTrainer().train(corpus)

        result = CategoryClassifier(model).classify(["anything"])

        assert result.category == "greeting"
        assert result.scores == {"greeting": 1.0}

    def test_model_none(self):
        """Test a missing model raises ClassificationError."""
        with pytest.raises(ClassificationError, match="Classification model cannot be None"):
            CategoryClassifier(None)

    def test_model_without_labels(self):
        """Test a model without labels raises ClassificationError."""
        with pytest.raises(ClassificationError, match="Classification model has no labels"):
            CategoryClassifier(ClassificationModel(labels=(), vectorizer=MagicMock()))

    def test_missing_estimator(self):
        """Test a multi-label model without estimator is malformed."""
        model = ClassificationModel(labels=("a", "b"), vectorizer=MagicMock(), estimator=None)

        with pytest.raises(ClassificationError, match="no fitted estimator"):
            CategoryClassifier(model).classify(["hello"])

    def test_score_count_mismatch(self):
        """Test a score vector of the wrong length is malformed."""
        model = mock_model(["a", "b"], [0.2, 0.3, 0.5])

        with pytest.raises(ClassificationError, match="Model produced 3 scores for 2 labels"):
            CategoryClassifier(model).classify(["hello"])

    def test_non_finite_scores(self):
        """Test NaN scores are rejected."""
        model = mock_model(["a", "b"], [np.nan, 0.5])

        with pytest.raises(ClassificationError, match="non-finite scores"):
            CategoryClassifier(model).classify(["hello"])

    def test_estimator_failure_is_wrapped(self):
        """Test estimator errors surface as ClassificationError."""
        model = mock_model(["a", "b"], [0.5, 0.5])
        model.estimator.predict_proba.side_effect = ValueError("not fitted")

        with pytest.raises(ClassificationError, match="Failed to score sentence: not fitted"):
            CategoryClassifier(model).classify(["hello"])
