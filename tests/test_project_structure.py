"""
Test project structure and basic interfaces.
"""

import pytest
from faq_chatbot import (
    FaqChatbot,
    ChatResponse,
    ChatbotConfig,
    AnswerStore,
    ModelTrainer,
    PreprocessingPipeline,
    ChatbotError,
    ResourceLoadError,
    TrainingError,
    PreprocessingError,
    ClassificationError,
    UnmappedCategoryError
)
from faq_chatbot.config import RESOURCES_DIR


def test_exception_hierarchy():
    """Test every library error derives from ChatbotError."""
    for error_class in (
        ResourceLoadError,
        TrainingError,
        PreprocessingError,
        ClassificationError,
        UnmappedCategoryError
    ):
        assert issubclass(error_class, ChatbotError)


def test_preprocessing_error_carries_stage():
    """Test PreprocessingError names the failing stage."""
    error = PreprocessingError("tokenizer", "boom")

    assert error.stage == "tokenizer"
    assert str(error) == "tokenizer stage failed: boom"


def test_unmapped_category_error_carries_category():
    """Test UnmappedCategoryError names the category."""
    error = UnmappedCategoryError("shipping")

    assert error.category == "shipping"
    assert str(error) == "No answer defined for category: shipping"


def test_bundled_resources_present():
    """Test the default corpus and answer map ship with the package."""
    assert (RESOURCES_DIR / "faq-categorizer.txt").is_file()
    assert (RESOURCES_DIR / "questionAnswer.properties").is_file()


def test_default_config(monkeypatch):
    """Test defaults point at the bundled resources and the standard terminal category."""
    for name in ("FAQ_CORPUS_PATH", "FAQ_ANSWERS_PATH", "FAQ_TERMINAL_CATEGORY", "FAQ_TRAINING_CUTOFF"):
        monkeypatch.delenv(name, raising=False)

    config = ChatbotConfig.from_env()

    assert config.resources.corpus_path == str(RESOURCES_DIR / "faq-categorizer.txt")
    assert config.answers.terminal_category == "conversation-complete"
    assert config.training.cutoff == 0


def test_config_from_env(monkeypatch, tmp_path):
    """Test environment variables override the defaults."""
    monkeypatch.setenv("FAQ_CORPUS_PATH", str(tmp_path / "corpus.txt"))
    monkeypatch.setenv("FAQ_TERMINAL_CATEGORY", "farewell")
    monkeypatch.setenv("FAQ_TRAINING_CUTOFF", "2")

    config = ChatbotConfig.from_env()

    assert config.resources.corpus_path == str(tmp_path / "corpus.txt")
    assert config.answers.terminal_category == "farewell"
    assert config.training.cutoff == 2
