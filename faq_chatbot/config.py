"""
Configuration for the FAQ chatbot library.
Independent of the HTTP backend configuration.
"""

import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass


RESOURCES_DIR = Path(__file__).parent / "resources"


@dataclass
class ResourceConfig:
    """Locations of the static resources loaded at startup."""
    corpus_path: str = str(RESOURCES_DIR / "faq-categorizer.txt")
    answers_path: str = str(RESOURCES_DIR / "questionAnswer.properties")

    # Language of the pretrained NLTK stage models
    language: str = "english"
    tagger_language: str = "eng"

    # Extra directory searched for NLTK data, in addition to NLTK_DATA
    nltk_data_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'ResourceConfig':
        """Create resource config from environment variables."""
        return cls(
            corpus_path=os.getenv('FAQ_CORPUS_PATH', cls.corpus_path),
            answers_path=os.getenv('FAQ_ANSWERS_PATH', cls.answers_path),
            language=os.getenv('FAQ_LANGUAGE', cls.language),
            tagger_language=os.getenv('FAQ_TAGGER_LANGUAGE', cls.tagger_language),
            nltk_data_dir=os.getenv('FAQ_NLTK_DATA_DIR', cls.nltk_data_dir),
        )


@dataclass
class TrainingConfig:
    """Configuration for training the category model."""
    feature_generator: str = "bag-of-words"
    cutoff: int = 0
    max_iterations: int = 100
    regularization: float = 1.0
    language: str = "en"

    @classmethod
    def from_env(cls) -> 'TrainingConfig':
        """Create training config from environment variables."""
        return cls(
            feature_generator=os.getenv('FAQ_TRAINING_FEATURES', cls.feature_generator),
            cutoff=int(os.getenv('FAQ_TRAINING_CUTOFF', cls.cutoff)),
            max_iterations=int(os.getenv('FAQ_TRAINING_MAX_ITERATIONS', cls.max_iterations)),
            regularization=float(os.getenv('FAQ_TRAINING_REGULARIZATION', cls.regularization)),
            language=os.getenv('FAQ_TRAINING_LANGUAGE', cls.language),
        )


@dataclass
class AnswerConfig:
    """Configuration for answer aggregation."""
    terminal_category: str = "conversation-complete"
    fallback_answer: str = ""

    @classmethod
    def from_env(cls) -> 'AnswerConfig':
        """Create answer config from environment variables."""
        return cls(
            terminal_category=os.getenv('FAQ_TERMINAL_CATEGORY', cls.terminal_category),
            fallback_answer=os.getenv('FAQ_FALLBACK_ANSWER', cls.fallback_answer),
        )


@dataclass
class ChatbotConfig:
    """Configuration for the FAQ chatbot library."""
    resources: ResourceConfig
    training: TrainingConfig
    answers: AnswerConfig

    @classmethod
    def from_env(cls) -> 'ChatbotConfig':
        """Create chatbot config from environment variables."""
        return cls(
            resources=ResourceConfig.from_env(),
            training=TrainingConfig.from_env(),
            answers=AnswerConfig.from_env(),
        )


# Global configuration instance
config = ChatbotConfig.from_env()
