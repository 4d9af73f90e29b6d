"""
FAQ chatbot answering questions by classifying each sentence into a category.
"""

from .models import (
    TrainingExample,
    TrainingCorpus,
    ClassificationModel,
    SentenceAnalysis,
    ClassificationResult,
    ChatResponse
)
from .config import ChatbotConfig, ResourceConfig, TrainingConfig, AnswerConfig
from .answer_store import AnswerStore, load_training_corpus, load_answer_map
from .trainer import ModelTrainer, TrainingParameters
from .preprocessing import (
    PreprocessingPipeline,
    SentenceSegmenter,
    Tokenizer,
    PosTagger,
    Lemmatizer
)
from .category_classifier import CategoryClassifier
from .aggregator import AnswerAggregator
from .chatbot import FaqChatbot
from .exceptions import (
    ChatbotError,
    ResourceLoadError,
    TrainingError,
    PreprocessingError,
    ClassificationError,
    UnmappedCategoryError
)

__version__ = "0.1.0"
__all__ = [
    "TrainingExample",
    "TrainingCorpus",
    "ClassificationModel",
    "SentenceAnalysis",
    "ClassificationResult",
    "ChatResponse",
    "ChatbotConfig",
    "ResourceConfig",
    "TrainingConfig",
    "AnswerConfig",
    "AnswerStore",
    "load_training_corpus",
    "load_answer_map",
    "ModelTrainer",
    "TrainingParameters",
    "PreprocessingPipeline",
    "SentenceSegmenter",
    "Tokenizer",
    "PosTagger",
    "Lemmatizer",
    "CategoryClassifier",
    "AnswerAggregator",
    "FaqChatbot",
    "ChatbotError",
    "ResourceLoadError",
    "TrainingError",
    "PreprocessingError",
    "ClassificationError",
    "UnmappedCategoryError"
]
