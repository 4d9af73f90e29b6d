"""
Data models for the FAQ chatbot.
"""

from .data_models import (
    CategoryAnswerMap,
    TrainingExample,
    TrainingCorpus,
    ClassificationModel,
    SentenceAnalysis,
    ClassificationResult,
    ChatResponse
)

__all__ = [
    "CategoryAnswerMap",
    "TrainingExample",
    "TrainingCorpus",
    "ClassificationModel",
    "SentenceAnalysis",
    "ClassificationResult",
    "ChatResponse"
]
