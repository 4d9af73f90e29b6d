"""
Service interfaces for the FAQ chatbot preprocessing stages.
"""

from .interfaces import (
    PreprocessingStage,
    SentenceSegmenterInterface,
    TokenizerInterface,
    PosTaggerInterface,
    LemmatizerInterface
)

__all__ = [
    "PreprocessingStage",
    "SentenceSegmenterInterface",
    "TokenizerInterface",
    "PosTaggerInterface",
    "LemmatizerInterface"
]
