"""
Exception classes for the FAQ chatbot.
"""


class ChatbotError(Exception):
    """Base exception for chatbot errors."""
    pass


class ResourceLoadError(ChatbotError):
    """Raised when the training corpus, answer map or a stage model cannot be loaded."""
    pass


class TrainingError(ChatbotError):
    """Raised when the classification model cannot be trained."""
    pass


class PreprocessingError(ChatbotError):
    """Raised when a linguistic preprocessing stage fails."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        super().__init__(f"{stage} stage failed: {message}")


class ClassificationError(ChatbotError):
    """Raised when the classification model is malformed or cannot score input."""
    pass


class UnmappedCategoryError(ChatbotError):
    """Raised when a category has no canned answer."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"No answer defined for category: {category}")
