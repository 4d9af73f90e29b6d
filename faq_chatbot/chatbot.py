"""
Main FaqChatbot class answering FAQ-style questions.

This module ties together the answer store, the trained category model, the
preprocessing pipeline and the answer aggregator.
"""

import logging
from typing import List, Optional

from .answer_store import AnswerStore
from .trainer import ModelTrainer, TrainingParameters
from .preprocessing import PreprocessingPipeline
from .category_classifier import CategoryClassifier
from .aggregator import AnswerAggregator
from .models.data_models import ClassificationModel, ClassificationResult, ChatResponse
from .exceptions import ChatbotError


logger = logging.getLogger(__name__)


class FaqChatbot:
    """
    Answers free-text questions with canned answers per detected category.

    The store and the model are built once and only read afterwards, so a
    single instance can serve concurrent requests. Every call to answer() is
    independent of previous calls.
    """

    def __init__(
        self,
        store: AnswerStore,
        model: ClassificationModel,
        pipeline: Optional[PreprocessingPipeline] = None,
        terminal_category: str = "conversation-complete",
        fallback_answer: str = ""
    ):
        """
        Initialize the chatbot with already built components.

        Args:
            store: Loaded corpus and answer map
            model: Trained category model
            pipeline: Preprocessing pipeline (NLTK stages if not provided)
            terminal_category: Category that ends the conversation
            fallback_answer: Answer used for categories without a canned answer
        """
        self.store = store
        self.pipeline = pipeline or PreprocessingPipeline()
        self._model = model
        self._classifier = CategoryClassifier(model)
        self._aggregator = AnswerAggregator(
            store,
            terminal_category=terminal_category,
            fallback_answer=fallback_answer
        )

    @classmethod
    def from_config(cls, chatbot_config=None) -> 'FaqChatbot':
        """
        Load resources, train the model and build the pipeline.

        Args:
            chatbot_config: ChatbotConfig to use (global config if not provided)

        Returns:
            Ready-to-use FaqChatbot

        Raises:
            ResourceLoadError: If the corpus or answer map cannot be loaded
            TrainingError: If the model cannot be trained
        """
        if chatbot_config is None:
            from .config import config as chatbot_config

        store = AnswerStore.from_config(chatbot_config.resources)
        trainer = ModelTrainer(TrainingParameters.from_config(chatbot_config.training))
        model = trainer.train(store.corpus)

        return cls(
            store=store,
            model=model,
            pipeline=PreprocessingPipeline.from_config(chatbot_config.resources),
            terminal_category=chatbot_config.answers.terminal_category,
            fallback_answer=chatbot_config.answers.fallback_answer,
        )

    @property
    def model(self) -> ClassificationModel:
        return self._model

    @property
    def terminal_category(self) -> str:
        return self._aggregator.terminal_category

    def classify(self, question: str) -> List[ClassificationResult]:
        """
        Classify every sentence of a question.

        Args:
            question: Raw question text

        Returns:
            One ClassificationResult per sentence, in input order
        """
        return [
            self._classifier.classify(analysis.lemmas)
            for analysis in self.pipeline.process(question)
        ]

    def answer(self, question: str) -> ChatResponse:
        """
        Answer a question.

        Args:
            question: Raw question text, possibly several sentences

        Returns:
            ChatResponse with the joined answers and the completion flag

        Raises:
            PreprocessingError: If a preprocessing stage fails
            ClassificationError: If the model cannot score a sentence
            ChatbotError: For any other failure
        """
        if question is None:
            raise ChatbotError("Question cannot be None")

        logger.debug(f"You: {question}")
        try:
            results = self.classify(question)
            return self._aggregator.aggregate(results)
        except ChatbotError:
            raise
        except Exception as e:
            raise ChatbotError(f"Unexpected error while answering: {str(e)}") from e

    def get_categories(self) -> List[str]:
        """
        Get the categories known to the model.

        Returns:
            Sorted list of category labels
        """
        return list(self._model.labels)
