"""
Combines per-sentence classifications into a single chat response.
"""

import logging
from typing import Iterable

from .answer_store import AnswerStore
from .models.data_models import ClassificationResult, ChatResponse
from .exceptions import UnmappedCategoryError


logger = logging.getLogger(__name__)


class AnswerAggregator:
    """
    Maps each sentence category to its canned answer and joins them in order.

    The conversation is complete as soon as any sentence falls in the terminal
    category; later sentences never reset it.
    """

    def __init__(
        self,
        store: AnswerStore,
        terminal_category: str = "conversation-complete",
        fallback_answer: str = ""
    ):
        self.store = store
        self.terminal_category = terminal_category
        self.fallback_answer = fallback_answer

    def answer_for(self, category: str) -> str:
        """
        Answer fragment for one category, or the fallback if it has none.
        """
        try:
            return self.store.get_answer(category)
        except UnmappedCategoryError as e:
            logger.warning(f"{e}; using fallback answer")
            return self.fallback_answer

    def aggregate(self, results: Iterable[ClassificationResult]) -> ChatResponse:
        """
        Build the response for a sequence of sentence classifications.

        Each fragment is preceded by a single space, including the first.

        Args:
            results: One ClassificationResult per sentence, in input order

        Returns:
            ChatResponse with the joined answer and the completion flag
        """
        answer = ""
        complete = False

        for result in results:
            answer = answer + " " + self.answer_for(result.category)
            if result.category == self.terminal_category:
                complete = True

        logger.debug(f"Chat Bot: {answer}")
        return ChatResponse(answer=answer, conversation_complete=complete)
