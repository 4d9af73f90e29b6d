"""
Shared fixtures for the FAQ chatbot tests.
"""

import re
from typing import List, Sequence

import pytest

from faq_chatbot.answer_store import AnswerStore
from faq_chatbot.preprocessing import PreprocessingPipeline
from faq_chatbot.services.interfaces import (
    SentenceSegmenterInterface,
    TokenizerInterface,
    PosTaggerInterface,
    LemmatizerInterface
)
from faq_chatbot.trainer import ModelTrainer


SCENARIO_CORPUS = """greeting hello
farewell bye
conversation-complete goodbye now
"""

SCENARIO_ANSWERS = """greeting=Hi there!
farewell=Goodbye!
conversation-complete=See you!
"""


class RuleSegmenter(SentenceSegmenterInterface):
    """Splits on sentence-final punctuation."""

    @property
    def resource_name(self) -> str:
        return "rule-segmenter"

    def load_model(self):
        return re.compile(r"[^.!?]+[.!?]*")

    def segment(self, text: str) -> List[str]:
        if not text or not text.strip():
            return []
        return self.run(lambda model: [s.strip() for s in model.findall(text) if s.strip()])


class RuleTokenizer(TokenizerInterface):
    """Splits words and punctuation with a regular expression."""

    @property
    def resource_name(self) -> str:
        return "rule-tokenizer"

    def load_model(self):
        return re.compile(r"\w+|[^\w\s]")

    def tokenize(self, sentence: str) -> List[str]:
        return self.run(lambda model: model.findall(sentence))


class RuleTagger(PosTaggerInterface):
    """Tags punctuation as '.' and everything else as 'NN'."""

    @property
    def resource_name(self) -> str:
        return "rule-tagger"

    def load_model(self):
        return None

    def tag(self, tokens: Sequence[str]) -> List[str]:
        return ["." if not token.isalnum() else "NN" for token in tokens]


class LowercaseLemmatizer(LemmatizerInterface):
    """Uses the lowercased token as its lemma."""

    @property
    def resource_name(self) -> str:
        return "lowercase"

    def load_model(self):
        return str.lower

    def lemmatize(self, tokens: Sequence[str], tags: Sequence[str]) -> List[str]:
        return self.run(lambda model: [model(token) for token in tokens])


@pytest.fixture
def rule_pipeline():
    """Preprocessing pipeline that needs no downloaded NLTK data."""
    return PreprocessingPipeline(
        segmenter=RuleSegmenter(),
        tokenizer=RuleTokenizer(),
        tagger=RuleTagger(),
        lemmatizer=LowercaseLemmatizer()
    )


@pytest.fixture
def scenario_files(tmp_path):
    """Write the greeting/farewell scenario resources to disk."""
    corpus_path = tmp_path / "faq-categorizer.txt"
    answers_path = tmp_path / "questionAnswer.properties"
    corpus_path.write_text(SCENARIO_CORPUS, encoding="utf-8")
    answers_path.write_text(SCENARIO_ANSWERS, encoding="utf-8")
    return str(corpus_path), str(answers_path)


@pytest.fixture
def scenario_store(scenario_files):
    return AnswerStore.load(*scenario_files)


@pytest.fixture
def scenario_model(scenario_store):
    return ModelTrainer().train(scenario_store.corpus)
