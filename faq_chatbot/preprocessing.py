"""
Linguistic preprocessing pipeline.

Raw text goes through four stages, each driven by a pretrained NLTK resource:
sentence segmentation, tokenization, part-of-speech tagging and lemmatization.
Every stage loads its model for the duration of one call only.
"""

import logging
from typing import List, Optional, Sequence

import nltk
from nltk.corpus.reader.wordnet import ADJ, ADV, NOUN, VERB
from nltk.stem import WordNetLemmatizer
from nltk.tag.perceptron import PerceptronTagger
from nltk.tokenize import NLTKWordTokenizer, PunktTokenizer

from .models.data_models import SentenceAnalysis
from .services.interfaces import (
    SentenceSegmenterInterface,
    TokenizerInterface,
    PosTaggerInterface,
    LemmatizerInterface
)
from .exceptions import PreprocessingError


logger = logging.getLogger(__name__)


def _joined(items: Sequence[str]) -> str:
    return " | ".join(items)


class SentenceSegmenter(SentenceSegmenterInterface):
    """Splits text into sentences with the Punkt boundary detection model."""

    def __init__(self, language: str = "english"):
        self.language = language

    @property
    def resource_name(self) -> str:
        return f"tokenizers/punkt_tab/{self.language}/"

    def load_model(self) -> PunktTokenizer:
        nltk.data.find(self.resource_name)
        return PunktTokenizer(self.language)

    def segment(self, text: str) -> List[str]:
        if not text or not text.strip():
            return []

        sentences = self.run(lambda model: list(model.tokenize(text)))
        logger.debug(f"Sentence Detection: {_joined(sentences)}")
        return sentences


class Tokenizer(TokenizerInterface):
    """Splits a sentence into words and punctuation using Treebank rules."""

    @property
    def resource_name(self) -> str:
        return "treebank-word-rules"

    def load_model(self) -> NLTKWordTokenizer:
        return NLTKWordTokenizer()

    def tokenize(self, sentence: str) -> List[str]:
        tokens = self.run(lambda model: list(model.tokenize(sentence)))
        logger.debug(f"Tokenizer : {_joined(tokens)}")
        return tokens


class PosTagger(PosTaggerInterface):
    """Assigns Penn Treebank tags with the averaged perceptron tagger."""

    def __init__(self, language: str = "eng"):
        self.language = language

    @property
    def resource_name(self) -> str:
        return f"taggers/averaged_perceptron_tagger_{self.language}/"

    def load_model(self) -> PerceptronTagger:
        nltk.data.find(self.resource_name)
        return PerceptronTagger(lang=self.language)

    def tag(self, tokens: Sequence[str]) -> List[str]:
        if not tokens:
            return []

        tagged = self.run(lambda model: model.tag(list(tokens)))
        tags = [tag for _, tag in tagged]
        logger.debug(f"POS Tags : {_joined(tags)}")
        return tags


class Lemmatizer(LemmatizerInterface):
    """Reduces tokens to their WordNet lemma given their Penn Treebank tag."""

    @property
    def resource_name(self) -> str:
        return "corpora/wordnet"

    def load_model(self) -> WordNetLemmatizer:
        nltk.data.find(self.resource_name)
        return WordNetLemmatizer()

    @staticmethod
    def wordnet_pos(tag: str) -> str:
        """Map a Penn Treebank tag to a WordNet part of speech."""
        if tag.startswith("J"):
            return ADJ
        if tag.startswith("V"):
            return VERB
        if tag.startswith("R"):
            return ADV
        return NOUN

    def lemmatize(self, tokens: Sequence[str], tags: Sequence[str]) -> List[str]:
        if len(tokens) != len(tags):
            raise PreprocessingError(
                self.name, f"got {len(tokens)} tokens but {len(tags)} tags"
            )
        if not tokens:
            return []

        def apply(model: WordNetLemmatizer) -> List[str]:
            return [
                model.lemmatize(token.lower(), self.wordnet_pos(tag))
                for token, tag in zip(tokens, tags)
            ]

        lemmas = self.run(apply)
        logger.debug(f"Lemmatizer : {_joined(lemmas)}")
        return lemmas


class PreprocessingPipeline:
    """
    Runs the four preprocessing stages in order.

    Stages default to the NLTK implementations above; any implementation of
    the stage interfaces can be passed instead.
    """

    def __init__(
        self,
        segmenter: Optional[SentenceSegmenterInterface] = None,
        tokenizer: Optional[TokenizerInterface] = None,
        tagger: Optional[PosTaggerInterface] = None,
        lemmatizer: Optional[LemmatizerInterface] = None
    ):
        self.segmenter = segmenter or SentenceSegmenter()
        self.tokenizer = tokenizer or Tokenizer()
        self.tagger = tagger or PosTagger()
        self.lemmatizer = lemmatizer or Lemmatizer()

    @classmethod
    def from_config(cls, resource_config) -> 'PreprocessingPipeline':
        """
        Build the NLTK pipeline described by a ResourceConfig.

        Args:
            resource_config: ResourceConfig with language and NLTK data settings

        Returns:
            PreprocessingPipeline with NLTK stages
        """
        data_dir = resource_config.nltk_data_dir
        if data_dir and data_dir not in nltk.data.path:
            nltk.data.path.insert(0, data_dir)

        return cls(
            segmenter=SentenceSegmenter(resource_config.language),
            tokenizer=Tokenizer(),
            tagger=PosTagger(resource_config.tagger_language),
            lemmatizer=Lemmatizer(),
        )

    def split(self, text: str) -> List[str]:
        """Split raw text into sentences."""
        return self.segmenter.segment(text)

    def analyze(self, sentence: str) -> SentenceAnalysis:
        """
        Tokenize, tag and lemmatize one sentence.

        Args:
            sentence: One sentence of text

        Returns:
            SentenceAnalysis with aligned tokens, tags and lemmas

        Raises:
            PreprocessingError: If a stage fails or returns misaligned output
        """
        tokens = self.tokenizer.tokenize(sentence)

        tags = self.tagger.tag(tokens)
        if len(tags) != len(tokens):
            raise PreprocessingError(
                self.tagger.name, f"returned {len(tags)} tags for {len(tokens)} tokens"
            )

        lemmas = self.lemmatizer.lemmatize(tokens, tags)
        if len(lemmas) != len(tokens):
            raise PreprocessingError(
                self.lemmatizer.name, f"returned {len(lemmas)} lemmas for {len(tokens)} tokens"
            )

        return SentenceAnalysis(
            sentence=sentence,
            tokens=tuple(tokens),
            tags=tuple(tags),
            lemmas=tuple(lemmas),
        )

    def process(self, text: str) -> List[SentenceAnalysis]:
        """
        Run the full pipeline over raw text.

        Args:
            text: Raw question text

        Returns:
            One SentenceAnalysis per sentence, in input order
        """
        return [self.analyze(sentence) for sentence in self.split(text)]
