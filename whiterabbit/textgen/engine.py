from __future__ import annotations

import random

from whiterabbit.logging_utils import init_logger
from whiterabbit.textgen.bigram import BigramWordSynthesizer
from whiterabbit.textgen.markov import ChainCache, generate_corpus_markov_answer
from whiterabbit.textgen.result import GenerationResult

logger = init_logger(__name__)

GENERATORS = ("markov", "paragraph")


class TextEngine:
    """Picks a generator per request: the corpus chain first, invented words as fallback."""

    def __init__(
        self,
        cache: ChainCache,
        synthesizer: BigramWordSynthesizer | None = None,
        generator: str = "markov",
        chars_per_token: int = 4,
    ):
        if generator not in GENERATORS:
            raise ValueError(f"unknown generator {generator!r}, expected one of {GENERATORS}")
        self.cache = cache
        self.synthesizer = synthesizer or BigramWordSynthesizer()
        self.generator = generator
        self.chars_per_token = chars_per_token

    def complete(
        self,
        prompt: str,
        max_tokens: int | None = None,
        strict: bool = False,
        capitalize: bool = False,
        rng: random.Random | None = None,
    ) -> GenerationResult:
        if self.generator == "markov":
            result = generate_corpus_markov_answer(
                prompt, max_tokens, strict, cache=self.cache, capitalize=capitalize, rng=rng
            )
            if result.text:
                return result
            logger.debug("markov chain produced nothing, falling back to invented words")
        return self.paragraph(max_tokens, rng)

    def paragraph(self, max_tokens: int | None = None, rng: random.Random | None = None) -> GenerationResult:
        max_len = max_tokens * self.chars_per_token if max_tokens and max_tokens > 0 else None
        return self.synthesizer.generate_paragraph(max_len, rng=rng)
