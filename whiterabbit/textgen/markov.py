from __future__ import annotations

import random
from collections import Counter, deque
from dataclasses import dataclass, field
from functools import lru_cache
from threading import Lock
from typing import Callable, Iterable, Sequence

from whiterabbit.config import load_settings
from whiterabbit.corpus.loader import load_corpus
from whiterabbit.logging_utils import init_logger
from whiterabbit.textgen.result import GenerationResult
from whiterabbit.textgen.sampling import weighted_choice
from whiterabbit.textgen.tokenizer import is_punctuation, last_word, tokenize

logger = init_logger(__name__)

DEFAULT_MAX_TOKENS = 40
RECENT_WINDOW = 5
RECENT_PENALTY = 0.1
WEIGHT_EXPONENT = 0.75


@dataclass(frozen=True)
class MarkovChain:
    start_counts: dict[str, int] = field(default_factory=dict)
    transitions: dict[str, dict[str, int]] = field(default_factory=dict)
    token_counts: dict[str, int] = field(default_factory=dict)
    content_sources: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()

    @classmethod
    def from_sentences(cls, sentences: Iterable[str]) -> "MarkovChain":
        start_counts: Counter[str] = Counter()
        token_counts: Counter[str] = Counter()
        transitions: dict[str, Counter[str]] = {}

        for sentence in sentences:
            tokens = tokenize(sentence)
            if not tokens:
                continue
            start_counts[tokens[0]] += 1
            token_counts.update(tokens)
            for cur, nxt in zip(tokens, tokens[1:]):
                transitions.setdefault(cur, Counter())[nxt] += 1

        sources = tuple(transitions)
        content_sources = tuple(
            tok for tok, edges in transitions.items() if any(not is_punctuation(t) for t in edges)
        )
        return cls(
            start_counts=dict(start_counts),
            transitions={tok: dict(edges) for tok, edges in transitions.items()},
            token_counts=dict(token_counts),
            content_sources=content_sources,
            sources=sources,
        )

    @property
    def is_empty(self) -> bool:
        return not self.token_counts

    def is_degenerate(self, token: str) -> bool:
        """True when the outgoing edges are few and dominated by punctuation."""
        edges = self.transitions.get(token)
        if not edges:
            return True
        if len(edges) > 3:
            return False
        punct = sum(1 for t in edges if is_punctuation(t))
        return punct > 0 and len(edges) - punct <= 1

    def seed_token(self, prompt_tokens: Sequence[str]) -> str | None:
        for token in reversed(prompt_tokens):
            if token in self.transitions and not is_punctuation(token):
                return token
        return _arg_max(self.start_counts) or _arg_max(self.token_counts)


def _arg_max(counts: dict[str, int]) -> str | None:
    if not counts:
        return None
    return max(counts, key=counts.__getitem__)


class ChainCache:
    """Owns the process-wide chain; builds it once from the corpus loader."""

    def __init__(self, loader: Callable[[], Sequence[str]]):
        self.loader = loader
        self.lock = Lock()
        self._chain: MarkovChain | None = None

    @property
    def built(self) -> bool:
        return self._chain is not None

    def get(self) -> MarkovChain:
        chain = self._chain
        if chain is not None:
            return chain
        with self.lock:
            if self._chain is None:
                self._chain = self._build()
            return self._chain

    def reset(self) -> None:
        with self.lock:
            self._chain = None

    def _build(self) -> MarkovChain:
        try:
            sentences = list(self.loader())
        except Exception as exc:
            logger.warning("corpus unavailable, using an empty chain: %s", exc)
            sentences = []
        chain = MarkovChain.from_sentences(sentences)
        logger.info(
            "built markov chain: %d sentences, %d tokens, %d sources",
            len(sentences),
            len(chain.token_counts),
            len(chain.sources),
        )
        return chain


@lru_cache(maxsize=None)
def default_cache() -> ChainCache:
    """Chain over the corpus named by the current settings, shared by callers that bring no cache."""
    settings = load_settings()
    return ChainCache(lambda: load_corpus(settings))


def resolve_budget(max_tokens: int | None) -> int:
    if isinstance(max_tokens, (int, float)) and not isinstance(max_tokens, bool) and max_tokens > 0:
        return int(max_tokens)
    return DEFAULT_MAX_TOKENS


def format_tokens(tokens: Sequence[str], capitalize: bool = False) -> str:
    parts: list[str] = []
    for tok in tokens:
        if is_punctuation(tok) and parts:
            parts[-1] += tok
        else:
            parts.append(tok)
    text = " ".join(" ".join(parts).split())
    if not text:
        return text
    first = text[0].upper() if capitalize else text[0].lower()
    return first + text[1:]


class MarkovGenerator:
    def __init__(self, chain: MarkovChain, rng: random.Random | None = None):
        self.chain = chain
        self.rng = rng or random.Random()

    def generate(
        self,
        prompt: str,
        max_tokens: int | None = None,
        respect_budget_strictly: bool = False,
        capitalize: bool = False,
    ) -> GenerationResult:
        limit = resolve_budget(max_tokens)
        prompt_tokens = tokenize(prompt)
        seed = self.chain.seed_token(prompt_tokens)
        if seed is None:
            return GenerationResult("", False)

        current = self._first_token(seed, last_word(prompt_tokens))
        out = [current]
        recent: deque[str] = deque([current], maxlen=RECENT_WINDOW)

        while len(out) < limit:
            degenerate = self.chain.is_degenerate(current)
            nxt = None if degenerate else self._next_token(current, recent)
            if nxt is None:
                nxt = self._jump(current)
            if nxt is None and degenerate:
                nxt = self._next_token(current, recent)
            if nxt is None:
                break
            out.append(nxt)
            recent.append(nxt)
            current = nxt
            if is_punctuation(nxt) and not respect_budget_strictly:
                break

        return GenerationResult(format_tokens(out, capitalize), len(out) >= limit)

    def _first_token(self, seed: str, echo: str | None) -> str:
        if echo is None or seed != echo:
            return seed
        successors = [
            (tok, count)
            for tok, count in self.chain.transitions.get(seed, {}).items()
            if tok != echo and not is_punctuation(tok) and tok in self.chain.transitions
        ]
        choice = weighted_choice(successors, self.rng)
        if choice is not None:
            return choice
        return self._jump(echo) or seed

    def _next_token(self, current: str, recent: deque[str]) -> str | None:
        edges = self.chain.transitions.get(current)
        if not edges:
            return None
        return weighted_choice(
            (
                (tok, (count**WEIGHT_EXPONENT) * (RECENT_PENALTY if tok in recent else 1.0))
                for tok, count in edges.items()
            ),
            self.rng,
        )

    def _jump(self, current: str) -> str | None:
        for pool in (self.chain.content_sources, self.chain.sources):
            candidates = [tok for tok in pool if tok != current and not is_punctuation(tok)]
            if candidates:
                return self.rng.choice(candidates)
        return None


def generate_corpus_markov_answer(
    prompt: str,
    max_tokens: int | None = None,
    respect_budget_strictly: bool = False,
    *,
    cache: ChainCache | None = None,
    capitalize: bool = False,
    rng: random.Random | None = None,
) -> GenerationResult:
    chain = (cache or default_cache()).get()
    if chain.is_empty:
        return GenerationResult("", False)
    generator = MarkovGenerator(chain, rng=rng)
    return generator.generate(prompt, max_tokens, respect_budget_strictly, capitalize)
