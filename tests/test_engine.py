import random

import pytest

from whiterabbit.textgen.bigram import BigramWordSynthesizer
from whiterabbit.textgen.engine import TextEngine
from whiterabbit.textgen.markov import ChainCache
from whiterabbit.textgen.tokenizer import tokenize


def test_engine_uses_corpus_chain(tiny_cache):
    engine = TextEngine(tiny_cache)
    result = engine.complete("The cat", 3, rng=random.Random(0))
    tokens = tokenize(result.text)
    assert tokens[0] == "sat"
    assert len(tokens) == 3
    assert result.hit_max_length


def test_engine_falls_back_to_invented_words():
    engine = TextEngine(ChainCache(lambda: []), BigramWordSynthesizer(rng=random.Random(2)))
    result = engine.complete("anything", 10)
    assert result.text
    assert len(result.text) <= 40


def test_seeded_fallback_is_repeatable():
    engine = TextEngine(ChainCache(lambda: []))
    first = engine.complete("anything", 25, rng=random.Random(5))
    second = engine.complete("anything", 25, rng=random.Random(5))
    assert first == second
    assert first.text


def test_engine_paragraph_mode_ignores_corpus(tiny_cache):
    engine = TextEngine(tiny_cache, BigramWordSynthesizer(rng=random.Random(3)), generator="paragraph")
    result = engine.complete("The cat", None)
    assert result.hit_max_length is False
    assert not tiny_cache.built
    assert len(tokenize(result.text)) > 10


def test_engine_rejects_unknown_generator(tiny_cache):
    with pytest.raises(ValueError):
        TextEngine(tiny_cache, generator="gpt")
