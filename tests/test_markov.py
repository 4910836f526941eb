import random
import threading
import time

import pytest

from whiterabbit.textgen import markov
from whiterabbit.textgen.markov import (
    DEFAULT_MAX_TOKENS,
    ChainCache,
    MarkovChain,
    MarkovGenerator,
    format_tokens,
    generate_corpus_markov_answer,
    resolve_budget,
)
from whiterabbit.textgen.tokenizer import tokenize


def _answer(cache, prompt, max_tokens, strict=False, seed=0, **kwargs):
    return generate_corpus_markov_answer(prompt, max_tokens, strict, cache=cache, rng=random.Random(seed), **kwargs)


def test_chain_construction_counts():
    chain = MarkovChain.from_sentences(["The cat sat.", "The dog ran.", "", "  ,  "])
    assert chain.start_counts == {"the": 2}
    assert chain.transitions["the"] == {"cat": 1, "dog": 1}
    assert chain.transitions["sat"] == {".": 1}
    assert "." not in chain.transitions
    assert chain.token_counts["the"] == 2
    assert chain.token_counts["."] == 2
    assert set(chain.content_sources) == {"the", "cat", "dog"}
    assert set(chain.sources) == {"the", "cat", "dog", "sat", "ran"}


def test_every_source_has_positive_edges(default_cache):
    chain = default_cache.get()
    assert chain.transitions
    for edges in chain.transitions.values():
        assert edges
        assert all(count > 0 for count in edges.values())


def test_degenerate_neighbourhood():
    chain = MarkovChain.from_sentences(["a b.", "a c!", "d e f.", "d g.", "d h.", "d i.", "x y."])
    assert chain.is_degenerate("b")
    assert chain.is_degenerate("a") is False
    assert chain.is_degenerate("d") is False
    assert chain.is_degenerate("x") is False
    assert chain.is_degenerate("unknown")


def test_seed_prefers_last_known_prompt_token():
    chain = MarkovChain.from_sentences(["The cat sat.", "The dog ran."])
    assert chain.seed_token(tokenize("the dog and the cat xyz")) == "cat"
    assert chain.seed_token(tokenize("zzz qqq")) == "the"
    assert MarkovChain.from_sentences(["Hi"]).seed_token([]) == "hi"
    assert MarkovChain().seed_token(["anything"]) is None

    two_sentences = MarkovChain.from_sentences(["Hi. There friend."])
    assert "." in two_sentences.transitions
    assert two_sentences.seed_token(tokenize("well hi.")) == "hi"


def test_tiny_corpus_scenario(tiny_cache):
    for seed in range(20):
        result = _answer(tiny_cache, "The cat", 3, seed=seed)
        tokens = tokenize(result.text)
        assert 0 < len(tokens) <= 3
        assert tokens[0] == "sat"


def test_empty_corpus_returns_empty_result():
    cache = ChainCache(lambda: [])
    assert tuple(_answer(cache, "anything", 10)) == ("", False)


def test_unavailable_corpus_builds_empty_chain():
    def broken():
        raise OSError("network down")

    cache = ChainCache(broken)
    assert cache.get().is_empty
    assert _answer(cache, "anything", 10).text == ""


@pytest.mark.parametrize("budget", [None, 0, -5])
def test_unusable_budgets_use_default(default_cache, budget):
    assert resolve_budget(budget) == DEFAULT_MAX_TOKENS
    result = _answer(default_cache, "Test with default limits", budget, strict=True)
    assert len(tokenize(result.text)) == DEFAULT_MAX_TOKENS
    assert result.hit_max_length


def test_token_count_never_exceeds_budget(default_cache):
    for budget in (1, 2, 3, 5, 8, 10, 20, 50):
        for seed in range(10):
            for strict in (False, True):
                result = _answer(default_cache, "The weather is beautiful today", budget, strict, seed)
                assert len(tokenize(result.text)) <= budget
                assert len(result.text.split()) <= budget


def test_budget_of_one_emits_single_token(default_cache):
    result = _answer(default_cache, "Once upon a time", 1)
    assert len(tokenize(result.text)) == 1
    assert result.hit_max_length


@pytest.mark.parametrize(
    "prompt,budget",
    [
        ("Science and technology", 30),
        ("Philosophy explores the nature", 25),
        ("Art and culture throughout history", 35),
        ("The cat", 5),
    ],
)
def test_strict_budget_nearly_fills(default_cache, prompt, budget):
    for seed in range(10):
        result = _answer(default_cache, prompt, budget, strict=True, seed=seed)
        count = len(tokenize(result.text))
        assert budget * 0.95 <= count <= budget
        assert result.hit_max_length


def test_strict_budget_keeps_going_on_tiny_corpus(tiny_cache):
    result = _answer(tiny_cache, "The cat", 12, strict=True)
    assert len(tokenize(result.text)) == 12
    assert result.hit_max_length


def test_natural_mode_jumps_away_from_punctuation_dead_ends(tiny_cache):
    # "sat" and "ran" only lead to "." so natural mode never gets to stop there
    for seed in range(10):
        result = _answer(tiny_cache, "The cat", 40, seed=seed)
        tokens = tokenize(result.text)
        assert tokens[0] == "sat"
        assert "." not in tokens
        assert len(tokens) == 40
        assert result.hit_max_length


def test_natural_mode_stops_at_punctuation_from_branching_node():
    cache = ChainCache(lambda: ["We ran.", "We ran home.", "We ran fast."])
    for seed in range(10):
        result = _answer(cache, "we", 200, seed=seed)
        assert result.text.endswith("ran.")
        assert "home." not in result.text and "fast." not in result.text
        assert result.hit_max_length is False


def test_default_entry_point_builds_its_own_chain():
    result = generate_corpus_markov_answer("The cat", 3)
    assert result.text
    assert len(tokenize(result.text)) <= 3
    assert markov.default_cache().built
    assert generate_corpus_markov_answer("Once upon a time").text


def test_no_continuation_anywhere_stops_early():
    cache = ChainCache(lambda: ["Hello", "World"])
    result = _answer(cache, "", 10, strict=True)
    assert result.text == "hello"
    assert result.hit_max_length is False


@pytest.mark.parametrize("prompt", ["The cat", "She walked", "In the garden", "During the storm", "One upon a time"])
def test_first_token_does_not_echo_prompt(default_cache, prompt):
    last = prompt.lower().split()[-1]
    for seed in range(15):
        result = _answer(default_cache, prompt, 10, seed=seed)
        assert result.text.split()[0].lower().rstrip(".!?") != last


def test_echo_replacement_must_have_successors():
    cache = ChainCache(lambda: ["Go home", "Run fast."])
    for seed in range(10):
        assert _answer(cache, "go", 1, seed=seed).text == "run"


def test_echo_accepted_when_no_alternative():
    cache = ChainCache(lambda: ["echo echo"])
    result = _answer(cache, "echo", 3)
    assert tokenize(result.text)[0] == "echo"


def test_output_formatting(default_cache):
    for seed in range(10):
        result = _answer(default_cache, "Test formatting", 15, strict=True, seed=seed)
        assert "  " not in result.text
        assert result.text == result.text.strip()
        assert " ." not in result.text and " ?" not in result.text and " !" not in result.text
        assert result.text[0] == result.text[0].lower()

    shouted = _answer(default_cache, "Test formatting", 15, capitalize=True)
    assert shouted.text[0] == shouted.text[0].upper()


def test_format_tokens_attaches_punctuation():
    assert format_tokens(["the", "cat", ".", "a", "dog", "!"]) == "the cat. a dog!"
    assert format_tokens(["the", "cat", ".", "?"], capitalize=True) == "The cat.?"
    assert format_tokens([]) == ""


def test_generation_varies_between_calls(default_cache):
    chain = default_cache.get()
    texts = {MarkovGenerator(chain, random.Random(seed)).generate("the", 12, True).text for seed in range(10)}
    assert len(texts) > 1


def test_cache_builds_once_under_concurrency():
    calls = []

    def slow_loader():
        calls.append(1)
        time.sleep(0.05)
        return ["The cat sat."]

    cache = ChainCache(slow_loader)
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(cache.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(chain is results[0] for chain in results)


def test_cache_reset_rebuilds_from_new_corpus():
    corpora = [["The cat sat."], ["A dog ran."]]
    cache = ChainCache(lambda: corpora[0])
    assert "cat" in cache.get().transitions
    corpora[0] = ["A dog ran."]
    assert "cat" in cache.get().transitions
    cache.reset()
    assert not cache.built
    assert "dog" in cache.get().transitions
