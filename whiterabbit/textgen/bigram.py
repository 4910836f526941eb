from __future__ import annotations

import random
from typing import Iterable, Sequence

from whiterabbit.textgen import bigram_data
from whiterabbit.textgen.result import GenerationResult
from whiterabbit.textgen.sampling import randint_between, weighted_choice

SENTENCE_ENDINGS = (".", "!", "?")
DEFAULT_SENTENCE_BOUNDS = (4, 8)
DEFAULT_WORD_BOUNDS = (5, 15)
LINE_WIDTH = 80


def build_bigram_table(frequencies: Iterable[tuple[str, float]]) -> dict[str, tuple[tuple[str, float], ...]]:
    """Group bigrams by their first letter and normalise frequencies per letter."""
    grouped: dict[str, list[tuple[str, float]]] = {}
    for bigram, freq in frequencies:
        if len(bigram) != 2 or freq <= 0:
            continue
        grouped.setdefault(bigram[0], []).append((bigram, float(freq)))

    table = {}
    for letter, entries in grouped.items():
        total = sum(freq for _, freq in entries)
        table[letter] = tuple((bigram, freq / total) for bigram, freq in entries)
    return table


class BigramWordSynthesizer:
    def __init__(
        self,
        frequencies: Iterable[tuple[str, float]] = bigram_data.BIGRAM_FREQUENCIES,
        start_freq: Sequence[float] = bigram_data.WORD_START_FREQ,
        length_distribution: Sequence[float] = bigram_data.WORD_LEN_DISTRIBUTION,
        rng: random.Random | None = None,
    ):
        self.table = build_bigram_table(frequencies)
        self.start_pairs = tuple(zip(bigram_data.LETTERS, start_freq))
        self.length_pairs = tuple(zip(bigram_data.WORD_LENGTHS, length_distribution))
        self.rng = rng or random.Random()

    def generate_word(self, rng: random.Random | None = None) -> str:
        rng = rng or self.rng
        word = weighted_choice(self.start_pairs, rng) or "a"
        target = weighted_choice(self.length_pairs, rng) or 1
        while len(word) < target:
            choices = self.table.get(word[-1])
            if not choices:
                word += rng.choice(bigram_data.LETTERS)
                continue
            word += (weighted_choice(choices, rng) or choices[0][0])[-1]
        return word

    def generate_paragraph(
        self,
        max_len: int | None = None,
        sentence_bounds: tuple[int, int] = DEFAULT_SENTENCE_BOUNDS,
        word_bounds: tuple[int, int] = DEFAULT_WORD_BOUNDS,
        rng: random.Random | None = None,
    ) -> GenerationResult:
        rng = rng or self.rng
        budget = max_len if max_len and max_len > 0 else None
        out = ""
        line_start = 0

        for _ in range(randint_between(sentence_bounds, rng)):
            n_words = randint_between(word_bounds, rng)
            for i in range(n_words):
                word = self.generate_word(rng)
                if budget is not None and len(out) + len(word) > budget:
                    return GenerationResult(out.rstrip(), True)
                if i == 0:
                    word = word[0].upper() + word[1:]
                out += word
                if i < n_words - 1:
                    if len(out) - line_start < LINE_WIDTH:
                        out += " "
                    else:
                        out += "\n"
                        line_start = len(out)
            if budget is not None and len(out) + 1 > budget:
                return GenerationResult(out.rstrip(), True)
            out += rng.choice(SENTENCE_ENDINGS) + " "

        return GenerationResult(out.rstrip(), False)


def generate_paragraph(
    max_len: int | None = None,
    sentence_bounds: tuple[int, int] = DEFAULT_SENTENCE_BOUNDS,
    word_bounds: tuple[int, int] = DEFAULT_WORD_BOUNDS,
    rng: random.Random | None = None,
) -> GenerationResult:
    return BigramWordSynthesizer(rng=rng).generate_paragraph(max_len, sentence_bounds, word_bounds)
