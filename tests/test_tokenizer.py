from whiterabbit.textgen.tokenizer import is_punctuation, last_word, tokenize


def test_tokenize_words_and_terminal_punctuation():
    assert tokenize("Hello, World! It's well-known.") == ["hello", "world", "!", "it's", "well-known", "."]


def test_tokenize_empty_input():
    assert tokenize("") == []
    assert tokenize(None) == []
    assert tokenize("  ,;: ") == []


def test_tokenize_keeps_digits_and_unicode_letters():
    assert tokenize("Route 66?") == ["route", "66", "?"]
    assert tokenize("Café NAÏVE") == ["café", "naïve"]


def test_tokenize_treats_other_symbols_as_separators():
    assert tokenize("snake_case (x+y)") == ["snake", "case", "x", "y"]


def test_punctuation_helpers():
    assert is_punctuation("?")
    assert not is_punctuation(",")
    assert last_word(["the", "cat", "."]) == "cat"
    assert last_word(["!"]) is None
    assert last_word([]) is None
