from notefinder.text import short_text


def test_first_line_only():
    assert short_text("hello\nworld", 32) == "hello"


def test_exact_limit_unchanged():
    assert short_text("abcde", 5) == "abcde"


def test_empty_string():
    assert short_text("", 10) == ""


def test_unbroken_text_is_cut_at_limit():
    assert short_text("a" * 50, 10) == "a" * 10 + "..."


def test_words_collected_within_double_limit():
    assert short_text("one two three four five six", 5) == "one two six..."


def test_long_line_ends_with_ellipsis():
    text = "the quick brown fox jumps over the lazy dog again and again"
    result = short_text(text, 20)
    assert result.endswith("...")
    assert len(result) <= 20 * 2 + 3 + len(text.split(" "))


def test_short_first_line_of_multiline():
    assert short_text("title:\n" + "x" * 100, 32) == "title:"