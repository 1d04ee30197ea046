from concurrent.futures import ThreadPoolExecutor

import pytest
import regex

from schemagate import RegexCache, convert_regex, translate


@pytest.mark.parametrize(
    "pattern, text, is_matching",
    [
        (r"^[\w\-\.\+]+$", "CC-BY-4.0", True),
        (r"^[\w\-\.\+]+$", "CC-BY-!", False),
        (r"^\W+$", "1_0", False),
        (r"\\w", r"\w", True),
        (r"^\d+$", "\u0663", False),
        (r"^\s$", "\u2003", True),
        (r"^\s$", "\x0b", True),
        (r"^\S+$", "a\xa0b", False),
        ("^abc$", "abc", True),
        ("^abc$", "abc\n", False),
        ("^[$]+$", "$$", True),
        (r"^a\$", "a$", True),
    ],
)
def test_regex_matches(pattern, text, is_matching):
    assert (convert_regex(pattern).search(text) is not None) is is_matching


@pytest.mark.parametrize("pattern", ["\\", "\\d\\"])
def test_invalid_escape_sequences(pattern):
    with pytest.raises(regex.error):
        convert_regex(pattern)


def test_control_groups_become_control_characters():
    assert translate(r"\cA") == "\x01"
    assert translate(r"\cz") == "\x1a"
    assert translate(r"x\cJy") == "x\ny"


def test_other_escapes_pass_through():
    assert translate(r"\.\+\/") == r"\.\+\/"
    assert translate(r"\d-\D") == "[0-9]-[^0-9]"
    assert translate("^a$") == r"^a\Z"
    assert translate("[$]") == "[$]"
    assert translate(r"\$") == r"\$"
    # Already translated brackets are left alone
    assert translate(translate(r"\w")) == translate(r"\w")


def test_translation_is_deterministic():
    pattern = r"^\w+@\w+\.\S{2,}$"
    first, second = convert_regex(pattern), convert_regex(pattern)
    for text in ["user@example.com", "bad@", "x@y.zz", ""]:
        assert (first.search(text) is None) == (second.search(text) is None)


def _fill(cache: RegexCache, keys):
    for key in keys:
        cache.insert(key, regex.compile(regex.escape(key)))


def test_cache_evicts_least_recently_used():
    cache = RegexCache(capacity=10)
    _fill(cache, [f"p{i}" for i in range(1, 12)])

    assert len(cache) == 10
    assert cache.get("p1") is None
    for i in range(2, 12):
        assert cache.get(f"p{i}") is not None


def test_cache_hit_promotes_entry():
    cache = RegexCache(capacity=10)
    _fill(cache, [f"p{i}" for i in range(1, 11)])

    # Touching p1 makes p2 the oldest entry
    assert cache.get("p1") is not None
    _fill(cache, ["p11"])

    assert "p1" in cache
    assert "p2" not in cache
    assert cache.keys()[-2:] == ["p1", "p11"]


def test_cache_keeps_first_inserted_value():
    cache = RegexCache(capacity=2)
    first = regex.compile("a")
    assert cache.insert("a", first) is first
    assert cache.insert("a", regex.compile("a")) is first


def test_get_or_compile_compiles_once():
    cache = RegexCache(capacity=3)
    calls = []

    def compile_fn(pattern):
        calls.append(pattern)
        return convert_regex(pattern)

    first = cache.get_or_compile("^f", compile_fn)
    second = cache.get_or_compile("^f", compile_fn)

    assert first is second
    assert calls == ["^f"]


def test_failed_compilation_is_not_cached():
    cache = RegexCache(capacity=3)
    with pytest.raises(regex.error):
        cache.get_or_compile("\\", convert_regex)
    assert "\\" not in cache
    assert len(cache) == 0


def test_cache_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        RegexCache(capacity=0)


def test_cache_is_safe_under_concurrent_use():
    cache = RegexCache(capacity=5)
    patterns = [f"^p{i % 8}$" for i in range(400)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        compiled = list(pool.map(lambda p: cache.get_or_compile(p, convert_regex), patterns))

    assert len(cache) == 5
    for pattern, matcher in zip(patterns, compiled):
        assert matcher.search(pattern[1:-1]) is not None
