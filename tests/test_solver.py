import pytest

from wordlehelper.solver import (
    InsufficientInformationError,
    Query,
    expand_pattern,
    load_word_list,
    search,
)

WORDS = {"three", "there", "these", "those", "where", "crane", "slate", "thorn"}


def test_expand_full_pattern_yields_itself():
    assert list(expand_pattern("crane")) == ["crane"]


def test_expand_one_wildcard_covers_alphabet_in_order():
    out = list(expand_pattern("cran."))
    assert len(out) == 26
    assert out[0] == "crana"
    assert out[-1] == "cranz"
    assert out == sorted(out)


def test_expand_respects_excluded_letters():
    out = list(expand_pattern("cra.e", "xyz"))
    assert len(out) == 23
    assert all(word[3] not in "xyz" for word in out)


def test_expand_keeps_known_letter_even_if_excluded():
    assert list(expand_pattern("crane", "c")) == ["crane"]


def test_expand_excluded_is_case_sensitive():
    assert len(list(expand_pattern("cran.", "ABC"))) == 26


def test_expand_rejects_wrong_length():
    with pytest.raises(ValueError):
        list(expand_pattern("abc"))


def test_query_rejects_wrong_lengths():
    with pytest.raises(ValueError):
        Query(pattern="ab")
    with pytest.raises(ValueError):
        Query(pattern="t....", not_at=("a", "b"))


def test_validate_empty_query_raises():
    with pytest.raises(InsufficientInformationError):
        Query().validate()


def test_validate_four_excluded_is_not_enough():
    with pytest.raises(InsufficientInformationError):
        Query(excluded="abcd").validate()


@pytest.mark.parametrize(
    "query",
    [Query(pattern="t...."), Query(excluded="abcde"), Query(includes="q")],
)
def test_validate_sufficient_queries(query):
    assert query.validate() is None


def test_accepts_includes_and_position_bans():
    query = Query(pattern="t....", includes="eh", not_at=("", "", "r", "", ""))
    assert query.accepts("these")
    assert not query.accepts("three")
    assert not query.accepts("thorn")


def test_search_with_excluded_and_includes():
    result = search(WORDS, Query(pattern="th..e", excluded="s", includes="r"))
    assert result == ["there", "three"]


def test_search_with_not_at():
    result = search(WORDS, Query(pattern="....e", not_at=("t", "", "", "", "")))
    assert result == ["crane", "slate", "where"]


def test_search_ignores_words_of_other_shapes():
    words = WORDS | {"Three", "th", "threes", ""}
    assert search(words, Query(pattern="th...")) == sorted(
        w for w in WORDS if w.startswith("th")
    )


def test_search_matches_expansion():
    words = WORDS | {"thxne", "tqqqe"}
    query = Query(pattern="t...e", excluded="o", includes="h")
    expected = [w for w in expand_pattern(query.pattern, query.excluded)
                if w in words and query.accepts(w)]
    assert search(words, query) == expected


def test_search_raises_on_insufficient_query():
    with pytest.raises(InsufficientInformationError):
        search(WORDS, Query())


def test_load_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("three\nthere\nthree\n", encoding="utf-8")
    assert load_word_list(path) == frozenset({"three", "there"})


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_word_list(tmp_path / "missing.txt")