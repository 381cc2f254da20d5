from uaparse.pattern import MAX_MATCHES, Match, Pattern


def test_group_zero_is_whole_match():
    m = Pattern("some(thing)").match("that's something!")
    assert m is not None
    assert m.get(0) == "something"
    assert m.get(1) == "thing"
    assert len(m) == 2


def test_no_match_returns_none():
    assert Pattern("something").match("other") is None


def test_partial_match_anywhere():
    m = Pattern("b+").match("abbbc")
    assert m is not None
    assert m.get(0) == "bbb"


def test_case_sensitive_by_default():
    assert Pattern("abc").match("xABCx") is None


def test_case_insensitive():
    m = Pattern("abc", case_sensitive=False).match("xABCx")
    assert m is not None
    assert m.get(0) == "ABC"


def test_unmatched_group_is_empty():
    m = Pattern("a(x)?b").match("ab")
    assert m is not None
    assert m.get(1) == ""
    assert len(m) == 2


def test_index_beyond_groups_is_empty():
    m = Pattern("(a)").match("a")
    assert m is not None
    assert m.get(len(m)) == ""
    assert m.get(-1) == ""


def test_group_count_is_capped():
    expression = "".join(f"({c})" for c in "abcdefghijkl")
    m = Pattern(expression).match("abcdefghijkl")
    assert m is not None
    assert len(m) == MAX_MATCHES
    assert m.get(MAX_MATCHES - 1) == "i"
    assert m.get(MAX_MATCHES) == ""


def test_empty_pattern_never_matches():
    assert Pattern().match("anything") is None


def test_invalid_expression_never_matches():
    assert Pattern("(unclosed").match("(unclosed") is None


def test_digit_class_is_ascii_only():
    assert Pattern(r"\d").match("\u0663") is None
    m = Pattern(r"(\d+)\.(\d+)").match("v12.34")
    assert m is not None
    assert (m.get(1), m.get(2)) == ("12", "34")


def test_empty_match_object():
    m = Match()
    assert len(m) == 0
    assert m.get(0) == ""