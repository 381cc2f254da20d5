import pytest

from uaparse.pattern import Match, Pattern
from uaparse.replace_template import ReplaceTemplate


def match_and_expand(expression, input_string, replace_template):
    m = Pattern(expression).match(input_string)
    if m is not None:
        return ReplaceTemplate(replace_template).expand(m)
    return ""


@pytest.mark.parametrize(
    "expression, input_string, template, expected",
    [
        ("something", "other", "foo", ""),
        ("something", "something", "foo", "foo"),
        ("some(thing)", "something", "no$1", "nothing"),
        ("so([Mm])eth(ing)", "that's something!", "$1$2$3", "ming"),
        ("([^ ]+) (.+)", "a b", "$2-$1", "b-a"),
    ],
)
def test_expansions(expression, input_string, template, expected):
    assert match_and_expand(expression, input_string, template) == expected


def test_default_template_is_empty():
    template = ReplaceTemplate()
    assert template.empty is True
    assert template.expand(Match(("x", "y"))) == ""


def test_empty_text_is_not_empty_template():
    template = ReplaceTemplate("")
    assert template.empty is False
    assert template.expand(Match(("x",))) == ""


def test_group_zero_placeholder():
    m = Pattern("b+").match("abbbc")
    assert ReplaceTemplate("[$0]").expand(m) == "[" + m.get(0) + "]"


def test_dollar_without_digit_is_literal():
    m = Pattern("(x)").match("x")
    assert ReplaceTemplate("$$1$").expand(m) == "$x$"


def test_missing_group_expands_to_nothing():
    m = Pattern("(a)").match("a")
    assert ReplaceTemplate("<$9>").expand(m) == "<>"