from uaparse.snippet_index import SnippetIndex
from uaparse.snippet_mapping import SnippetMapping


def test_expression_without_snippets_always_found():
    mapping = SnippetMapping()
    mapping.add_mapping((), "always")
    assert mapping.get_expressions(()) == {"always"}
    assert mapping.get_expressions((1, 2, 3)) == {"always"}


def test_all_snippets_required():
    mapping = SnippetMapping()
    mapping.add_mapping((1, 2), "both")
    assert mapping.get_expressions((1, 2)) == {"both"}
    assert mapping.get_expressions((1,)) == set()
    assert mapping.get_expressions((2,)) == set()


def test_extra_snippets_do_not_hurt():
    mapping = SnippetMapping()
    mapping.add_mapping((2, 5), "expr")
    assert mapping.get_expressions((1, 2, 3, 4, 5, 6)) == {"expr"}


def test_order_of_snippets_does_not_matter():
    mapping = SnippetMapping()
    mapping.add_mapping([3, 1], "expr")
    assert mapping.get_expressions({1, 3}) == {"expr"}
    assert mapping.get_expressions([3, 1]) == {"expr"}


def test_multiple_expressions():
    mapping = SnippetMapping()
    mapping.add_mapping((1,), "a")
    mapping.add_mapping((1, 2), "b")
    mapping.add_mapping((2, 3), "c")
    mapping.add_mapping((1,), "d")
    assert mapping.get_expressions((1,)) == {"a", "d"}
    assert mapping.get_expressions((1, 2)) == {"a", "b", "d"}
    assert mapping.get_expressions((1, 2, 3)) == {"a", "b", "c", "d"}
    assert mapping.get_expressions((3,)) == set()


def test_result_is_monotonic_in_snippets():
    mapping = SnippetMapping()
    for snippets, name in [((1,), "a"), ((2, 4), "b"), ((1, 3, 4), "c")]:
        mapping.add_mapping(snippets, name)
    smaller = mapping.get_expressions((1, 4))
    larger = mapping.get_expressions((1, 2, 3, 4))
    assert smaller <= larger


def test_with_snippet_index():
    index = SnippetIndex()
    mapping = SnippetMapping()
    expressions = ["Firefox/(\\d+)", "Chrome/(\\d+)", "(Mobile|Tablet) Safari"]
    for expression in expressions:
        mapping.add_mapping(index.register_snippets(expression), expression)

    found = mapping.get_expressions(
        index.get_snippets("Mozilla/5.0 Chrome/79.0 Safari/537.36")
    )
    assert "Chrome/(\\d+)" in found
    assert "Firefox/(\\d+)" not in found
    assert "(Mobile|Tablet) Safari" in found