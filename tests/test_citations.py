from factcheck.core.schemas import Source
from factcheck.services.verdict.citations import remap_citations
from factcheck.services.verdict.response_parser import RawSource


def test_remap_assigns_sequential_indices_in_order_of_appearance():
    raw = [
        RawSource(index=7, name="X", url="https://x"),
        RawSource(index=3, name="Y", url="https://y"),
    ]

    explanation, sources = remap_citations("Y says [3] while X says [7].", raw)

    assert sources == [
        Source(index=1, name="X", url="https://x"),
        Source(index=2, name="Y", url="https://y"),
    ]
    assert explanation == "Y says [2] while X says [1]."


def test_remap_skips_missing_and_repeated_indices():
    raw = [
        RawSource(index=None, name="No index", url="https://none"),
        RawSource(index=2, name="First two", url="https://two"),
        RawSource(index=2, name="Second two", url="https://two-again"),
        RawSource(index=5, name="Five", url="https://five"),
    ]

    explanation, sources = remap_citations("[2] and [5] and [2]", raw)

    assert [(s.index, s.name) for s in sources] == [(1, "First two"), (2, "Five")]
    assert explanation == "[1] and [2] and [1]"


def test_remap_leaves_dangling_citations_unchanged():
    raw = [RawSource(index=1, name="A", url="https://a")]

    explanation, sources = remap_citations("See [1] and also [5].", raw)

    assert explanation == "See [1] and also [5]."
    assert [s.index for s in sources] == [1]


def test_remap_does_not_chain_substitutions():
    raw = [
        RawSource(index=2, name="Two", url="https://two"),
        RawSource(index=1, name="One", url="https://one"),
    ]

    explanation, _ = remap_citations("[1] then [2]", raw)

    assert explanation == "[2] then [1]"


def test_remap_without_sources_is_a_no_op():
    assert remap_citations("Nothing cited [4].", []) == ("Nothing cited [4].", [])
