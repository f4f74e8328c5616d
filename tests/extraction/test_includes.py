# tests/extraction/test_includes.py

import pytest

from partialize.exceptions import IncludeCycleError, MissingPartialError
from partialize.extraction.includes import IncludeGraph, find_includes, inline_includes
from partialize.extraction.placeholders import (
    PlaceholderResolver,
    include_directive,
    placeholder_markup,
)


def test_include_directive_syntax():
    assert include_directive("div-card") == "<%- include('partials/div-card') %>"
    assert placeholder_markup("div-card") == "<!--EJS_INCLUDE:div-card-->"


def test_resolver_applies_to_main_and_partials():
    resolver = PlaceholderResolver(["a-btn", "div-card"])
    main, partials = resolver.resolve_all(
        "<main><!--EJS_INCLUDE:div-card--><!--EJS_INCLUDE:div-card--></main>",
        {"div-card": "<div><!--EJS_INCLUDE:a-btn--></div>", "a-btn": "<a>x</a>"},
    )
    assert main == (
        "<main><%- include('partials/div-card') %><%- include('partials/div-card') %></main>"
    )
    assert partials["div-card"] == "<div><%- include('partials/a-btn') %></div>"
    assert partials["a-btn"] == "<a>x</a>"


def test_resolver_does_not_confuse_prefixed_names():
    resolver = PlaceholderResolver(["card", "card-2"])
    resolved = resolver.resolve("<!--EJS_INCLUDE:card-2--><!--EJS_INCLUDE:card-->")
    assert resolved == "<%- include('partials/card-2') %><%- include('partials/card') %>"


def test_find_includes():
    content = "<div><%- include('partials/a') %>text<%-  include('partials/b-2')  %></div>"
    assert find_includes(content) == ["a", "b-2"]


def test_inline_includes_nested():
    partials = {
        "section-grid": "<section><%- include('partials/div-card') %></section>",
        "div-card": "<div><%- include('partials/a-btn') %></div>",
        "a-btn": "<a>Buy</a>",
    }
    document = "<body><%- include('partials/section-grid') %></body>"
    assert inline_includes(document, partials) == "<body><section><div><a>Buy</a></div></section></body>"


def test_graph_validate_and_order():
    partials = {"outer": "<%- include('partials/inner') %>", "inner": "<p>x</p>"}
    graph = IncludeGraph(partials)
    assert graph.validate()
    order = graph.expansion_order()
    assert order.index("inner") < order.index("outer")


def test_cycle_is_rejected():
    partials = {"a": "<%- include('partials/b') %>", "b": "<%- include('partials/a') %>"}
    graph = IncludeGraph(partials)
    assert not graph.validate()
    with pytest.raises(IncludeCycleError):
        graph.expand()


def test_missing_partial_is_rejected():
    with pytest.raises(MissingPartialError) as exc_info:
        inline_includes("<%- include('partials/nope') %>", {})
    assert exc_info.value.name == "nope"

    with pytest.raises(MissingPartialError):
        IncludeGraph({"a": "<%- include('partials/ghost') %>"}).expand()
