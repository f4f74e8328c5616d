# tests/analysis/test_components.py

from partialize.analysis.components import (
    ComponentAnalyzer,
    ElementPattern,
    analyze_components,
    describe,
    suggest_name,
)


def test_suggest_name():
    assert suggest_name("div", "div.card") == "DivCard"
    assert suggest_name("a", "a.btn.button") == "AButton"
    assert suggest_name("li", "li.nav-item") == "LiItem"
    assert suggest_name("section", "section") == "SectionComponent"


def test_describe():
    pattern = ElementPattern(tag_name="div", count=3)
    pattern.attributes.update(["class"])
    assert describe(pattern) == "A reusable div component (appears 3 times) with configurable attributes"


def test_repeated_patterns_are_suggested():
    html = (
        "<html><body><ul>"
        '<li class="item" data-id="1">One</li>'
        '<li class="item active" data-id="2">Two</li>'
        '<li class="item">Three</li>'
        "</ul></body></html>"
    )
    suggestions = analyze_components(html)

    assert [s.pattern_key for s in suggestions] == ["li.item"]
    item = suggestions[0]
    assert item.count == 3
    assert item.name == "LiComponent"
    assert item.attributes == ["class", "data-id"]
    assert item.children == []


def test_structured_singletons_are_suggested():
    html = '<html><body><div class="card"><h3>T</h3><p>Body</p></div></body></html>'
    suggestions = analyze_components(html)
    assert [(s.name, s.count, s.children) for s in suggestions] == [("DivCard", 1, ["h3", "p"])]


def test_collect_patterns_skips_non_content(make_soup):
    soup = make_soup("<html><head><script>x</script></head><body><p>a</p><p>b</p></body></html>")
    patterns = ComponentAnalyzer().collect_patterns(soup)
    assert set(patterns) == {"p"}
    assert patterns["p"].count == 2
