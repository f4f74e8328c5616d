# tests/extraction/test_patterns.py

from partialize.extraction.patterns import (
    PatternCounter,
    is_state_class,
    normalize_class_list,
    pattern_key,
)


def test_state_classes_are_recognised():
    for name in ["active", "current", "open", "closed", "selected", "is-open", "has-icon", "js-toggle", "w--current"]:
        assert is_state_class(name)
    assert not is_state_class("card")


def test_normalize_class_list_drops_state_and_duplicates():
    classes = ["Card", "active", "is-open", "js-toggle", "card", "shadow", ""]
    assert normalize_class_list(classes) == ["card", "shadow"]


def test_pattern_key(make_soup):
    soup = make_soup('<div class="shadow card active"></div><li></li><div class="is-open"></div>')
    first, li, bare = soup.find_all(True)
    assert pattern_key(first) == "div.card.shadow"
    assert pattern_key(li) == "li"
    assert pattern_key(bare) == "div"


def test_pattern_key_ignores_text(make_soup):
    soup = make_soup("<p>text</p>")
    assert pattern_key(soup.p.string) == ""


def test_pattern_counter_counts_descendants_only(make_soup):
    soup = make_soup(
        '<ul class="list"><li class="item">a</li><li class="item active">b</li>'
        '<li class="item"><span>c</span></li></ul>'
    )
    counts = PatternCounter(max_depth=6).count(soup.ul)
    assert counts["li.item"] == 3
    assert counts["span"] == 1
    assert "ul.list" not in counts


def test_pattern_counter_respects_depth(make_soup):
    soup = make_soup("<div><div><div><span></span></div></div></div>")
    counts = PatternCounter(max_depth=1).count(soup.div)
    assert counts == {"div": 1}
