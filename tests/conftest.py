# tests/conftest.py

import pytest
from bs4 import BeautifulSoup

from config.config import ExtractionConfig


@pytest.fixture
def settings():
    return ExtractionConfig()


@pytest.fixture
def make_soup():
    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")
    return _make


@pytest.fixture
def hero_pricing_html():
    return (
        "<html><head><title>Landing</title></head><body>"
        '<section class="hero"><h1>Welcome</h1><p>Build faster sites today.</p></section>'
        '<section class="pricing"><h2>Plans</h2><p>Simple pricing for everyone.</p></section>'
        "</body></html>"
    )


@pytest.fixture
def identical_cards_html():
    card = '<div class="card"><h3>Starter</h3><p>Everything you need to begin.</p></div>'
    return f"<html><body>{card * 3}</body></html>"


@pytest.fixture
def lone_button_html():
    return '<html><body><button onclick="go()">Go</button></body></html>'


@pytest.fixture
def plain_container_html():
    return '<html><body><div class="container"><p>Hello</p></div></body></html>'


@pytest.fixture
def landing_page_html():
    return (
        "<!DOCTYPE html>"
        "<html><head><title>Shop</title><style>body { margin: 0; }</style></head><body>"
        '<div id="app">'
        '<header class="site-header"><nav><a href="/">Home</a><a href="/about">About</a></nav></header>'
        '<section class="grid">'
        '<div class="card"><h3>Alpha</h3><p>First card body text</p><a class="btn" href="/buy">Buy</a></div>'
        '<div class="card"><h3>Beta</h3><p>Second card body text</p><a class="btn" href="/buy">Buy</a></div>'
        "</section>"
        "<footer><p>Copyright 2024</p></footer>"
        "</div>"
        "<script>console.log('ready');</script>"
        "</body></html>"
    )


@pytest.fixture
def wrapper_heavy_html():
    wrapper = (
        '<div class="wrapper"><h3>Entry</h3>'
        "<p>Each wrapper repeats the same long text.</p></div>"
    )
    return (
        "<html><body>"
        f'<section class="features">{wrapper * 5}</section>'
        '<section class="about"><p>About us</p></section>'
        "</body></html>"
    )
