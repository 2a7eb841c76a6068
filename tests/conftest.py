# File: tests/conftest.py
from typing import Callable

import pytest

from preload_hints.config import OptimizeConfig


@pytest.fixture()
def make_config() -> Callable[..., OptimizeConfig]:
    """
    Return a factory for OptimizeConfig with board_url preset to example.com.
    """

    def _factory(**overrides) -> OptimizeConfig:
        data = {"board_url": "https://example.com"}
        data.update(overrides)
        return OptimizeConfig(**data)

    return _factory


@pytest.fixture()
def page_html() -> Callable[[str], str]:
    """
    Wrap a body fragment in a minimal document with <title> and </head> anchors.
    """

    def _wrap(body: str, head: str = "") -> str:
        return f"<html><head><title>T</title>{head}</head><body>{body}</body></html>"

    return _wrap


@pytest.fixture()
def forum_page(page_html) -> str:
    """
    A page mixing every source kind the pipeline looks at.
    """
    return page_html(
        '<div class="p-body-pageContent">'
        '<img src="/data/hero.jpg">'
        '<img src="https://cdn.other.net/img/photo.png">'
        '<img src="/data/avatars/m/1.jpg">'
        "</div>"
        '<div style="background-image: url(\'/styles/banner.webp\')"></div>'
        '<section data-preload><img src="/data/marked.png"><p>text</p></section>'
        '<script src="https://static.cdnhost.io/app.js"></script>'
        '<iframe src="https://www.youtube.com/embed/x"></iframe>',
        head='<link rel="stylesheet" href="https://fonts.googleapis.com/css">',
    )
