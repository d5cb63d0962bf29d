"""Tests for remote page fetch and JSON-LD extraction."""

import httpx
import pytest
import respx
from httpx import Response

from preppy.services.fetch.page_client import PageClient, PageFetchError, is_url

PAGE = """
<html><head>
<script type="application/ld+json">{"@type": "Organization", "name": "Site"}</script>
<script type="application/ld+json">
  {"@type": "Recipe", "name": "Granola", "recipeIngredient": ["300 g oats"]}
</script>
<script>var notStructured = 1;</script>
</head><body><h1>Granola</h1></body></html>
"""


def test_is_url():
    assert is_url("https://example.com/recipe")
    assert is_url("http://example.com")
    assert not is_url("example.com/recipe")
    assert not is_url("ftp://example.com/file")
    assert not is_url("https://example.com/a b")
    assert not is_url("Bread\n\n# Ingredients\n- Flour")


@respx.mock
def test_fetch_text():
    respx.get("https://example.com/granola").mock(return_value=Response(200, text=PAGE))
    assert "Granola" in PageClient().fetch_text("https://example.com/granola")


@respx.mock
def test_fetch_text_http_error():
    respx.get("https://example.com/missing").mock(return_value=Response(404))
    with pytest.raises(PageFetchError):
        PageClient().fetch_text("https://example.com/missing")


@respx.mock
def test_fetch_text_connection_error():
    respx.get("https://example.com/down").mock(side_effect=httpx.ConnectError("refused"))
    with pytest.raises(PageFetchError):
        PageClient().fetch_text("https://example.com/down")


def test_json_ld_blocks_only_returns_structured_data():
    blocks = PageClient().json_ld_blocks(PAGE)
    assert len(blocks) == 2
    assert '"Organization"' in blocks[0]
    assert '"Granola"' in blocks[1]
