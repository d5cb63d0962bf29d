from dataclasses import dataclass
from typing import Callable, List, Protocol, Tuple

from preppy.logging import get_logger
from preppy.services.fetch.page_client import is_url
from preppy.services.parsing import cooklang, json_ld, markdown_list
from preppy.services.parsing.errors import RecipeParseError
from preppy.services.recipe import Recipe

logger = get_logger(__name__)

# JSON documents contain '@' and would satisfy the cooklang scanner, so JSON-LD goes first.
FORMATS: List[Tuple[str, Callable[[str], Recipe]]] = [
    ("markdown", markdown_list.parse),
    ("json_ld", json_ld.parse),
    ("cooklang", cooklang.parse),
]


@dataclass(frozen=True)
class ParsedDocument:
    format: str
    recipe: Recipe


class PageFetcher(Protocol):
    def fetch_text(self, url: str) -> str: ...

    def json_ld_blocks(self, html: str) -> List[str]: ...


def parse_recipe_text(text: str) -> ParsedDocument:
    """Try each format in order; the first whose grammar matches wins."""
    for name, parse in FORMATS:
        try:
            recipe = parse(text)
        except RecipeParseError as exc:
            logger.debug("parser.skip format=%s reason=%s", name, exc)
            continue
        logger.info("parser.matched format=%s ingredients=%s", name, len(recipe.ingredients))
        return ParsedDocument(format=name, recipe=recipe)
    logger.info("parser.no_match length=%s", len(text))
    raise RecipeParseError("not a recipe")


def parse_page(html: str, fetcher: PageFetcher) -> ParsedDocument:
    """Use the first JSON-LD block of a fetched page that holds a Recipe."""
    candidates = [html] if html.lstrip().startswith(("{", "[")) else []
    candidates.extend(fetcher.json_ld_blocks(html))
    for block in candidates:
        try:
            recipe = json_ld.parse(block)
        except RecipeParseError as exc:
            logger.debug("parser.page_block_skip reason=%s", exc)
            continue
        logger.info("parser.matched format=json_ld ingredients=%s source=page", len(recipe.ingredients))
        return ParsedDocument(format="json_ld", recipe=recipe)
    logger.info("parser.page_no_recipe blocks=%s", len(candidates))
    raise RecipeParseError("not a recipe")


def load_document(text: str, fetcher: PageFetcher) -> ParsedDocument:
    """Entry point for pasted or uploaded text; a pasted URL is fetched first."""
    candidate = text.strip()
    if is_url(candidate):
        logger.info("parser.fetch url=%s", candidate)
        return parse_page(fetcher.fetch_text(candidate), fetcher)
    return parse_recipe_text(text)
