import re

import pytest

from vlogsite.utils.slugs import slugify


def test_title_with_punctuation():
    assert slugify("Summer Camp Adventures!") == "summer-camp-adventures"


def test_whitespace_and_hyphen_runs_collapse():
    assert slugify("  Knot   Tying -- Workshop  ") == "knot-tying-workshop"
    assert slugify("a - b") == "a-b"


def test_accents_are_folded():
    assert slugify("Café Crème Brûlée") == "cafe-creme-brulee"


def test_underscores_and_symbols_are_dropped():
    assert slugify("hello_world & friends #2") == "helloworld-friends-2"


def test_no_leading_or_trailing_hyphens():
    assert slugify("-- Hiking the Green Trail! --") == "hiking-the-green-trail"
    assert slugify("¿Qué? ¡Sí!") == "que-si"


@pytest.mark.parametrize(
    "title",
    [
        "Summer Camp Adventures!",
        "  Community   Service Day ",
        "Hiking -- the -- Green Trail",
        "Émile's 5-mile hike_report",
        "!!!",
        "",
    ],
)
def test_idempotent_and_url_safe(title):
    slug = slugify(title)
    assert slugify(slug) == slug
    assert re.fullmatch(r"(?:[a-z0-9]+(?:-[a-z0-9]+)*)?", slug)
