import pytest

from warinc_pages.context import PageContext, resolve_page_context


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/characters/flame_sovereign.html", PageContext("characters", "flame_sovereign")),
        ("/war-inc/characters/frost_queen.html", PageContext("characters", "frost_queen")),
        ("/units/index.html", PageContext("units", "units")),
        ("/site/buildings/index.html", PageContext("buildings", "buildings")),
        ("/modes/index.html", PageContext("modes", "modes")),
        ("/guides/beginner.html", PageContext("guides", "beginner")),
        ("/guides/index.html", PageContext("guides", "guides")),
        ("/units/tank1.html", PageContext("units", None)),
        ("/about/team.html", PageContext("about", None)),
    ],
)
def test_resolves_type_and_id(path, expected):
    assert resolve_page_context(path) == expected


@pytest.mark.parametrize("path", ["/", "", "/index.html", "index.html"])
def test_shallow_paths_have_no_type(path):
    assert resolve_page_context(path) == PageContext(None, None)


def test_character_file_without_extension_has_empty_id():
    assert resolve_page_context("/characters/flame_sovereign").id == ""


def test_only_last_extension_is_stripped():
    assert resolve_page_context("/guides/patch.1.2.html").id == "patch.1.2"


def test_full_url_uses_path_only():
    ctx = resolve_page_context("https://example.com/characters/flame_sovereign.html?lang=zh")
    assert ctx == PageContext("characters", "flame_sovereign")


def test_empty_segments_are_ignored():
    assert resolve_page_context("//characters//flame_sovereign.html") == PageContext(
        "characters", "flame_sovereign"
    )


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/guides/a.html#top", PageContext("guides", "a")),
        ("/units/index.html?x=1", PageContext("units", "units")),
        ("/characters/flame_sovereign.html?lang=zh#skills", PageContext("characters", "flame_sovereign")),
        ("/units/tank1.html?ref=index.html", PageContext("units", None)),
    ],
)
def test_query_and_fragment_are_not_part_of_the_path(path, expected):
    assert resolve_page_context(path) == expected
