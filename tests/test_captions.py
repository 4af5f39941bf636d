"""Tests for caption suggestions."""

from fluxmod.captions.suggester import generate_captions
from fluxmod.captions.templates import DEFAULT_CATALOG, CaptionTemplate

LAUNCH_CAPTION = "Just launched something new. Here's to the next chapter! 🚀"


def test_default_catalog_has_six_templates():
    assert len(DEFAULT_CATALOG) == 6
    assert DEFAULT_CATALOG[0].text == "Feeling inspired by today's flow! 🌊"


def test_no_context_returns_first_three():
    expected = [t.text for t in DEFAULT_CATALOG[:3]]
    assert generate_captions() == expected
    assert generate_captions("") == expected
    assert generate_captions("   ") == expected
    assert generate_captions() == generate_captions()


def test_matching_template_comes_first_then_padding():
    captions = generate_captions("just launched my new project")
    assert captions == [LAUNCH_CAPTION, DEFAULT_CATALOG[0].text, DEFAULT_CATALOG[1].text]


def test_many_matches_capped_at_five():
    context = "Grateful to my team for the inspiring idea; we launched it today before the weekend trip"
    captions = generate_captions(context)
    assert len(captions) == 5
    assert captions == [t.text for t in DEFAULT_CATALOG[:5]]


def test_three_or_four_matches_returned_without_padding():
    captions = generate_captions("an idea for the weekend launch")
    assert captions == [DEFAULT_CATALOG[1].text, DEFAULT_CATALOG[3].text, DEFAULT_CATALOG[5].text]


def test_count_is_clamped():
    assert len(generate_captions(count=1)) == 3
    assert len(generate_captions(count=4)) == 4
    assert len(generate_captions(count=99)) == 5
    captions = generate_captions("launch day", count=5)
    assert captions == [
        LAUNCH_CAPTION,
        DEFAULT_CATALOG[0].text,
        DEFAULT_CATALOG[1].text,
        DEFAULT_CATALOG[2].text,
        DEFAULT_CATALOG[4].text,
    ]


def test_bounds_and_uniqueness():
    for context in [None, "", "launch", "nothing relevant", "idea team trip launch today flow"]:
        captions = generate_captions(context)
        assert 3 <= len(captions) <= 5
        assert len(set(captions)) == len(captions)


def test_small_catalog_returns_everything():
    catalog = [CaptionTemplate(text="Only one", triggers=frozenset({"one"}))]
    assert generate_captions(catalog=catalog) == ["Only one"]
    assert generate_captions("one", catalog=catalog) == ["Only one"]


def test_duplicate_template_texts_collapse():
    catalog = [
        CaptionTemplate(text="A", triggers=frozenset({"x"})),
        CaptionTemplate(text="A", triggers=frozenset({"x"})),
        CaptionTemplate(text="B"),
        CaptionTemplate(text="C"),
    ]
    assert generate_captions("x", catalog=catalog) == ["A", "B", "C"]


def test_explicit_none_catalog_uses_default():
    assert generate_captions(catalog=None) == [t.text for t in DEFAULT_CATALOG[:3]]
    assert generate_captions("launch", catalog=None)[0] == LAUNCH_CAPTION
    assert generate_captions("launch", count=4, catalog=None) == generate_captions("launch", count=4)
