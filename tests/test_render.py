from __future__ import annotations

from monodiff import Granularity, ViewOptions, compare, render_text
from monodiff.render import collapsed_label


def test_render_unified_rows():
    rendered = render_text(compare("foo\nbar\n", "foo\nbaz\n"))

    assert rendered == (
        "   1   foo\n"
        "   2 − bar\n"
        "   3 + baz\n"
        "   4   \\n\n"
        "+1 −1\n"
    )


def test_render_collapsed_placeholder_and_expand_all():
    left = "a\nb\nc\nd\n"
    right = "a\nb\nc\nD\n"
    model = compare(left, right, ViewOptions(only_changes=True))

    collapsed = render_text(model)
    expanded = render_text(model, expand_all=True)

    assert "··· 3 unchanged lines ···" in collapsed
    assert "   1   a\n" not in collapsed
    assert "   1   a\n" in expanded
    assert expanded == render_text(compare(left, right))


def test_render_split_rows_align_columns():
    model = compare("keep\nold\n", "keep\nnew\nmore\n", ViewOptions(view="split"))

    lines = render_text(model).splitlines()

    assert lines[0] == "   1   keep |    1   keep"
    assert lines[1].startswith("   2 − old")
    assert lines[1].endswith("   2 + new")


def test_render_inline_unified_markers():
    model = compare("value one", "value two", ViewOptions(granularity=Granularity.INLINE_WORD))

    assert render_text(model) == "value [-one-]{+two+}\n+1 −1\n"


def test_render_inline_split_sides():
    model = compare(
        "value one",
        "value two",
        ViewOptions(view="split", granularity=Granularity.INLINE_WORD),
    )

    assert render_text(model) == "--- base\nvalue [-one-]\n+++ target\nvalue {+two+}\n+1 −1\n"


def test_render_empty_model():
    assert render_text(compare("", "")) == "+0 −0\n"


def test_collapsed_label_pluralization():
    assert collapsed_label(1) == "··· 1 unchanged line ···"
    assert collapsed_label(2) == "··· 2 unchanged lines ···"
    assert collapsed_label(0) == ""
