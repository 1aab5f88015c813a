"""Tests for section labels derived from paths."""

from repohunt.section import leading_segments, section_from_path, trailing_segments


def test_forward_count():
    assert section_from_path("a/b/c/d", 2) == "a/b"
    assert section_from_path("a/b/c/d", 1) == "a"
    assert section_from_path("a/b/c/d", 3) == "a/b/c"


def test_backward_count():
    assert section_from_path("a/b/c/d", -1) == "a/b/c"
    assert section_from_path("a/b/c/d", -3) == "a"


def test_zero_disables():
    assert section_from_path("a/b/c/d", 0) is None


def test_not_enough_separators():
    assert section_from_path("a/b/c/d", 4) is None
    assert section_from_path("a/b/c/d", -4) is None
    assert section_from_path("solo", 1) is None
    assert section_from_path("solo", -1) is None


def test_empty_segment_is_no_section():
    assert section_from_path("/x", 1) is None


def test_helpers_are_symmetric():
    assert leading_segments("a/b/c", 1) == trailing_segments("a/b/c", 2) == "a"
    assert leading_segments("a/b/c", 2) == trailing_segments("a/b/c", 1) == "a/b"
