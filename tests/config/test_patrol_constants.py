from guard_patrol.config.constants import (
    DEFAULT_WORKERS,
    GUARD_MARKERS,
    HORIZONTAL_MARK,
    INPUT_FILENAME,
    TURN_MARK,
    VERTICAL_MARK,
    WALL_CHAR,
)
from guard_patrol.domain.floor_map import Direction


def test_input_filename_is_plain_text() -> None:
    assert INPUT_FILENAME.endswith(".txt")


def test_guard_markers_match_directions() -> None:
    assert set(GUARD_MARKERS) == {d.value for d in Direction}


def test_wall_char_is_not_a_guard_marker() -> None:
    assert WALL_CHAR not in GUARD_MARKERS


def test_markup_glyphs_are_distinct_single_chars() -> None:
    glyphs = (VERTICAL_MARK, HORIZONTAL_MARK, TURN_MARK)
    assert all(len(g) == 1 for g in glyphs)
    assert len(set(glyphs)) == 3
    assert not set(glyphs) & (set(GUARD_MARKERS) | {WALL_CHAR})


def test_default_workers_is_sequential() -> None:
    assert DEFAULT_WORKERS == 1
