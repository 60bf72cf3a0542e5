import pytest

from proverclient.splash import LOGO_NAME, logo_lines, render_splash


def test_logo_lines_strip_blank_edges():
    lines = logo_lines()
    assert len(lines) == 6
    assert all(line.strip() for line in lines)
    assert "\n".join(lines) == LOGO_NAME.strip("\n")


def test_render_dimensions():
    rows = render_splash("1.2.3", 80, 24)
    assert len(rows) == 24
    assert all(len(row) == 80 for row in rows)


def test_render_contains_logo_and_version_in_order():
    rows = render_splash("1.2.3", 80, 24)
    stripped = [row.strip() for row in rows]
    logo = [line.strip() for line in logo_lines()]
    start = stripped.index(logo[0])
    assert stripped[start : start + len(logo)] == logo
    assert stripped[start + len(logo)] == ""
    assert stripped[start + len(logo) + 1] == "Version 1.2.3"


def test_render_version_line_is_centered():
    width = 81
    rows = render_splash("0.9.5", width, 30)
    version_row = next(row for row in rows if "Version 0.9.5" in row)
    left = len(version_row) - len(version_row.lstrip(" "))
    right = len(version_row) - len(version_row.rstrip(" "))
    assert abs(left - right) <= 1


def test_render_vertically_centered():
    rows = render_splash("1.0.0", 80, 40)
    occupied = [i for i, row in enumerate(rows) if row.strip()]
    top_gap = occupied[0]
    bottom_gap = len(rows) - 1 - occupied[-1]
    # Two spare rows sit below the text inside the logo area.
    assert abs(top_gap - (bottom_gap - 2)) <= 1


def test_render_clips_to_small_area():
    rows = render_splash("1.0.0", 10, 3)
    assert len(rows) == 3
    assert all(len(row) == 10 for row in rows)
    assert rows[0] == logo_lines()[0][:10]


def test_render_negative_size_rejected():
    with pytest.raises(ValueError):
        render_splash("1.0.0", -1, 10)