"""Splash screen shown while the client starts."""

from __future__ import annotations

LOGO_NAME = """
  ███╗   ██╗  ███████╗  ██╗  ██╗  ██╗   ██╗  ███████╗
  ████╗  ██║  ██╔════╝  ╚██╗██╔╝  ██║   ██║  ██╔════╝
  ██╔██╗ ██║  █████╗     ╚███╔╝   ██║   ██║  ███████╗
  ██║╚██╗██║  ██╔══╝     ██╔██╗   ██║   ██║  ╚════██║
  ██║ ╚████║  ███████╗  ██╔╝ ██╗  ╚██████╔╝  ███████║
  ╚═╝  ╚═══╝  ╚══════╝  ╚═╝  ╚═╝   ╚═════╝   ╚══════╝
"""


def logo_lines() -> list[str]:
    """The logo as a list of lines, without surrounding blank lines."""
    return LOGO_NAME.strip("\n").splitlines()


def _center(line: str, width: int) -> str:
    if len(line) >= width:
        return line[:width]
    left = (width - len(line)) // 2
    return " " * left + line + " " * (width - len(line) - left)


def render_splash(version: str, width: int, height: int) -> list[str]:
    """Render the splash screen as `height` rows of exactly `width` characters."""
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    lines = logo_lines() + [" ", f"Version {version}"]
    logo_height = len(lines) + 2
    top = max(height - logo_height, 0) // 2

    rows = [" " * width for _ in range(height)]
    for offset, line in enumerate(lines):
        row = top + offset
        if row >= height:
            break
        rows[row] = _center(line, width)
    return rows