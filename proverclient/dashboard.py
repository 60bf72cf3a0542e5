"""Text helpers used by the dashboard screen."""

from __future__ import annotations

_HTML_STATUS_MESSAGES = (
    ("502", "❌ HTTP 502 Bad Gateway"),
    ("503", "❌ HTTP 503 Service Unavailable"),
    ("504", "❌ HTTP 504 Gateway Timeout"),
    ("500", "❌ HTTP 500 Internal Server Error"),
    ("429", "⏳ HTTP 429 Rate Limited"),
)


def extract_version_from_message(message: str) -> str | None:
    """Pull the version out of a 'New version X available' message."""
    start = message.find("version ")
    if start < 0:
        return None
    after_version = message[start + len("version "):]
    end = after_version.find(" available")
    if end < 0:
        return None
    return after_version[:end]


def format_compact_timestamp(timestamp: str) -> str:
    """Turn 'YYYY-MM-DD HH:MM:SS' into 'MM-DD HH:MM:SS'; other text is returned as is."""
    date_part, sep, time_part = timestamp.partition(" ")
    if not sep or len(date_part) < 5:
        return timestamp
    return f"{date_part[5:]} {time_part}"


def truncate_message(msg: str, max_length: int) -> str:
    """Shorten a message to fit, preferring to cut at a word boundary."""
    if len(msg) <= max_length:
        return msg
    target = max(max_length - 3, 0)
    head = msg[:target]
    last_space = head.rfind(" ")
    if last_space >= 0:
        return f"{msg[:last_space]}..."
    return f"{head}..."


def clean_http_error_message(msg: str) -> str:
    """Reduce verbose HTTP error text to its essential status information."""
    if "<html>" in msg or "<!DOCTYPE" in msg:
        for code, text in _HTML_STATUS_MESSAGES:
            if code in msg:
                return text
        return "❌ HTTP Error (server returned HTML)"

    status_pos = msg.find("status ")
    if status_pos >= 0:
        rest = msg[status_pos:]
        status_end = rest.find(":")
        if status_end < 0:
            status_end = rest.find("<")
        if status_end >= 0:
            status_part = msg[: status_pos + status_end]
            error_start = status_part.rfind("error")
            if error_start < 0:
                error_start = status_part.rfind("Error")
            if error_start >= 0:
                return f"❌ {status_part[error_start:]}"
            return f"❌ HTTP {status_part[status_pos:]}"

    return msg


def format_uptime(seconds: float) -> str:
    """Format a duration as days, hours, minutes and seconds."""
    total = int(seconds)
    if total < 0:
        raise ValueError(f"uptime cannot be negative: {seconds}")
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{days}d {hours}h {minutes}m {secs}s"