"""A small HTTP server that exposes prover statistics as JSON."""

from __future__ import annotations

import json
import logging
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 38080

COUNTER_NAMES = (
    "successful_submissions",
    "failed_submissions",
    "total_tasks_fetched",
    "duplicate_tasks_fetched",
    "unique_tasks_fetched",
)

_log = logging.getLogger(__name__)


class StatsCounters:
    """Thread-safe set of named submission and fetch counters."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values = dict.fromkeys(COUNTER_NAMES, 0)

    def increment(self, name: str, amount: int = 1) -> int:
        """Add to a counter and return its new value."""
        if name not in self._values:
            raise KeyError(f"unknown counter: {name}")
        with self._lock:
            self._values[name] += amount
            return self._values[name]

    def snapshot(self) -> dict[str, int]:
        """Return a copy of all counters."""
        with self._lock:
            return dict(self._values)


COUNTERS = StatsCounters()


class _StatsHTTPServer(ThreadingHTTPServer):
    allow_reuse_address = False
    daemon_threads = True


def _make_handler(counters: StatsCounters) -> type[BaseHTTPRequestHandler]:
    class StatsHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            if self.path.split("?", 1)[0] != "/stats":
                self.send_error(404)
                return
            body = json.dumps(counters.snapshot()).encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args: object) -> None:
            """Send request logs to the module logger instead of stderr."""
            _log.debug("%s - %s", self.address_string(), format % args)

    return StatsHandler


def create_stats_server(
    counters: StatsCounters | None = None,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> ThreadingHTTPServer:
    """Bind a server that answers GET /stats; raises OSError if binding fails."""
    return _StatsHTTPServer((host, port), _make_handler(counters or COUNTERS))


def run_stats_server(
    counters: StatsCounters | None = None,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve statistics until interrupted; reports bind errors and returns."""
    address = f"{host}:{port}"
    print(f"[统计服务] 正在监听于 http://{address}")
    try:
        server = create_stats_server(counters, host, port)
    except OSError as exc:
        print(f"[统计服务] 无法绑定到地址 {address}: {exc}", file=sys.stderr)
        return
    with server:
        try:
            server.serve_forever()
        except Exception as exc:  # noqa: BLE001
            print(f"[统计服务] 服务器错误: {exc}", file=sys.stderr)