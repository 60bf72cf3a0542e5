"""Periodic check for newer client releases."""

from __future__ import annotations

import asyncio
import enum
import json
import time
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol

import semver

VERSION_CHECK_INTERVAL = 24 * 60 * 60.0
POLL_INTERVAL = 60.0
REQUEST_TIMEOUT = 10.0

GITHUB_RELEASES_URL = "https://api.github.com/repos/nexus-xyz/nexus-cli/releases/latest"


class EventType(enum.Enum):
    """Kind of event reported to the UI."""

    SUCCESS = "success"
    ERROR = "error"
    REFRESH = "refresh"
    SHUTDOWN = "shutdown"


class LogLevel(enum.IntEnum):
    """Severity of an event, ordered from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


def _now_stamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class CheckerEvent:
    """An event emitted by the version checker."""

    msg: str
    event_type: EventType
    log_level: LogLevel
    timestamp: str = field(default_factory=_now_stamp)
    worker: str = "version_checker"


@dataclass(frozen=True)
class GitHubRelease:
    """The fields of a release that the checker uses."""

    tag_name: str
    name: str
    published_at: str
    html_url: str
    prerelease: bool


def parse_release(data: dict[str, Any]) -> GitHubRelease:
    """Build a release from a decoded API response; raises ValueError on bad data."""
    try:
        return GitHubRelease(
            tag_name=str(data["tag_name"]),
            name=str(data["name"]),
            published_at=str(data["published_at"]),
            html_url=str(data["html_url"]),
            prerelease=bool(data["prerelease"]),
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed release data: missing {exc}") from exc


def parse_version(version: str) -> semver.Version:
    """Parse a semantic version, accepting an optional leading 'v'."""
    clean = version[1:] if version.startswith("v") else version
    return semver.Version.parse(clean)


@dataclass
class VersionInfo:
    """What is known about the running and the latest released version."""

    current_version: str
    latest_version: str | None = None
    update_available: bool = False
    release_url: str | None = None
    last_check: float | None = None

    def update_from_release(self, release: GitHubRelease) -> None:
        """Record a freshly fetched release."""
        self.latest_version = release.tag_name
        self.release_url = release.html_url
        self.update_available = self.is_newer_version(release.tag_name)
        self.last_check = time.monotonic()

    def is_newer_version(self, latest: str) -> bool:
        """True if `latest` is a newer semantic version than the current one."""
        try:
            current = parse_version(self.current_version)
            latest_ver = parse_version(latest)
        except (ValueError, TypeError):
            return False
        return latest_ver > current


class VersionCheckable(Protocol):
    current_version: str

    async def check_latest_version(self) -> GitHubRelease: ...


class VersionChecker:
    """Queries the releases API for the latest published release."""

    def __init__(
        self,
        current_version: str,
        url: str = GITHUB_RELEASES_URL,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.current_version = current_version
        self.url = url
        self.timeout = timeout

    def _fetch(self) -> GitHubRelease:
        request = urllib.request.Request(
            self.url,
            headers={
                "User-Agent": f"nexus-cli/{self.current_version}",
                "Accept": "application/json",
            },
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                payload = response.read()
        except urllib.error.HTTPError as exc:
            raise RuntimeError(
                f"GitHub API returned status: {exc.code} {exc.reason}"
            ) from exc
        return parse_release(json.loads(payload))

    async def check_latest_version(self) -> GitHubRelease:
        """Fetch the latest release; raises on network, status or format errors."""
        return await asyncio.to_thread(self._fetch)


def _update_message(release: GitHubRelease, info: VersionInfo) -> str:
    return (
        f"🚀 New version {release.tag_name} available! "
        f"Current: {info.current_version} → Release: {release.html_url}"
    )


async def version_checker_task(
    checker: VersionCheckable,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
) -> None:
    """Check for updates now and then once a day until shutdown."""
    await version_checker_task_with_interval(
        checker, events, shutdown, VERSION_CHECK_INTERVAL
    )


async def version_checker_task_with_interval(
    checker: VersionCheckable,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
    check_interval: float,
    poll_interval: float = POLL_INTERVAL,
) -> None:
    """Check for updates now, then every `check_interval` seconds until shutdown.

    The elapsed time is examined every `poll_interval` seconds. A newer release
    is announced only once, when it is first detected.
    """
    info = VersionInfo(checker.current_version)

    try:
        release = await checker.check_latest_version()
    except Exception as exc:  # noqa: BLE001
        await events.put(
            CheckerEvent(
                f"Failed to check for updates: {exc}", EventType.ERROR, LogLevel.DEBUG
            )
        )
    else:
        info.update_from_release(release)
        if info.update_available:
            await events.put(
                CheckerEvent(
                    _update_message(release, info), EventType.SUCCESS, LogLevel.INFO
                )
            )
        else:
            await events.put(
                CheckerEvent(
                    f"✅ Version {info.current_version} is up to date\n",
                    EventType.REFRESH,
                    LogLevel.DEBUG,
                )
            )

    last_check = time.monotonic()
    while not shutdown.is_set():
        try:
            await asyncio.wait_for(shutdown.wait(), timeout=poll_interval)
            break
        except asyncio.TimeoutError:
            pass

        if time.monotonic() - last_check < check_interval:
            continue
        last_check = time.monotonic()

        try:
            release = await checker.check_latest_version()
        except Exception as exc:  # noqa: BLE001
            await events.put(
                CheckerEvent(
                    f"Failed to check for updates: {exc}",
                    EventType.ERROR,
                    LogLevel.DEBUG,
                )
            )
            continue

        was_available = info.update_available
        info.update_from_release(release)
        if info.update_available and not was_available:
            await events.put(
                CheckerEvent(
                    _update_message(release, info), EventType.SUCCESS, LogLevel.INFO
                )
            )


async def start_version_checker_task(
    current_version: str,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
) -> None:
    """Run the daily update check against the real releases API."""
    await version_checker_task(VersionChecker(current_version), events, shutdown)