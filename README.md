# proverclient

This package holds the parts of a proving-network node that work without the
prover itself. These are task bookkeeping, machine metrics, a statistics
endpoint, release checks and text helpers for a status display.

## Modules

- `proverclient.task`: `Task` is a frozen dataclass with `task_id`,
  `program_id` and `public_inputs` (bytes). `Task.from_message` builds a task
  from any object that has those three attributes.
- `proverclient.task_cache`: `TaskCache(capacity, expiration=300.0)` is an
  asyncio-safe cache of recently seen task IDs. Entries older than
  `expiration` seconds are dropped. When the cache is full, the oldest entry is
  evicted. Use `await cache.contains(task_id)` and `await cache.insert(task_id)`
  to check for an ID and to add one. Inserting an ID that is already present
  does nothing.
- `proverclient.system`: facts about the machine and rough performance figures.
  - `num_cores()` returns the number of logical cores.
  - `cpu_stats()` returns cores and MHz. The MHz value is 0 when unknown.
  - `flops_per_cycle_per_core()` returns 4 on x86-64 and 1 elsewhere.
  - `estimate_peak_gflops(num_provers)` estimates peak GFLOP/s.
  - `measure_gflops()` times a floating-point loop. It runs once and then
    returns the cached result.
  - `get_memory_info()` returns process and total memory, both encoded by
    `bytes_to_mb`.
  - `bytes_to_mb(num_bytes)` gives thousandths of a MiB, rounded and clamped to
    32 bits.
  - `total_memory_gb()` and `process_memory_gb()` return memory in decimal GB.
- `proverclient.stats_server`: `StatsCounters` is a thread-safe set of
  counters:
  - `successful_submissions`
  - `failed_submissions`
  - `total_tasks_fetched`
  - `duplicate_tasks_fetched`
  - `unique_tasks_fetched`

  `increment(name, amount=1)` adds to a counter. An unknown counter name raises
  `KeyError`. `snapshot()` returns a copy of all counters.

  `create_stats_server(counters=None, host="127.0.0.1", port=38080)` binds an
  HTTP server. `GET /stats` returns the snapshot as JSON, and every other path
  gives 404. `run_stats_server` serves until interrupted. If it cannot bind, it
  prints an error and returns.

  When no counters are passed, both functions use the module-level `COUNTERS`.
- `proverclient.version_checker`: release checks.
  - `parse_version` accepts an optional leading `v`.
  - `VersionInfo.is_newer_version` compares semantic versions. Any version that
    cannot be parsed counts as not newer.
  - `VersionChecker.check_latest_version` queries the releases API.
  - `version_checker_task_with_interval(checker, events, shutdown,
    check_interval, poll_interval=60.0)` checks once at the start and then
    every `check_interval` seconds. It puts `CheckerEvent`s on an
    `asyncio.Queue` and stops when the `asyncio.Event` `shutdown` is set. A
    newly found update is announced only once.
  - `version_checker_task` and `start_version_checker_task` run the same loop
    with a 24-hour check interval.
- `proverclient.dashboard`: text helpers for worker log lines:
  - `extract_version_from_message`
  - `format_compact_timestamp`
  - `truncate_message`
  - `clean_http_error_message`
  - `format_uptime`
- `proverclient.splash`: `logo_lines()` returns the logo as a list of lines.
  `render_splash(version, width, height)` returns `height` rows of exactly
  `width` characters, with the logo and version centred.
- `proverclient.fib`: a Fibonacci program that uses 32-bit wrapping arithmetic.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Skip tasks that have already been seen:

```python
import asyncio
from proverclient.task import Task
from proverclient.task_cache import TaskCache

async def demo():
    cache = TaskCache(100)
    task = Task(task_id="task-1", program_id="fib_input_initial", public_inputs=b"\x05")
    await cache.insert(task.task_id)
    return await cache.contains(task.task_id)   # True

asyncio.run(demo())
```

Compare versions:

```python
from proverclient.version_checker import VersionInfo

info = VersionInfo("0.9.0")
info.is_newer_version("v0.9.1")   # True
info.is_newer_version("0.9.0")    # False
```

Format text for display:

```python
from proverclient.dashboard import format_compact_timestamp, format_uptime

format_compact_timestamp("2024-01-01 12:34:56")  # "01-01 12:34:56"
format_uptime(90061)                             # "1d 1h 1m 1s"
```

## The Fibonacci program

`proverclient-fib` reads up to three lines from standard input:

1. `n`, the number of steps. This line is required.
2. The first starting value. If it is missing or unreadable, 1 is used.
3. The second starting value. If it is missing or unreadable, 1 is used.

The program prints the value after `n` steps, computed modulo 2³². If the first
line is missing or invalid, it prints an error and exits with status 1.

```
printf '10\n1\n1\n' | proverclient-fib
```

The same calculation is available as
`proverclient.fib.fibonacci(n, init_a, init_b)`, and the input parsing as
`proverclient.fib.read_inputs(lines)`.

## What this package does not do

This package does not contain a whole node. It has none of the following:

- An orchestrator client.
- User or node registration, and no configuration file storage.
- Proof generation.
- Workers that fetch tasks or submit proofs.
- An interactive full-screen terminal interface.

The dashboard and splash modules only produce text. Drawing it on a screen is
left to the caller.