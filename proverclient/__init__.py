"""Building blocks for a proving-network node: tasks, task cache, system metrics,
statistics endpoint, release checks, display helpers and a Fibonacci program."""

__version__ = "0.9.5"

__all__ = [
    "dashboard",
    "fib",
    "splash",
    "stats_server",
    "system",
    "task",
    "task_cache",
    "version_checker",
]