"""Prover task description shared by the fetcher and the provers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Task:
    """A proving task handed out by the orchestrator."""

    task_id: str
    program_id: str
    public_inputs: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "public_inputs", bytes(self.public_inputs))

    @classmethod
    def from_message(cls, message: Any) -> "Task":
        """Build a task from any orchestrator message carrying the task fields."""
        return cls(
            task_id=message.task_id,
            program_id=message.program_id,
            public_inputs=bytes(message.public_inputs),
        )

    def __str__(self) -> str:
        inputs = "[" + ", ".join(str(b) for b in self.public_inputs) + "]"
        return (
            f"Task ID: {self.task_id}, Program ID: {self.program_id}, "
            f"Public Inputs: {inputs}"
        )