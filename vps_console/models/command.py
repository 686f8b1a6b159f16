"""Command execution data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionRequest:
    """One terminal command against a logical host."""

    server_id: str
    command: str
    cwd: str = "/"


@dataclass(frozen=True)
class ExecutionResult:
    """Output of a terminal command and the working directory it left behind."""

    output: str
    cwd: str

    def to_dict(self) -> dict[str, str]:
        return {"output": self.output, "cwd": self.cwd}
