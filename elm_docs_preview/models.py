"""Data models used by the docs preview build."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InvocationParameters:
    """Values parsed once from the command line."""

    docs_input: str | None = None
    docs_output: str | None = None
    debug: bool = False

    @property
    def complete(self) -> bool:
        """Return True when both required paths were supplied."""
        return bool(self.docs_input) and bool(self.docs_output)


@dataclass
class BuildResult:
    """Outcome of one external compiler invocation."""

    command: list[str] = field(default_factory=list)
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.error

    def describe_failure(self) -> str:
        """Build a readable failure message for console output."""
        if self.error:
            return self.error
        lines = [f"Compiler exited with status {self.returncode}: {' '.join(self.command)}"]
        output = self.stderr.strip() or self.stdout.strip()
        if output:
            lines.append(output)
        return "\n".join(lines)
