"""
Data models for the launch package.

Defines the per-run inputs (invocation snapshot, probed capabilities) and
outputs (runner choice, launch plan, container invocation, child outcome).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, Field


class RunnerChoice(str, Enum):
    """Backend used to run the mcp-atlassian server."""

    PACKAGE_RUNNER = "uvx"  # Preferred: ephemeral package run via uvx
    PACKAGE_RUNNER_FALLBACK = "uv"  # `uv x` when the uvx shim is missing
    CONTAINER = "docker"  # Pre-built image via Docker
    NONE = "none"

    @property
    def command(self) -> str:
        """Executable probed for and launched for this runner."""
        if self is RunnerChoice.NONE:
            raise ValueError("RunnerChoice.NONE has no command")
        return self.value


# Precedence order used when probing and choosing a runner
RUNNER_PRECEDENCE: tuple[RunnerChoice, ...] = (
    RunnerChoice.PACKAGE_RUNNER,
    RunnerChoice.PACKAGE_RUNNER_FALLBACK,
    RunnerChoice.CONTAINER,
)


@dataclass(frozen=True)
class Invocation:
    """
    Snapshot of how the launcher was called.

    Attributes:
        args: Caller arguments, program name excluded
        environ: Read-only copy of the process environment at launch time
    """

    args: tuple[str, ...]
    environ: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def capture(cls, argv: Sequence[str], environ: Mapping[str, str]) -> Invocation:
        """Freeze the given arguments and environment into an Invocation."""
        return cls(args=tuple(argv), environ=MappingProxyType(dict(environ)))


@dataclass(frozen=True)
class Capabilities:
    """
    Probe results for each candidate runner.

    Candidates after the first present one are never probed and stay False.
    """

    uvx: bool = False
    uv: bool = False
    docker: bool = False

    def has(self, choice: RunnerChoice) -> bool:
        """Whether the tool behind ``choice`` was found."""
        if choice is RunnerChoice.NONE:
            return False
        return bool(getattr(self, choice.command))


class ContainerInvocationSpec(BaseModel):
    """
    Docker invocation for the mcp-atlassian image.

    Environment variables are forwarded by name only (``-e KEY``); Docker reads
    their values from the launcher's environment.
    """

    image: str = Field(description="Image reference passed to docker run")
    env_keys: list[str] = Field(
        default_factory=list,
        description="Whitelisted variable names present in the host environment",
    )
    port: str | None = Field(
        default=None,
        description="Port published as PORT:PORT, digits only",
    )
    volume: str | None = Field(
        default=None,
        description="Bind mount in host_path:container_path form",
    )
    passthrough_args: list[str] = Field(
        default_factory=list,
        description="Caller arguments appended after the image",
    )

    def to_args(self) -> list[str]:
        """Render the ``docker`` argument list (without the docker executable)."""
        args = ["run", "--rm", "-i"]

        for key in self.env_keys:
            args.extend(["-e", key])

        if self.port:
            args.extend(["-p", f"{self.port}:{self.port}"])

        if self.volume:
            args.extend(["-v", self.volume])

        args.append(self.image)
        args.extend(self.passthrough_args)
        return args


@dataclass(frozen=True)
class LaunchPlan:
    """
    Fully resolved command for the chosen runner.

    Attributes:
        choice: Runner that was selected
        command: Executable to spawn
        args: Arguments for the executable
        container: Container invocation, set only for the Docker runner
    """

    choice: RunnerChoice
    command: str
    args: tuple[str, ...]
    container: ContainerInvocationSpec | None = None

    @property
    def argv(self) -> list[str]:
        """Command followed by its arguments."""
        return [self.command, *self.args]


@dataclass(frozen=True)
class ChildOutcome:
    """How the child process terminated: an exit code or a signal number."""

    exit_code: int | None = None
    signal: int | None = None

    @classmethod
    def from_returncode(cls, returncode: int | None) -> ChildOutcome:
        """Translate a ``subprocess`` return code (negative means killed by signal)."""
        if returncode is not None and returncode < 0:
            return cls(signal=-returncode)
        return cls(exit_code=returncode)

    @property
    def killed(self) -> bool:
        return self.signal is not None


__all__ = [
    "RunnerChoice",
    "RUNNER_PRECEDENCE",
    "Invocation",
    "Capabilities",
    "ContainerInvocationSpec",
    "LaunchPlan",
    "ChildOutcome",
]
