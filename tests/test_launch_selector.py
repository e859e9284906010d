"""Tests for runner selection and launch planning."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from mcp_atlassian_launcher.core.launch import (
    DOCKER_IMAGE,
    Capabilities,
    NoRunnerAvailableError,
    RunnerChoice,
    plan_launch,
    resolve_launch_plan,
)
from mcp_atlassian_launcher.core.launch.selector import choose_runner, package_specifier

# ============================================================================
# Choice Tests
# ============================================================================


class TestChooseRunner:
    """Tests for choose_runner precedence."""

    def test_uvx_preferred(self) -> None:
        caps = Capabilities(uvx=True, uv=True, docker=True)
        assert choose_runner(caps) == RunnerChoice.PACKAGE_RUNNER

    def test_uv_before_docker(self) -> None:
        caps = Capabilities(uv=True, docker=True)
        assert choose_runner(caps) == RunnerChoice.PACKAGE_RUNNER_FALLBACK

    def test_docker_last(self) -> None:
        assert choose_runner(Capabilities(docker=True)) == RunnerChoice.CONTAINER

    def test_none(self) -> None:
        assert choose_runner(Capabilities()) == RunnerChoice.NONE


class TestPackageSpecifier:
    """Tests for package_specifier."""

    def test_unpinned(self) -> None:
        assert package_specifier() == "mcp-atlassian"
        assert package_specifier(None) == "mcp-atlassian"

    def test_pinned(self) -> None:
        assert package_specifier("0.11.9") == "mcp-atlassian==0.11.9"

    def test_empty_pin_is_unpinned(self) -> None:
        assert package_specifier("") == "mcp-atlassian"


# ============================================================================
# Plan Tests
# ============================================================================


class TestPlanLaunch:
    """Tests for plan_launch."""

    def test_uvx_plan(self, make_invocation) -> None:
        invocation = make_invocation(["--transport", "stdio", "-vv"])
        plan = plan_launch(Capabilities(uvx=True), invocation)

        assert plan.choice == RunnerChoice.PACKAGE_RUNNER
        assert plan.command == "uvx"
        assert list(plan.args) == [
            "--from",
            "mcp-atlassian",
            "mcp-atlassian",
            "--transport",
            "stdio",
            "-vv",
        ]
        assert plan.container is None

    def test_uvx_plan_pinned(self, make_invocation) -> None:
        invocation = make_invocation(["-v"])
        plan = plan_launch(Capabilities(uvx=True), invocation, pypi_version="1.2.3")
        assert plan.argv == ["uvx", "--from", "mcp-atlassian==1.2.3", "mcp-atlassian", "-v"]

    def test_uv_plan(self, make_invocation) -> None:
        invocation = make_invocation(["--port=8000"])
        plan = plan_launch(Capabilities(uv=True), invocation, pypi_version="1.2.3")
        assert plan.choice == RunnerChoice.PACKAGE_RUNNER_FALLBACK
        assert plan.argv == [
            "uv",
            "x",
            "--from",
            "mcp-atlassian==1.2.3",
            "mcp-atlassian",
            "--port=8000",
        ]

    def test_passthrough_untouched(self, make_invocation) -> None:
        """Test inspected flags, `--` and `--help` are all forwarded in order."""
        args = ["--oauth-setup", "--", "--help", "--port", "1", "a b;c"]
        plan = plan_launch(Capabilities(uvx=True), make_invocation(args))
        assert list(plan.args[3:]) == args

    def test_docker_plan(self, make_invocation, home_dir: Path) -> None:
        invocation = make_invocation(
            ["--oauth-setup"],
            {"JIRA_URL": "https://jira", "JIRA_API_TOKEN": "t", "PORT": "9000"},
        )
        plan = plan_launch(
            Capabilities(docker=True), invocation, platform="linux", home=home_dir
        )

        assert plan.choice == RunnerChoice.CONTAINER
        assert plan.command == "docker"
        assert plan.container is not None
        assert list(plan.args) == plan.container.to_args()
        assert plan.args[:3] == ("run", "--rm", "-i")
        assert plan.args[-2:] == (DOCKER_IMAGE, "--oauth-setup")
        assert "9000:9000" in plan.args
        assert f"{home_dir / '.mcp-atlassian'}:/home/app/.mcp-atlassian" in plan.args

    def test_docker_plan_ignores_pypi_pin(self, make_invocation, home_dir: Path) -> None:
        plan = plan_launch(
            Capabilities(docker=True),
            make_invocation(),
            pypi_version="1.2.3",
            platform="linux",
            home=home_dir,
        )
        assert not any("1.2.3" in arg for arg in plan.args)

    def test_pin_only_from_argument(self, make_invocation) -> None:
        """Test the planner does not read the version pin from the environment."""
        invocation = make_invocation([], {"MCP_ATLASSIAN_PYPI_VERSION": "9.9.9"})
        plan = plan_launch(Capabilities(uvx=True), invocation)
        assert plan.args[1] == "mcp-atlassian"

    def test_docker_plan_without_home(self, make_invocation) -> None:
        """Test the home directory is not needed unless the token cache is mounted."""
        invocation = make_invocation(["--transport", "stdio"])
        with patch(
            "mcp_atlassian_launcher.core.launch.environment.Path.home",
            side_effect=RuntimeError("Could not determine home directory."),
        ) as mock_home:
            plan = plan_launch(Capabilities(docker=True), invocation, platform="linux")

        mock_home.assert_not_called()
        assert plan.container is not None
        assert plan.container.volume is None
        assert "-v" not in plan.args

    def test_docker_plan_resolves_home_for_oauth(self, make_invocation, home_dir: Path) -> None:
        invocation = make_invocation(["--oauth-setup"])
        with patch(
            "mcp_atlassian_launcher.core.launch.environment.Path.home",
            return_value=home_dir,
        ):
            plan = plan_launch(Capabilities(docker=True), invocation, platform="linux")

        assert f"{home_dir / '.mcp-atlassian'}:/home/app/.mcp-atlassian" in plan.args

    def test_no_runner(self, make_invocation) -> None:
        with pytest.raises(NoRunnerAvailableError) as exc_info:
            plan_launch(Capabilities(), make_invocation(["-v"]))
        assert exc_info.value.candidates == ("uvx", "uv", "docker")


class TestResolveLaunchPlan:
    """Tests for resolve_launch_plan with injected probes."""

    def test_probes_and_plans(self, make_invocation, fake_probe) -> None:
        probe = fake_probe("uv", "docker")
        plan = resolve_launch_plan(make_invocation(["-v"]), probe=probe)
        assert plan.choice == RunnerChoice.PACKAGE_RUNNER_FALLBACK
        assert probe.calls == ["uvx", "uv"]

    def test_no_runner(self, make_invocation, fake_probe) -> None:
        with pytest.raises(NoRunnerAvailableError):
            resolve_launch_plan(make_invocation(), probe=fake_probe())

    def test_passes_version_pin(self, make_invocation, fake_probe) -> None:
        plan = resolve_launch_plan(make_invocation(), probe=fake_probe("uvx"), pypi_version="2.0.0")
        assert plan.args[:2] == ("--from", "mcp-atlassian==2.0.0")

    def test_logs_container_details(self, make_invocation, fake_probe, caplog) -> None:
        """Test the Docker plan's env names, port and mount show up in debug logs."""
        invocation = make_invocation(["--port", "8000"], {"JIRA_URL": "https://jira"})
        with caplog.at_level(logging.DEBUG, logger="mcp_atlassian_launcher"):
            resolve_launch_plan(invocation, probe=fake_probe("docker"))

        assert "Container env: ['JIRA_URL']" in caplog.text
        assert "port: 8000" in caplog.text
        assert "token cache: not mounted" in caplog.text
