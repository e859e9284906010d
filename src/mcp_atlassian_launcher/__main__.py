"""Allow ``python -m mcp_atlassian_launcher``."""

from mcp_atlassian_launcher.cli import cli_main

if __name__ == "__main__":
    cli_main()
