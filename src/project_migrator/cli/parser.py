"""CLI parser construction."""

from __future__ import annotations

import argparse
import os
from importlib.metadata import PackageNotFoundError, version

from project_migrator.contracts.config import DEFAULT_BASE_URL


def _package_version() -> str:
    try:
        return version("project-migrator")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="project-migrator",
        description="Import a GitHub Projects snapshot into a new project on another owner or deployment",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    parser.add_argument("--input-path", default="project.json", help="Exported project snapshot (JSON)")
    parser.add_argument(
        "--repository-mappings-path",
        default="repository-mappings.csv",
        help="CSV mapping source repositories to target repositories",
    )
    parser.add_argument("--project-owner", required=True, help="Organization or user that will own the new project")
    parser.add_argument(
        "--project-owner-type",
        choices=["organization", "user"],
        default="organization",
        help="Type of the project owner (default: organization)",
    )
    parser.add_argument("--project-title", default=None, help="Title for the new project (default: source title)")
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"GitHub API base URL, e.g. https://github.acme.inc/api/v3 (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--auth",
        choices=["gh-cli", "env", "token"],
        default=None,
        help="Token source (default: token when --access-token is given, env otherwise)",
    )
    parser.add_argument("--access-token", default=None, help="Access token for the target deployment")
    parser.add_argument(
        "--proxy-url",
        default=os.getenv("IMPORT_PROXY_URL"),
        help="HTTP(S) proxy for API requests (default: $IMPORT_PROXY_URL)",
    )
    parser.add_argument(
        "--skip-certificate-verification",
        action="store_true",
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--title-mismatch",
        choices=["warn", "error"],
        default="warn",
        help="What to do when a target issue/PR title differs from the snapshot (default: warn)",
    )
    parser.add_argument("--disable-telemetry", action="store_true", help="Accepted for compatibility; no effect")
    parser.add_argument("--skip-update-check", action="store_true", help="Do not check PyPI for a newer release")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
