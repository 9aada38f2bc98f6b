"""CLI argument handling, error mapping and summary output."""

from __future__ import annotations

import argparse
import io
from typing import Any

import pytest
from rich.console import Console

import project_migrator.cli as cli
from project_migrator import (
    AuthenticationError,
    ConfigError,
    MigrationError,
    MigrationResult,
    ProviderError,
    SnapshotLoadError,
    StatusReconciliationAborted,
)
from project_migrator.cli.app import EXIT_ABORTED, EXIT_CONFIG, EXIT_MIGRATION, EXIT_OK, EXIT_PROVIDER
from project_migrator.contracts.remote import OwnerType
from project_migrator.engine.progress import NullMigrationProgress

_RESULT = MigrationResult(
    project_id="PVT_1",
    project_url="https://github.com/orgs/target-org/projects/3",
    repositories_linked=2,
    fields_created=4,
    items_created=10,
    items_skipped=1,
    items_archived=2,
    field_values_set=20,
    field_values_skipped=3,
)


def _args(*extra: str) -> argparse.Namespace:
    return cli.build_parser().parse_args(["--project-owner", "target-org", *extra])


def _run_raising(exc: BaseException):
    def _run(coro) -> None:
        coro.close()
        raise exc

    return _run


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda console, *, verbose: None)


class TestParser:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("IMPORT_PROXY_URL", raising=False)
        args = _args()

        assert args.input_path == "project.json"
        assert args.repository_mappings_path == "repository-mappings.csv"
        assert args.project_owner_type == "organization"
        assert args.base_url == "https://api.github.com"
        assert args.auth is None
        assert args.title_mismatch == "warn"
        assert args.skip_certificate_verification is False

    def test_project_owner_is_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_proxy_url_defaults_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMPORT_PROXY_URL", "http://proxy.local:3128")

        assert _args().proxy_url == "http://proxy.local:3128"


class TestConfigFromArgs:
    def test_access_token_selects_token_auth(self) -> None:
        config = cli.config_from_args(_args("--access-token", "tok_abc", "--project-owner-type", "user"))

        assert config.auth == "token"
        assert config.token == "tok_abc"
        assert config.project_owner_type is OwnerType.USER

    def test_env_auth_is_the_default(self) -> None:
        assert cli.config_from_args(_args()).auth == "env"

    def test_explicit_auth_wins(self) -> None:
        assert cli.config_from_args(_args("--auth", "gh-cli")).auth == "gh-cli"

    def test_invalid_combination_raises_config_error(self) -> None:
        with pytest.raises(ConfigError, match="invalid options"):
            cli.config_from_args(_args("--auth", "env", "--access-token", "tok_abc"))

    def test_invalid_base_url_raises_config_error(self) -> None:
        with pytest.raises(ConfigError, match="base_url"):
            cli.config_from_args(_args("--base-url", "github.acme.inc"))


def test_summary_mentions_url_counts_and_manual_steps() -> None:
    console = Console(file=io.StringIO(), width=200)
    console.print(cli.format_migration_summary(_RESULT))
    output = console.file.getvalue()  # type: ignore[attr-defined]

    assert _RESULT.project_url in output
    assert "10 created, 1 skipped, 2 archived" in output
    assert "20 set, 3 skipped" in output
    assert "Views and workflows are not migrated" in output


class _QuietProgress(NullMigrationProgress):
    def __enter__(self) -> _QuietProgress:
        return self

    def __exit__(self, *exc_info: object) -> None:
        pass


class _FakeMigrator:
    instances: list[_FakeMigrator] = []

    def __init__(self, *, config, operator, progress=None) -> None:
        self.config = config
        self.operator = operator
        self.progress = progress
        _FakeMigrator.instances.append(self)

    async def migrate(self) -> MigrationResult:
        return _RESULT


class TestRunMigrate:
    @pytest.fixture(autouse=True)
    def _patch(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _FakeMigrator.instances = []
        monkeypatch.setattr(cli, "ProjectMigrator", _FakeMigrator)
        monkeypatch.setattr(cli, "_package_version", lambda: "0.1.0")

    @pytest.mark.asyncio
    async def test_prints_summary_and_returns_result(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        async def _no_update(current: str, *, proxy_url: str | None = None) -> None:
            return None

        monkeypatch.setattr(cli, "check_for_update", _no_update)
        monkeypatch.setattr(cli, "RichMigrationProgress", lambda console: _QuietProgress())

        result = await cli.run_migrate(_args(), Console(file=io.StringIO()))

        assert result is _RESULT
        assert isinstance(_FakeMigrator.instances[0].progress, NullMigrationProgress)
        assert "projects/3" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_verbose_runs_without_progress_display(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail(console):
            raise AssertionError("progress display should not be used in verbose mode")

        monkeypatch.setattr(cli, "RichMigrationProgress", _fail)

        await cli.run_migrate(_args("--verbose", "--skip-update-check"), Console(file=io.StringIO()))

        assert _FakeMigrator.instances[0].progress is None

    @pytest.mark.asyncio
    async def test_warns_about_newer_release(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        seen: dict[str, Any] = {}

        async def _newer(current: str, *, proxy_url: str | None = None) -> str:
            seen["current"] = current
            seen["proxy_url"] = proxy_url
            return "9.0.0"

        monkeypatch.setattr(cli, "check_for_update", _newer)

        await cli.run_migrate(
            _args("--verbose", "--proxy-url", "http://proxy.local:3128"), Console(file=io.StringIO())
        )

        assert seen == {"current": "0.1.0", "proxy_url": "http://proxy.local:3128"}
        assert "9.0.0" in caplog.text

    @pytest.mark.asyncio
    async def test_skip_update_check(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def _fail(current: str, *, proxy_url: str | None = None) -> None:
            raise AssertionError("update check should be skipped")

        monkeypatch.setattr(cli, "check_for_update", _fail)

        await cli.run_migrate(_args("--verbose", "--skip-update-check"), Console(file=io.StringIO()))


    @pytest.mark.asyncio
    async def test_proxy_without_skipping_verification_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        await cli.run_migrate(
            _args("--verbose", "--skip-update-check", "--proxy-url", "http://proxy.local:3128"),
            Console(file=io.StringIO()),
        )

        assert "--skip-certificate-verification" in caplog.text

    @pytest.mark.asyncio
    async def test_proxy_with_verification_skipped_does_not_warn(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        args = _args(
            "--verbose",
            "--skip-update-check",
            "--proxy-url",
            "http://proxy.local:3128",
            "--skip-certificate-verification",
        )

        await cli.run_migrate(args, Console(file=io.StringIO()))

        assert "certificate verification" not in caplog.text


class TestMainExitCodes:
    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def _ok(args, console) -> MigrationResult:
            return _RESULT

        monkeypatch.setattr(cli, "run_migrate", _ok)

        assert cli.main(["--project-owner", "target-org"]) == EXIT_OK

    @pytest.mark.parametrize(
        ("exc", "code"),
        [
            (ConfigError("input file not found"), EXIT_CONFIG),
            (SnapshotLoadError("bad json"), EXIT_CONFIG),
            (AuthenticationError("bad credentials"), EXIT_PROVIDER),
            (ProviderError("HTTP 502"), EXIT_PROVIDER),
            (StatusReconciliationAborted("aborted"), EXIT_ABORTED),
            (MigrationError("halted"), EXIT_MIGRATION),
            (KeyboardInterrupt(), EXIT_ABORTED),
            (RuntimeError("boom"), 1),
        ],
    )
    def test_errors_map_to_exit_codes(
        self, monkeypatch: pytest.MonkeyPatch, exc: BaseException, code: int
    ) -> None:
        monkeypatch.setattr(cli.asyncio, "run", _run_raising(exc))

        assert cli.main(["--project-owner", "target-org"]) == code

    def test_migration_error_reports_partial_project(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exc = MigrationError("item failed", project_url="https://github.com/orgs/target-org/projects/3")
        monkeypatch.setattr(cli.asyncio, "run", _run_raising(exc))

        assert cli.main(["--project-owner", "target-org"]) == EXIT_MIGRATION

        err = capsys.readouterr().err
        assert "error: item failed" in err
        assert "https://github.com/orgs/target-org/projects/3" in err
