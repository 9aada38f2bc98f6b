"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from project_migrator import (
    AuthenticationError,
    ConfigError,
    MigrationConfig,
    MigrationError,
    MigrationResult,
    ProviderError,
    SnapshotLoadError,
    StatusReconciliationAborted,
)

_LOG = logging.getLogger("project_migrator.cli")

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIG = 3
EXIT_PROVIDER = 4
EXIT_MIGRATION = 5
EXIT_ABORTED = 130


def configure_logging(console: Console, *, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, markup=False)],
        force=True,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def config_from_args(args: argparse.Namespace) -> MigrationConfig:
    auth = args.auth or ("token" if args.access_token else "env")
    try:
        return MigrationConfig(
            input_path=args.input_path,
            repository_mappings_path=args.repository_mappings_path,
            project_owner=args.project_owner,
            project_owner_type=args.project_owner_type,
            project_title=args.project_title,
            base_url=args.base_url,
            auth=auth,
            token=args.access_token,
            proxy_url=args.proxy_url or None,
            skip_certificate_verification=args.skip_certificate_verification,
            title_mismatch=args.title_mismatch,
            disable_telemetry=args.disable_telemetry,
            skip_update_check=args.skip_update_check,
            verbose=args.verbose,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc


def format_migration_summary(result: MigrationResult) -> Panel:
    lines = [
        f"Your new project is ready at [link={result.project_url}]{result.project_url}[/link]",
        "",
        f"  Repositories:  {result.repositories_linked} linked, {result.repositories_skipped} skipped",
        f"  Fields:        {result.fields_created} created",
        f"  Items:         {result.items_created} created, {result.items_skipped} skipped, "
        f"{result.items_archived} archived",
        f"  Field values:  {result.field_values_set} set, {result.field_values_skipped} skipped",
        "",
        "Views and workflows are not migrated. Recreate them manually in the new project.",
    ]
    return Panel("\n".join(lines), title="project-migrator - import complete", border_style="green")


async def run_migrate(args: argparse.Namespace, console: Console) -> MigrationResult:
    import project_migrator.cli as cli

    config = cli.config_from_args(args)

    if config.proxy_url and not config.skip_certificate_verification:
        _LOG.warning(
            "A proxy URL is set but certificate verification is still on. This is likely to cause SSL errors; "
            "if it does, make sure you are on a trusted network and retry with --skip-certificate-verification."
        )

    if not config.skip_update_check:
        current = cli._package_version()
        latest = await cli.check_for_update(current, proxy_url=config.proxy_url)
        if latest is not None:
            _LOG.warning("A newer version of project-migrator is available (%s, you have %s)", latest, current)

    operator = cli.QuestionaryOperatorPrompt(console)
    if not args.verbose:
        with cli.RichMigrationProgress(console) as progress:
            migrator = cli.ProjectMigrator(config=config, operator=operator, progress=progress)
            result = await migrator.migrate()
    else:
        migrator = cli.ProjectMigrator(config=config, operator=operator)
        result = await migrator.migrate()

    Console().print(cli.format_migration_summary(result))
    return result


def _report_error(exc: BaseException) -> None:
    print(f"error: {exc}", file=sys.stderr)
    project_url = getattr(exc, "project_url", None)
    if project_url:
        print(f"The partially migrated project is at {project_url}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    import project_migrator.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    console = Console(stderr=True)
    cli.configure_logging(console, verbose=args.verbose)

    try:
        cli.asyncio.run(cli.run_migrate(args, console))
        return EXIT_OK
    except (ConfigError, SnapshotLoadError) as exc:
        _report_error(exc)
        return EXIT_CONFIG
    except (AuthenticationError, ProviderError) as exc:
        _report_error(exc)
        return EXIT_PROVIDER
    except StatusReconciliationAborted as exc:
        _report_error(exc)
        return EXIT_ABORTED
    except MigrationError as exc:
        _report_error(exc)
        return EXIT_MIGRATION
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return EXIT_ABORTED
    except Exception as exc:  # pragma: no cover - defensive fallback
        _LOG.debug("Unexpected failure", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED


__all__ = ["main"]
