"""Command-line interface for project-migrator."""

from __future__ import annotations

import asyncio as asyncio

from project_migrator import ProjectMigrator as ProjectMigrator
from project_migrator.cli.app import config_from_args as config_from_args
from project_migrator.cli.app import configure_logging as configure_logging
from project_migrator.cli.app import format_migration_summary as format_migration_summary
from project_migrator.cli.app import main as main
from project_migrator.cli.app import run_migrate as run_migrate
from project_migrator.cli.parser import _package_version as _package_version
from project_migrator.cli.parser import build_parser as build_parser
from project_migrator.cli.progress.rich import RichMigrationProgress as RichMigrationProgress
from project_migrator.cli.prompts import QuestionaryOperatorPrompt as QuestionaryOperatorPrompt
from project_migrator.cli.update_check import check_for_update as check_for_update
