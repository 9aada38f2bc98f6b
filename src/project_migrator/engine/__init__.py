"""Migration engine public exports."""

from project_migrator.engine.deployment import check_deployment, ensure_supported
from project_migrator.engine.fields import FieldCorrelator, build_option_inputs, correlate_options, is_custom_field
from project_migrator.engine.items import ItemReplicator, build_field_value, draft_issue_body
from project_migrator.engine.orchestrator import MigrationOrchestrator
from project_migrator.engine.progress import MigrationProgress, NullMigrationProgress
from project_migrator.engine.rate_limit import RateLimitMonitor
from project_migrator.engine.resolver import IdentifierResolver
from project_migrator.engine.status import OperatorPrompt, StatusFieldReconciler

__all__ = [
    "FieldCorrelator",
    "IdentifierResolver",
    "ItemReplicator",
    "MigrationOrchestrator",
    "MigrationProgress",
    "NullMigrationProgress",
    "OperatorPrompt",
    "RateLimitMonitor",
    "StatusFieldReconciler",
    "build_field_value",
    "build_option_inputs",
    "check_deployment",
    "correlate_options",
    "draft_issue_body",
    "ensure_supported",
    "is_custom_field",
]
