"""Git Operations Package"""

from gojira.git.analyzer import GitAnalyzer
from gojira.git.branch import (
    parse_branch_for_commit_type,
    slugify,
    format_branch_name,
    branch_prefix_for,
    extract_ticket_id,
    infer_pr_type,
)
from gojira.git.diff_processor import DiffProcessor, DiffDigest, ProcessorConfig
from gojira.git.gitignore import load_ignore_patterns, is_ignored

__all__ = [
    "GitAnalyzer",
    "parse_branch_for_commit_type",
    "slugify",
    "format_branch_name",
    "branch_prefix_for",
    "extract_ticket_id",
    "infer_pr_type",
    "DiffProcessor",
    "DiffDigest",
    "ProcessorConfig",
    "load_ignore_patterns",
    "is_ignored",
]
