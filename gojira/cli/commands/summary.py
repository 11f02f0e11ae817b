"""summary: describe everything that changed since a base revision."""

import logging

from gojira.errors import GitQueryError, NoChanges
from gojira.formatting import format_summary
from gojira.git import DiffProcessor
from gojira.output import dim, print_warning
from gojira.prompts import build_summary_prompt

from gojira.cli.commands.commit import require_repository
from gojira.cli.context import CommandContext
from gojira.cli.options import SummaryOptions
from gojira.cli.utils import save_and_report

logger = logging.getLogger(__name__)


def collect_file_diffs(ctx: CommandContext, base: str, files: list[str]) -> dict[str, str]:
    diffs = {}
    for path in files:
        try:
            diffs[path] = ctx.git.diff_since(base, path)
        except GitQueryError as e:
            print_warning(f"Skipping {path}: {e}")
    return diffs


def run_summary(opts: SummaryOptions, ctx: CommandContext) -> int:
    require_repository(ctx)
    files = ctx.git.changed_files_since(opts.base)
    if not files:
        raise NoChanges(f"No changes found since {opts.base}")

    processor = DiffProcessor()
    selected = processor.select_files(files, opts.max_files)
    diffs = collect_file_diffs(ctx, opts.base, selected)
    if not diffs:
        raise NoChanges(f"Only binary, vendored or unreadable files changed since {opts.base}")

    digest = processor.process(diffs, include_code=opts.include_code)
    print(dim(f"Summarizing {len(digest.included_files)} of {len(files)} changed files (~{digest.estimated_tokens} tokens)"))

    summary = ctx.complete(build_summary_prompt(digest), "Summarizing changes").strip()
    formatted = format_summary(summary, opts.format)

    if opts.save:
        save_and_report(opts.output, formatted, "Summary saved")
    print(formatted)
    return 0
