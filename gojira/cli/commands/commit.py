"""commit: draft a commit message from the current diff."""

import logging
import sys

from gojira.errors import NotAGitRepo
from gojira.output import bold, dim, display_block
from gojira.prompts import build_commit_prompt

from gojira.cli.context import CommandContext
from gojira.cli.options import CommitOptions
from gojira.cli.utils import report_copy

logger = logging.getLogger(__name__)


def require_repository(ctx: CommandContext) -> None:
    if not ctx.git.is_git_repository():
        raise NotAGitRepo("Not a git repository. Run this command inside a repository.")


def generate_commit_message(opts: CommitOptions, ctx: CommandContext) -> str:
    require_repository(ctx)
    diffs = ctx.git.collect_diff(staged=not opts.all)
    branch = ctx.git.current_branch()
    logger.debug("Branch %s, %d changed files", branch, len(diffs))

    if sys.stdout.isatty():
        print(bold("Staged changes:" if not opts.all else "Changes:"))
        for path in diffs:
            print(dim(f"  {path}"))

    prompt = build_commit_prompt(diffs, branch, hint=opts.hint)
    return ctx.complete(prompt, "Writing commit message").strip()


def run_commit(opts: CommitOptions, ctx: CommandContext) -> int:
    message = generate_commit_message(opts, ctx)

    # Raw output when piped, e.g. `gojira commit | git commit -F -`
    if sys.stdout.isatty():
        display_block(message, "Commit message")
    else:
        print(message)

    if opts.copy:
        report_copy(ctx.clipboard, message)
    return 0
