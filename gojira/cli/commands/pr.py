"""pr: open a pull/merge request with a generated title and body."""

import logging
import os
import shutil
import subprocess
import tempfile

from gojira.errors import ExternalToolError, ExternalToolMissing, GitQueryError
from gojira.git import extract_ticket_id, infer_pr_type
from gojira.output import bold, display_block, info, print_info, print_success
from gojira.prompts import PR_TITLE_MAX_LENGTH, build_pr_description_prompt, build_pr_title_prompt

from gojira.cli.commands.commit import require_repository
from gojira.cli.context import CommandContext
from gojira.cli.options import PROptions

logger = logging.getLogger(__name__)

PR_TOOLS = ('gh', 'glab')
DESCRIPTION_LOG_FORMAT = '%h - %s (%an)'


def detect_pr_tool(which=None) -> str | None:
    """First of gh, glab found on PATH."""
    which = which or shutil.which
    for tool in PR_TOOLS:
        if which(tool):
            return tool
    return None


def _with_remote_fallback(query, base: str, branch: str) -> str:
    """Run a range query against origin/<base> first, then the local base."""
    try:
        return query(f"origin/{base}..{branch}")
    except GitQueryError as e:
        logger.debug("origin/%s not usable (%s), trying local %s", base, e, base)
        return query(f"{base}..{branch}")


def generate_pr_title(ctx: CommandContext, branch: str, base: str) -> str:
    commits = _with_remote_fallback(lambda rng: ctx.git.log(rng), base, branch)
    prompt = build_pr_title_prompt(infer_pr_type(branch), extract_ticket_id(branch), commits)
    title = ctx.complete(prompt, "Writing PR title").strip()
    return title[:PR_TITLE_MAX_LENGTH]


def generate_pr_description(ctx: CommandContext, branch: str, base: str) -> str:
    diff_stat = _with_remote_fallback(ctx.git.diff_stat, base, branch)
    commits = _with_remote_fallback(lambda rng: ctx.git.log(rng, fmt=DESCRIPTION_LOG_FORMAT), base, branch)
    prompt = build_pr_description_prompt(diff_stat, commits)
    return ctx.complete(prompt, "Writing PR description").strip()


def build_pr_command(tool: str, title: str, body_file: str, opts: PROptions, branch: str) -> list[str]:
    if tool == 'gh':
        cmd = ['gh', 'pr', 'create', '--title', title, '--body-file', body_file]
        if opts.remote:
            cmd += ['--repo', opts.remote]
        if opts.base:
            cmd += ['--base', opts.base]
        if branch:
            cmd += ['--head', branch]
    else:
        cmd = ['glab', 'mr', 'create', '--title', title, '--description', f"@{body_file}"]
        if opts.base:
            cmd += ['--target-branch', opts.base]
    if opts.draft:
        cmd.append('--draft')
    return cmd


def _create_pr(tool: str, title: str, body: str, opts: PROptions, branch: str) -> None:
    tmp = tempfile.NamedTemporaryFile(mode='w', suffix='.md', prefix='gojira-pr-', delete=False, encoding='utf-8')
    try:
        tmp.write(body)
        tmp.close()
        cmd = build_pr_command(tool, title, tmp.name, opts, branch)
        logger.debug("Running: %s", ' '.join(cmd))
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise ExternalToolError(f"Could not run {cmd[0]}: {e}") from e
        if result.returncode != 0:
            raise ExternalToolError(f"{cmd[0]} exited with status {result.returncode}")
    finally:
        try:
            os.unlink(tmp.name)
        except OSError as e:
            logger.warning("Could not delete temp file %s: %s", tmp.name, e)


def run_pr(opts: PROptions, ctx: CommandContext) -> int:
    require_repository(ctx)
    branch = opts.branch or ctx.git.current_branch()

    tool = None
    if not opts.dry_run:
        tool = detect_pr_tool()
        if tool is None:
            raise ExternalToolMissing(
                "Neither 'gh' (GitHub CLI) nor 'glab' (GitLab CLI) was found. Install one to create PRs."
            )

    title = opts.title or generate_pr_title(ctx, branch, opts.base)
    print(f"{bold('Title:')} {title}")
    description = opts.description or generate_pr_description(ctx, branch, opts.base)

    if opts.dry_run:
        display_block(description, "Description")
        return 0

    print_info(f"Creating PR with {info(tool)}...")
    _create_pr(tool, title, description, opts, branch)
    print_success("Pull request created")
    return 0
