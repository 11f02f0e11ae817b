"""standup: stand-up report from recent commits, issues and PRs."""

import logging
import shutil
import subprocess
from datetime import date, timedelta

from gojira.errors import GitQueryError
from gojira.output import display_block
from gojira.prompts import Activities, build_standup_prompt

from gojira.cli.commands.commit import require_repository
from gojira.cli.context import CommandContext
from gojira.cli.options import StandupOptions
from gojira.cli.utils import save_and_report

logger = logging.getLogger(__name__)


def repo_name_from_url(url: str) -> str:
    """'git@github.com:acme/shop.git' -> 'shop'."""
    url = url.strip().rstrip('/')
    if not url:
        return ""
    last = url.replace(':', '/').split('/')[-1]
    return last[:-4] if last.endswith('.git') else last


def _gh_lines(*args: str) -> list[str] | None:
    """Output lines of a gh command, or None when it fails."""
    try:
        result = subprocess.run(['gh', *args], capture_output=True, text=True)
    except OSError as e:
        logger.debug("gh %s could not run: %s", ' '.join(args), e)
        return None
    if result.returncode != 0:
        logger.debug("gh %s failed: %s", ' '.join(args), result.stderr.strip())
        return None
    return [line for line in result.stdout.splitlines() if line.strip()]


def collect_activities(opts: StandupOptions, ctx: CommandContext, email: str) -> Activities:
    activities = Activities(
        repo_name=repo_name_from_url(ctx.git.remote_url()),
        user_name=ctx.git.author_name(email) if email else "",
        works_in_jira=ctx.config.jira_configured,
    )

    if not opts.issues_only:
        since = (date.today() - timedelta(days=opts.days)).isoformat()
        try:
            if email and not opts.team:
                activities.commits = ctx.git.log_since(since, author=email, fmt='%h | %s')
            else:
                activities.commits = ctx.git.log_since(since, fmt='%h | %an | %s')
        except GitQueryError as e:
            logger.warning("Could not read commits: %s", e)

    if shutil.which('gh') and _gh_lines('issue', 'list', '--limit', '1') is not None:
        activities.has_issues = True
        activities.issues = _gh_lines('issue', 'list', '--limit', '10', '--state', 'open') or []
        activities.pull_requests = _gh_lines('pr', 'list', '--limit', '5', '--state', 'open') or []

    logger.debug(
        "Collected %d commits, %d issues, %d PRs",
        len(activities.commits), len(activities.issues), len(activities.pull_requests),
    )
    return activities


def run_standup(opts: StandupOptions, ctx: CommandContext) -> int:
    require_repository(ctx)
    email = opts.email or ctx.git.config_value('user.email')

    activities = collect_activities(opts, ctx, email)
    prompt = build_standup_prompt(activities, opts.days)
    report = ctx.complete(prompt, "Writing stand-up report").strip()

    if opts.output:
        save_and_report(opts.output, report, "Report saved")
    display_block(report, "Stand-up")
    return 0
