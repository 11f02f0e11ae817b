"""dev: branch creation and implementation checklists."""

import logging

from gojira.errors import Cancelled, GitQueryError, GojiraError, InvalidArgument
from gojira.git import branch_prefix_for, extract_ticket_id, format_branch_name, slugify
from gojira.jira import Issue
from gojira.output import bold, colorize_issue_type, dim, display_block, print_success, print_warning
from gojira.prompts import build_checklist_prompt

from gojira.cli.commands.commit import require_repository
from gojira.cli.context import CommandContext
from gojira.cli.options import DevBranchOptions, DevChecklistOptions, DevStartOptions
from gojira.cli.utils import save_and_report

logger = logging.getLogger(__name__)


def _ask_required(ctx: CommandContext, question: str, what: str) -> str:
    answer = ctx.asker.ask(question).strip()
    if not answer:
        raise InvalidArgument(f"{what} cannot be empty")
    return answer


def _create_branch(ctx: CommandContext, name: str) -> str:
    ctx.git.create_branch(name)
    print_success(f"Switched to new branch {bold(name)}")
    return name


def run_dev_branch(opts: DevBranchOptions, ctx: CommandContext) -> int:
    require_repository(ctx)
    name = opts.name.strip() or _ask_required(ctx, "Branch name: ", "Branch name")

    issue_key = opts.issue.strip()
    if not issue_key and '-' not in name:
        issue_key = ctx.asker.ask("Jira issue key (Enter to skip): ").strip()

    _create_branch(ctx, format_branch_name(name, opts.prefix, issue_key or None))
    return 0


def write_checklist(ctx: CommandContext, issue: Issue) -> str:
    prompt = build_checklist_prompt(issue)
    checklist = ctx.complete(prompt, f"Writing checklist for {issue.key}").strip()
    save_and_report(f"checklist-{issue.key}.md", checklist, "Checklist saved")
    display_block(checklist, f"Checklist {issue.key}")
    return checklist


def run_dev_start(opts: DevStartOptions, ctx: CommandContext) -> int:
    require_repository(ctx)
    key = (opts.issue.strip() or _ask_required(ctx, "Jira issue key: ", "Issue key")).upper()

    issue = None
    try:
        issue = ctx.jira().get_issue(key)
    except GojiraError as e:
        print_warning(f"Could not fetch issue {key}: {e}")
        if not ctx.asker.confirm("Continue without the issue details?", default=False):
            raise Cancelled("Cancelled.") from e

    if issue:
        print(f"{bold(issue.key)} [{colorize_issue_type(issue.type.value)}] {issue.summary}")
        suggested = f"{branch_prefix_for(issue.type)}/{key}-{slugify(issue.summary)}"
        if ctx.asker.confirm(f"Create branch {suggested}?", default=True):
            branch = suggested
        else:
            name = _ask_required(ctx, "Branch name: ", "Branch name")
            branch = format_branch_name(name, branch_prefix_for(issue.type), key)
    else:
        name = _ask_required(ctx, "Branch name: ", "Branch name")
        branch = format_branch_name(name, 'feature', key)

    _create_branch(ctx, branch)

    if issue and opts.checklist:
        write_checklist(ctx, issue)
    elif issue:
        print(dim(f"Run 'gojira dev checklist -i {key}' for a checklist."))
    return 0


def run_dev_checklist(opts: DevChecklistOptions, ctx: CommandContext) -> int:
    key = opts.issue.strip()
    if not key:
        try:
            key = extract_ticket_id(ctx.git.current_branch())
        except GitQueryError as e:
            logger.debug("No branch to take the issue key from: %s", e)
    if not key:
        key = _ask_required(ctx, "Jira issue key: ", "Issue key")
    key = key.upper()

    issue = ctx.jira().get_issue(key)
    write_checklist(ctx, issue)
    return 0
