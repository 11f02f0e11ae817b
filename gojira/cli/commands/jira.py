"""jira: generate an issue description and optionally create the issue."""

from gojira.errors import InvalidArgument
from gojira.jira import Issue, IssueType
from gojira.output import display_block, print_success, print_warning
from gojira.prompts import build_issue_prompt

from gojira.cli.context import CommandContext
from gojira.cli.options import JiraOptions
from gojira.cli.utils import attempt, report_copy


def _create_issue(ctx: CommandContext, issue: Issue) -> str:
    return ctx.jira().create_issue(issue)


def run_jira(opts: JiraOptions, ctx: CommandContext) -> int:
    issue_type = IssueType.from_name(opts.type)
    title = opts.title.strip()
    if not title:
        raise InvalidArgument("The issue title cannot be empty")

    prompt = build_issue_prompt(title, issue_type, opts.description)
    description = ctx.complete(prompt, "Writing issue description").strip()

    display_block(description, "Generated description")
    report_copy(ctx.clipboard, description)

    if opts.project:
        issue = Issue(summary=title, description=description, type=issue_type, project_key=opts.project)
        outcome = attempt(_create_issue, ctx, issue)
        if outcome.ok:
            print_success(f"Created Jira issue {outcome.value}")
        else:
            print_warning(f"Could not create the Jira issue: {outcome.error}")
    return 0
