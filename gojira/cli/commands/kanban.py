"""kanban: Jira issues as a four-column board."""

from gojira.errors import InvalidArgument
from gojira.kanban import bucket_issues, column_width, render_board, render_plain

from gojira.cli.context import CommandContext
from gojira.cli.options import KanbanOptions


def run_kanban(opts: KanbanOptions, ctx: CommandContext) -> int:
    client = ctx.jira()
    project = opts.project or ctx.config.default_jira
    if not project:
        raise InvalidArgument("No Jira project given. Use --project or 'gojira config --jira-project KEY'")

    issues = client.search_issues(project, assignee=opts.user or None, status=opts.status or None, limit=opts.limit)
    columns = bucket_issues(issues, opts.limit)

    if opts.format == 'plain':
        print(render_plain(columns))
    else:
        print(render_board(columns, column_width()))
    return 0
