"""Kanban board: bucket Jira issues into columns and render them."""

import textwrap

from gojira import KANBAN_STATUSES
from gojira.jira import Issue
from gojira.output import bold, colorize_issue_type, colorize_status, dim, terminal_width

MIN_COLUMN_WIDTH = 20
MAX_COLUMN_WIDTH = 40
COLUMN_GAP = " │ "


def bucket_issues(issues: list[Issue], limit: int = 10) -> dict[str, list[Issue]]:
    """Place issues into the fixed columns.

    An issue whose status names a column (case-insensitive) goes there. The
    rest are dealt round-robin, so with no statuses at all column i receives
    issues i, i+4, i+8 and so on. No column holds more than `limit` issues.
    """
    columns: dict[str, list[Issue]] = {status: [] for status in KANBAN_STATUSES}
    by_name = {status.lower(): status for status in KANBAN_STATUSES}

    unplaced = []
    for issue in issues:
        column = by_name.get(issue.status.strip().lower())
        if column:
            columns[column].append(issue)
        else:
            unplaced.append(issue)

    for idx, issue in enumerate(unplaced):
        columns[KANBAN_STATUSES[idx % len(KANBAN_STATUSES)]].append(issue)

    if limit > 0:
        columns = {status: items[:limit] for status, items in columns.items()}
    return columns


def column_width(total_width: int | None = None) -> int:
    total = total_width if total_width is not None else terminal_width()
    return max(MIN_COLUMN_WIDTH, min(MAX_COLUMN_WIDTH, total // len(KANBAN_STATUSES)))


def _card_lines(issue: Issue, width: int) -> list[str]:
    header = f"{issue.key} [{issue.type.value}]"
    lines = [header[:width]]
    lines.extend(textwrap.wrap(issue.summary, width=width) or [""])
    return lines


def _pad(text: str, plain: str, width: int) -> str:
    return text + " " * max(width - len(plain), 0)


def render_board(columns: dict[str, list[Issue]], width: int | None = None) -> str:
    """Fixed-width, ANSI-colored board with one column per status."""
    width = width or column_width()
    statuses = list(columns)

    cells: list[list[tuple[str, str]]] = []
    for status in statuses:
        cell = []
        for issue in columns[status]:
            for idx, line in enumerate(_card_lines(issue, width)):
                if idx == 0:
                    styled = line.replace(issue.type.value, colorize_issue_type(issue.type.value), 1)
                    cell.append((bold(styled), line))
                else:
                    cell.append((line, line))
            cell.append(("", ""))
        if not cell:
            cell.append((dim("(empty)"), "(empty)"))
        cells.append(cell)

    header = COLUMN_GAP.join(
        _pad(colorize_status(f"{status} ({len(columns[status])})"), f"{status} ({len(columns[status])})", width)
        for status in statuses
    )
    separator = dim(COLUMN_GAP.replace(" ", "─").join("─" * width for _ in statuses))

    rows = [header, separator]
    height = max(len(cell) for cell in cells)
    for row in range(height):
        parts = []
        for cell in cells:
            styled, plain = cell[row] if row < len(cell) else ("", "")
            parts.append(_pad(styled, plain, width))
        rows.append(COLUMN_GAP.join(parts).rstrip())
    return "\n".join(rows)


def render_plain(columns: dict[str, list[Issue]]) -> str:
    sections = []
    for status, issues in columns.items():
        lines = [f"=== {status} ==="]
        if not issues:
            lines.append("(empty)")
        for issue in issues:
            lines.append(f"{issue.key} [{issue.type.value}] {issue.summary}")
        sections.append("\n".join(lines))
    return "\n\n".join(sections)
