"""Branch-name conventions: parsing, slugs and ticket IDs."""

import re

from gojira.jira.models import IssueType

MAX_SLUG_LENGTH = 50

PR_TYPE_PREFIXES = {
    'fix/': 'fix',
    'bugfix/': 'fix',
    'hotfix/': 'fix',
    'docs/': 'docs',
    'chore/': 'chore',
}


def parse_branch_for_commit_type(branch: str) -> tuple[str, str]:
    """Split 'type/context' branches. Without a slash: ('hotfix', branch)."""
    parts = branch.split('/')
    if len(parts) < 2:
        return 'hotfix', branch
    return parts[0], '/'.join(parts[1:])


def slugify(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    slug = text.lower().replace(' ', '-')
    slug = re.sub(r'[^a-z0-9-]', '', slug)
    return slug[:max_length]


def format_branch_name(name: str, prefix: str = 'feature', issue_key: str | None = None) -> str:
    formatted = slugify(name.strip())
    if issue_key:
        return f"{prefix}/{issue_key.upper()}-{formatted}"
    return f"{prefix}/{formatted}"


def branch_prefix_for(issue_type: IssueType) -> str:
    if issue_type == IssueType.EPIC:
        return 'epic'
    if issue_type == IssueType.BUG:
        return 'fix'
    return 'feature'


def extract_ticket_id(branch: str) -> str:
    """'feature/abc-123-login' -> 'ABC-123'. Empty when nothing looks like a ticket."""
    parts = branch.split('/')
    if len(parts) < 2:
        return ''
    pieces = parts[1].split('-')
    if len(pieces) < 2:
        return ''
    project = pieces[0].upper()
    if 2 <= len(project) <= 5 and pieces[1].isdigit():
        return f"{project}-{pieces[1]}"
    return ''


def infer_pr_type(branch: str) -> str:
    for prefix, pr_type in PR_TYPE_PREFIXES.items():
        if branch.startswith(prefix):
            return pr_type
    return 'feature'
