"""Commit message prompt."""

from gojira.git.branch import parse_branch_for_commit_type


def build_commit_prompt(diffs: dict[str, str], branch: str, hint: str | None = None) -> str:
    """Emoji-prefixed conventional commit prompt for the given file diffs."""
    commit_type, context = parse_branch_for_commit_type(branch)

    sections = [
        _role_section(commit_type, context),
        _hint_section(hint),
        _changes_section(diffs, branch),
    ]
    return "\n\n".join(filter(None, sections))


def _role_section(commit_type: str, context: str) -> str:
    return f"""You are an expert at writing git commit messages. Analyze the git diffs below and, considering the current branch and Git Flow conventions, write ONE commit message in this format, with no introduction or explanation:

:gitmoji: {commit_type}({context}) Short summary of the change

- Item 1: brief, clear description of what was changed or added.
- Item 2: brief, clear description of another change or improvement.
- ... (add as many items as the changes need).

Make sure that:
- The title starts with a gitmoji that fits the commit type or its context.
- Git Flow and the project's commit conventions take priority.
- The title is objective and captures the essence of the changes.
- Items mention new files (if any) and what they are for.
- The message is clear and concise.

Example:

:recycle: refactor(core) Split project structure into modules

- Created new files to separate concerns and improve organization.
- Introduced utility and service layers.
- Updated the main entry point to use the new structure."""


def _hint_section(hint: str | None) -> str:
    if not hint:
        return ""
    return f"""<context>
The developer provided this context about the changes:
"{hint}"
</context>"""


def _changes_section(diffs: dict[str, str], branch: str) -> str:
    parts = ["<changes>"]
    for path, diff in diffs.items():
        parts.append(f"Branch: {branch}\nFile: {path}\nChanges:\n{diff}")
    parts.append("</changes>")
    return "\n\n".join(parts)
