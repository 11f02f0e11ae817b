"""Prompts for Jira issue descriptions and implementation checklists."""

from gojira.jira.models import Issue, IssueType

TASK_TEMPLATE = """\
Goal:
How:
Acceptance criteria:
Tests:
Notes for the infrastructure team:
Other notes:"""

BUG_TEMPLATE = """\
Summary

Bug title:
Bug ID:
Date found:
Customer:
Ticket author:

Description:
Steps to reproduce:
Expected behavior:
Actual behavior:
Screenshots:

Environment:
Operating system:
Browser:
App version:
Device:

Notes for the infrastructure team:

Other notes:"""

# Epic and Task share a template
ISSUE_TEMPLATES: dict[IssueType, str] = {
    IssueType.EPIC: TASK_TEMPLATE,
    IssueType.TASK: TASK_TEMPLATE,
    IssueType.BUG: BUG_TEMPLATE,
}


def build_issue_prompt(title: str, issue_type: IssueType, description: str = "") -> str:
    brief = f"Context: {description}\n\n" if description else ""
    return (
        f"Write a detailed description for a Jira issue of type {issue_type.value.upper()} "
        f"titled '{title}'.\n\n"
        f"{brief}"
        f"Follow this template (the tests and infrastructure sections are optional):\n\n"
        f"{ISSUE_TEMPLATES[issue_type]}"
    )


def build_checklist_prompt(issue: Issue) -> str:
    return f"""Create a detailed checklist for issue '{issue.key}' titled '{issue.summary}'.

Issue description:
{issue.description or "(no description)"}

The checklist must cover:
1. Environment setup
2. Implementing the solution
3. Tests to run
4. Code review
5. Documentation

Format it as a Markdown task list with checkboxes, for example:
- [ ] Task 1
- [ ] Task 2
   - [ ] Subtask 2.1"""
