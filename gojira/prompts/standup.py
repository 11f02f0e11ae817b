"""Stand-up report prompt."""

from dataclasses import dataclass, field


@dataclass
class Activities:
    """Everything collected about recent work for a stand-up."""
    commits: list[str] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)
    pull_requests: list[str] = field(default_factory=list)
    user_name: str = ""
    repo_name: str = ""
    works_in_jira: bool = False
    has_issues: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.commits or self.issues or self.pull_requests)


def _bullet_section(title: str, lines: list[str]) -> str:
    if not lines:
        return ""
    return f"## {title}:\n\n" + "\n".join(f"- {line}" for line in lines)


def build_standup_prompt(activities: Activities, days: int) -> str:
    header = (
        "Write a report for a daily stand-up meeting based on the activities below. "
        "Use the standard stand-up format:\n\n"
        f"1. What was done (last {days} days)\n"
        "2. What will be done today\n"
        "3. Are there any blockers?"
    )

    about = []
    if activities.user_name:
        about.append(f"User: {activities.user_name}")
    if activities.repo_name:
        about.append(f"Project: {activities.repo_name}")

    closing = [
        "Based on this information, write a concise and informative stand-up report. "
        "Infer current and planned tasks from the commits and issues."
    ]
    if activities.works_in_jira:
        closing.append("The user works with Jira, so reference Jira tickets when the commits mention them.")
    if activities.is_empty:
        closing.append("There is little information available, so make reasonable assumptions from the project name.")
    closing.append("Format the report cleanly and professionally. Use bullet lists for readability.")

    sections = [
        header,
        "\n".join(about),
        _bullet_section("Recent commits", activities.commits),
        _bullet_section("Open issues", activities.issues),
        _bullet_section("Open pull requests", activities.pull_requests),
        " ".join(closing),
    ]
    return "\n\n".join(filter(None, sections))
