"""Per-command options, built from the parsed argparse namespace."""

import argparse
from dataclasses import dataclass, field


@dataclass
class CommitOptions:
    all: bool = False
    hint: str | None = None
    copy: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'CommitOptions':
        return cls(all=args.all, hint=args.hint, copy=args.copy)


@dataclass
class JiraOptions:
    title: str
    type: str = "Task"
    description: str = ""
    project: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'JiraOptions':
        return cls(
            title=args.title or "",
            type=args.type,
            description=args.description or "",
            project=args.project or "",
        )


@dataclass
class DevBranchOptions:
    name: str = ""
    prefix: str = "feature"
    issue: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'DevBranchOptions':
        return cls(name=args.name or "", prefix=args.prefix, issue=args.issue or "")


@dataclass
class DevStartOptions:
    issue: str = ""
    checklist: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'DevStartOptions':
        return cls(issue=args.issue or "", checklist=not args.no_checklist)


@dataclass
class DevChecklistOptions:
    issue: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'DevChecklistOptions':
        return cls(issue=args.issue or "")


@dataclass
class PROptions:
    title: str = ""
    description: str = ""
    branch: str = ""
    remote: str = ""
    base: str = "main"
    draft: bool = False
    dry_run: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'PROptions':
        return cls(
            title=args.title or "",
            description=args.description or "",
            branch=args.branch or "",
            remote=args.remote or "",
            base=args.base,
            draft=args.draft,
            dry_run=args.dry_run,
        )


@dataclass
class StandupOptions:
    days: int = 1
    email: str = ""
    team: bool = False
    issues_only: bool = False
    output: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'StandupOptions':
        return cls(
            days=args.days,
            email=args.email or "",
            team=args.team,
            issues_only=args.issues,
            output=args.output or "",
        )


@dataclass
class SummaryOptions:
    base: str = "HEAD~10"
    format: str = "markdown"
    save: bool = False
    output: str = "changes-summary.md"
    max_files: int = 20
    include_code: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'SummaryOptions':
        return cls(
            base=args.base,
            format=args.format,
            save=args.save,
            output=args.output,
            max_files=args.max,
            include_code=args.code,
        )


@dataclass
class ExplainOptions:
    file: str
    start: int = 0
    end: int = 0
    output: str = ""
    level: str = "intermediate"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'ExplainOptions':
        return cls(
            file=args.file,
            start=args.start,
            end=args.end,
            output=args.output or "",
            level=args.level,
        )


@dataclass
class TestGenOptions:
    __test__ = False

    source: str
    output: str = ""
    framework: str = ""
    coverage: str = "high"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'TestGenOptions':
        return cls(
            source=args.source,
            output=args.output or "",
            framework=args.framework or "",
            coverage=args.coverage,
        )


@dataclass
class ReadmeOptions:
    output: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'ReadmeOptions':
        return cls(output=args.output or "")


@dataclass
class AnalysisOptions:
    root: str = "."

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'AnalysisOptions':
        return cls(root=args.root)


@dataclass
class KanbanOptions:
    project: str = ""
    user: str = ""
    status: str = ""
    limit: int = 10
    format: str = "color"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'KanbanOptions':
        return cls(
            project=args.project or "",
            user=args.user or "",
            status=args.status or "",
            limit=args.limit,
            format=args.format,
        )


@dataclass
class ConfigOptions:
    provider: str = ""
    model: str = ""
    jira_url: str = ""
    jira_token: str = ""
    jira_project: str = ""
    issue_types: list[str] = field(default_factory=list)

    @property
    def has_updates(self) -> bool:
        return any((self.provider, self.model, self.jira_url, self.jira_token,
                    self.jira_project, self.issue_types))

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'ConfigOptions':
        return cls(
            provider=getattr(args, 'set_provider', None) or "",
            model=getattr(args, 'set_model', None) or "",
            jira_url=getattr(args, 'jira_url', None) or "",
            jira_token=getattr(args, 'jira_token', None) or "",
            jira_project=getattr(args, 'jira_project', None) or "",
            issue_types=list(getattr(args, 'issue_type', None) or []),
        )
