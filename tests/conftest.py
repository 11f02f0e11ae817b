"""Shared fakes and fixtures. Nothing here touches the network, git or a real provider."""

import re

import pytest

from gojira.cli.context import CommandContext
from gojira.cli.utils import PromptAsker
from gojira.config import Config, ConfigManager
from gojira.errors import GitQueryError, JiraUnreachable, NoChanges, NoStagedFiles
from gojira.jira import Issue, IssueType
from gojira.llm import CompletionProvider

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakeProvider(CompletionProvider):
    """Provider that records prompts and returns a canned reply."""

    API_KEY_ENV = "FAKE_API_KEY"
    MODELS = ("fake-small", "fake-large")
    DEFAULT_MODEL = "fake-small"

    def __init__(self, reply: str = "  generated text\n"):
        super().__init__(api_key="test-key")
        self.reply = reply
        self.prompts = []
        self.models = []

    @property
    def name(self) -> str:
        return "Fake"

    def build_request(self, prompt, model):
        return {"prompt": prompt, "model": model}

    def _send(self, request):
        self.prompts.append(request["prompt"])
        self.models.append(request["model"])
        return self.reply

    def parse_response(self, response):
        return response


class FakeGit:
    """Stands in for GitAnalyzer."""

    def __init__(self, branch="main", diffs=None, is_repo=True, changed=None,
                 file_diffs=None, failing=(), has_origin=True, recent_commits=None):
        self.branch = branch
        self.diffs = diffs if diffs is not None else {}
        self.is_repo = is_repo
        self.changed = changed or []
        self.file_diffs = file_diffs or {}
        self.failing = set(failing)
        self.has_origin = has_origin
        self.recent_commits = recent_commits or []
        self.staged_calls = []
        self.ranges = []
        self.log_since_calls = []
        self.created_branches = []

    def is_git_repository(self):
        return self.is_repo

    def current_branch(self):
        if self.branch is None:
            raise GitQueryError("HEAD is detached")
        return self.branch

    def collect_diff(self, staged=True):
        self.staged_calls.append(staged)
        if not self.diffs:
            if staged:
                raise NoStagedFiles("No staged changes. Run 'git add' first.")
            raise NoChanges("No changes found in the working tree.")
        return dict(self.diffs)

    def changed_files_since(self, base):
        return list(self.changed)

    def diff_since(self, base, path):
        if path in self.failing:
            raise GitQueryError(f"cannot diff {path}")
        return self.file_diffs.get(path, "")

    def _range(self, revision_range):
        self.ranges.append(revision_range)
        if revision_range.startswith("origin/") and not self.has_origin:
            raise GitQueryError("unknown revision origin/main")

    def diff_stat(self, revision_range):
        self._range(revision_range)
        return " auth.go | 12 ++++++------\n 1 file changed"

    def log(self, revision_range, fmt=None, no_merges=True):
        self._range(revision_range)
        return "abc1234 add login endpoint\ndef5678 validate tokens"

    def log_since(self, since, author=None, fmt="%h | %s"):
        self.log_since_calls.append((since, author, fmt))
        return list(self.recent_commits)

    def config_value(self, key):
        return "dev@example.com" if key == "user.email" else ""

    def remote_url(self, remote="origin"):
        return "git@github.com:acme/shop.git"

    def author_name(self, email):
        return "Dana Dev"

    def create_branch(self, name):
        self.created_branches.append(name)


class ScriptedAsker(PromptAsker):
    """Answers questions from a fixed script."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.questions = []

    def ask(self, question):
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected question: {question}")
        return self.answers.pop(0)


class FakeJira:

    def __init__(self, issues=None, create_error=None, get_error=None, search_results=None):
        self.issues = issues or {}
        self.create_error = create_error
        self.get_error = get_error
        self.search_results = search_results or []
        self.created = []
        self.searches = []

    def get_issue(self, key):
        if self.get_error:
            raise self.get_error
        if key not in self.issues:
            raise JiraUnreachable(f"no issue {key}")
        return self.issues[key]

    def create_issue(self, issue):
        if self.create_error:
            raise self.create_error
        self.created.append(issue)
        return "PROJ-42"

    def search_issues(self, project, assignee=None, status=None, limit=10):
        self.searches.append((project, assignee, status, limit))
        return list(self.search_results)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def sample_issue():
    return Issue(
        key="PROJ-7",
        summary="Login with SSO",
        description="Users sign in through the company IdP.",
        type=IssueType.TASK,
        project_key="PROJ",
    )


@pytest.fixture
def make_ctx(tmp_path):
    """Return a factory for a CommandContext wired to fakes."""
    def _make(provider=None, git=None, asker=None, jira=None, config=None, clipboard=None):
        copies = []

        def _clipboard(text):
            copies.append(text)
            return True, ""

        ctx = CommandContext(
            config=config or Config(),
            provider=provider or FakeProvider(),
            git=git or FakeGit(),
            asker=asker or ScriptedAsker(),
            clipboard=clipboard or _clipboard,
            jira_factory=lambda cfg: jira if jira is not None else FakeJira(),
            config_manager=ConfigManager(tmp_path / "gojira.json"),
        )
        ctx.copies = copies
        return ctx
    return _make
