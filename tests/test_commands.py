"""
Command handler tests: commit, jira, dev, pr, config and the main entry point.
Handlers run against the fakes in conftest, so no git, network or provider
is touched.

Run with:
    pytest tests/test_commands.py -v
"""

import json
import os
import shutil
import subprocess

import pytest

from gojira.cli.commands.commit import run_commit
from gojira.cli.commands.config import parse_issue_types, run_config, run_config_providers, run_config_show
from gojira.cli.commands.dev import run_dev_branch, run_dev_checklist, run_dev_start
from gojira.cli.commands.jira import run_jira
from gojira.cli.commands.pr import build_pr_command, detect_pr_tool, run_pr
from gojira.cli.main import main
from gojira.cli.options import (
    CommitOptions,
    ConfigOptions,
    DevBranchOptions,
    DevChecklistOptions,
    DevStartOptions,
    JiraOptions,
    PROptions,
)
from gojira.cli.utils import StdinAsker, attempt
from gojira.config import Config
from gojira.errors import (
    Cancelled,
    ExternalToolError,
    ExternalToolMissing,
    InvalidArgument,
    JiraUnconfigured,
    JiraUnreachable,
    NoStagedFiles,
    NotAGitRepo,
)
from gojira.jira import Issue, IssueType

from conftest import FakeGit, FakeJira, FakeProvider, ScriptedAsker


# ---------------------------------------------------------------------------
# commit
# ---------------------------------------------------------------------------

class TestCommit:

    def test_end_to_end(self, make_ctx, capsys):
        provider = FakeProvider(reply="  :sparkles: feature(ABC-123-login) Add login endpoint\n\n- Add handler\n")
        git = FakeGit(branch="feature/ABC-123-login", diffs={"auth.go": "+func Login() error {"})
        ctx = make_ctx(provider=provider, git=git)

        assert run_commit(CommitOptions(), ctx) == 0

        out = capsys.readouterr().out
        assert out == ":sparkles: feature(ABC-123-login) Add login endpoint\n\n- Add handler\n"
        prompt = provider.prompts[0]
        assert "feature(ABC-123-login)" in prompt
        assert "Branch: feature/ABC-123-login\nFile: auth.go\nChanges:\n+func Login() error {" in prompt
        assert provider.models == ["fake-small"]
        assert git.staged_calls == [True]

    def test_all_uses_working_tree(self, make_ctx):
        git = FakeGit(diffs={"a.py": "+x"})
        run_commit(CommitOptions(all=True), make_ctx(git=git))
        assert git.staged_calls == [False]

    def test_hint_reaches_prompt(self, make_ctx):
        provider = FakeProvider()
        run_commit(CommitOptions(hint="fixing the login bug"), make_ctx(provider=provider, git=FakeGit(diffs={"a.py": "+x"})))
        assert '"fixing the login bug"' in provider.prompts[0]

    def test_branch_without_slash(self, make_ctx):
        provider = FakeProvider()
        run_commit(CommitOptions(), make_ctx(provider=provider, git=FakeGit(branch="main", diffs={"a.py": "+x"})))
        assert "hotfix(main)" in provider.prompts[0]

    def test_configured_model(self, make_ctx):
        provider = FakeProvider()
        ctx = make_ctx(provider=provider, git=FakeGit(diffs={"a.py": "+x"}), config=Config(ai_model="fake-large"))
        run_commit(CommitOptions(), ctx)
        assert provider.models == ["fake-large"]

    def test_not_a_repository(self, make_ctx):
        provider = FakeProvider()
        with pytest.raises(NotAGitRepo):
            run_commit(CommitOptions(), make_ctx(provider=provider, git=FakeGit(is_repo=False)))
        assert provider.prompts == []

    def test_nothing_staged(self, make_ctx):
        provider = FakeProvider()
        with pytest.raises(NoStagedFiles):
            run_commit(CommitOptions(), make_ctx(provider=provider, git=FakeGit(diffs={})))
        assert provider.prompts == []

    def test_copy(self, make_ctx, capsys):
        ctx = make_ctx(git=FakeGit(diffs={"a.py": "+x"}))
        run_commit(CommitOptions(copy=True), ctx)
        assert ctx.copies == ["generated text"]
        assert "Copied to clipboard!" in capsys.readouterr().out

    def test_copy_failure_is_only_a_warning(self, make_ctx, capsys):
        ctx = make_ctx(git=FakeGit(diffs={"a.py": "+x"}), clipboard=lambda text: (False, "no clipboard tool"))
        assert run_commit(CommitOptions(copy=True), ctx) == 0
        assert "no clipboard tool" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# jira
# ---------------------------------------------------------------------------

class TestJiraCommand:

    def test_generates_and_copies(self, make_ctx, capsys):
        provider = FakeProvider(reply="Goal: fix it\n")
        jira = FakeJira()
        ctx = make_ctx(provider=provider, jira=jira)

        assert run_jira(JiraOptions(title="Crash on save", type="bug", description="Android only"), ctx) == 0

        prompt = provider.prompts[0]
        assert "type BUG" in prompt
        assert "'Crash on save'" in prompt
        assert "Context: Android only" in prompt
        assert "Steps to reproduce:" in prompt
        assert ctx.copies == ["Goal: fix it"]
        assert jira.created == []
        assert "Goal: fix it" in capsys.readouterr().out

    @pytest.mark.parametrize("issue_type", ["Epic", "Task"])
    def test_epic_and_task_share_template(self, make_ctx, issue_type):
        provider = FakeProvider()
        run_jira(JiraOptions(title="Billing", type=issue_type), make_ctx(provider=provider))
        assert "Acceptance criteria:" in provider.prompts[0]

    def test_creates_issue_in_project(self, make_ctx, capsys):
        jira = FakeJira()
        ctx = make_ctx(jira=jira)

        assert run_jira(JiraOptions(title="Crash on save", type="Bug", project="PROJ"), ctx) == 0

        assert jira.created == [Issue(
            summary="Crash on save",
            description="generated text",
            type=IssueType.BUG,
            project_key="PROJ",
        )]
        assert "Created Jira issue PROJ-42" in capsys.readouterr().out

    def test_creation_failure_keeps_success_exit(self, make_ctx, capsys):
        ctx = make_ctx(jira=FakeJira(create_error=JiraUnreachable("connection refused")))
        assert run_jira(JiraOptions(title="Crash", project="PROJ"), ctx) == 0
        assert "Could not create the Jira issue: connection refused" in capsys.readouterr().out

    def test_unconfigured_jira_is_a_warning(self, make_ctx, capsys):
        ctx = make_ctx()

        def unconfigured(config):
            raise JiraUnconfigured("Jira URL or token not configured")

        ctx.jira_factory = unconfigured
        assert run_jira(JiraOptions(title="Crash", project="PROJ"), ctx) == 0
        assert "not configured" in capsys.readouterr().out

    @pytest.mark.parametrize("title", ["", "   "])
    def test_empty_title(self, make_ctx, title):
        provider = FakeProvider()
        with pytest.raises(InvalidArgument):
            run_jira(JiraOptions(title=title), make_ctx(provider=provider))
        assert provider.prompts == []

    def test_invalid_type(self, make_ctx):
        provider = FakeProvider()
        with pytest.raises(InvalidArgument, match="Story"):
            run_jira(JiraOptions(title="Login", type="Story"), make_ctx(provider=provider))
        assert provider.prompts == []


# ---------------------------------------------------------------------------
# dev
# ---------------------------------------------------------------------------

class TestDevBranch:

    def test_name_and_issue(self, make_ctx):
        git = FakeGit()
        ctx = make_ctx(git=git)
        assert run_dev_branch(DevBranchOptions(name="Add Login Page", issue="proj-12"), ctx) == 0
        assert git.created_branches == ["feature/PROJ-12-add-login-page"]
        assert ctx.asker.questions == []

    def test_prompts_for_missing_values(self, make_ctx):
        git = FakeGit()
        asker = ScriptedAsker(["Fix crash", ""])
        run_dev_branch(DevBranchOptions(prefix="fix"), make_ctx(git=git, asker=asker))
        assert git.created_branches == ["fix/fix-crash"]
        assert len(asker.questions) == 2

    def test_hyphenated_name_skips_issue_question(self, make_ctx):
        git = FakeGit()
        asker = ScriptedAsker()
        run_dev_branch(DevBranchOptions(name="ABC-1-fix-crash"), make_ctx(git=git, asker=asker))
        assert git.created_branches == ["feature/abc-1-fix-crash"]
        assert asker.questions == []

    def test_empty_name(self, make_ctx):
        with pytest.raises(InvalidArgument):
            run_dev_branch(DevBranchOptions(), make_ctx(asker=ScriptedAsker([" "])))

    def test_outside_repository(self, make_ctx):
        with pytest.raises(NotAGitRepo):
            run_dev_branch(DevBranchOptions(name="x"), make_ctx(git=FakeGit(is_repo=False)))


class TestDevStart:

    def test_accept_suggested_branch(self, make_ctx, sample_issue, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        git = FakeGit()
        provider = FakeProvider(reply="- [ ] Set up SSO sandbox\n")
        ctx = make_ctx(git=git, provider=provider, jira=FakeJira(issues={"PROJ-7": sample_issue}),
                       asker=ScriptedAsker(["y"]))

        assert run_dev_start(DevStartOptions(issue="proj-7"), ctx) == 0

        assert git.created_branches == ["feature/PROJ-7-login-with-sso"]
        assert (tmp_path / "checklist-PROJ-7.md").read_text() == "- [ ] Set up SSO sandbox"
        assert "'PROJ-7'" in provider.prompts[0]
        assert "Users sign in through the company IdP." in provider.prompts[0]

    def test_bug_gets_fix_prefix(self, make_ctx, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        git = FakeGit()
        bug = Issue(key="PROJ-8", summary="Null pointer on logout", type=IssueType.BUG)
        ctx = make_ctx(git=git, jira=FakeJira(issues={"PROJ-8": bug}), asker=ScriptedAsker([""]))
        run_dev_start(DevStartOptions(issue="PROJ-8", checklist=False), ctx)
        assert git.created_branches == ["fix/PROJ-8-null-pointer-on-logout"]

    def test_decline_suggestion(self, make_ctx, sample_issue):
        git = FakeGit()
        ctx = make_ctx(git=git, jira=FakeJira(issues={"PROJ-7": sample_issue}),
                       asker=ScriptedAsker(["n", "SSO callback"]))
        run_dev_start(DevStartOptions(issue="PROJ-7", checklist=False), ctx)
        assert git.created_branches == ["feature/PROJ-7-sso-callback"]

    def test_without_checklist(self, make_ctx, sample_issue, capsys):
        provider = FakeProvider()
        ctx = make_ctx(provider=provider, jira=FakeJira(issues={"PROJ-7": sample_issue}), asker=ScriptedAsker([""]))
        run_dev_start(DevStartOptions(issue="PROJ-7", checklist=False), ctx)
        assert provider.prompts == []
        assert "gojira dev checklist -i PROJ-7" in capsys.readouterr().out

    def test_fetch_failure_declined(self, make_ctx):
        git = FakeGit()
        ctx = make_ctx(git=git, jira=FakeJira(get_error=JiraUnreachable("down")), asker=ScriptedAsker(["n"]))
        with pytest.raises(Cancelled):
            run_dev_start(DevStartOptions(issue="PROJ-9"), ctx)
        assert git.created_branches == []

    def test_fetch_failure_default_is_no(self, make_ctx):
        ctx = make_ctx(jira=FakeJira(get_error=JiraUnreachable("down")), asker=ScriptedAsker([""]))
        with pytest.raises(Cancelled):
            run_dev_start(DevStartOptions(issue="PROJ-9"), ctx)

    def test_fetch_failure_continue(self, make_ctx):
        git = FakeGit()
        provider = FakeProvider()
        ctx = make_ctx(git=git, provider=provider, jira=FakeJira(get_error=JiraUnreachable("down")),
                       asker=ScriptedAsker(["yes", "quick fix"]))
        assert run_dev_start(DevStartOptions(issue="proj-9"), ctx) == 0
        assert git.created_branches == ["feature/PROJ-9-quick-fix"]
        assert provider.prompts == []


class TestDevChecklist:

    def test_key_from_branch(self, make_ctx, sample_issue, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        asker = ScriptedAsker()
        ctx = make_ctx(git=FakeGit(branch="feature/proj-7-sso"), jira=FakeJira(issues={"PROJ-7": sample_issue}),
                       asker=asker)
        assert run_dev_checklist(DevChecklistOptions(), ctx) == 0
        assert (tmp_path / "checklist-PROJ-7.md").exists()
        assert asker.questions == []

    @pytest.mark.parametrize("branch", ["main", None])
    def test_asks_when_branch_has_no_key(self, make_ctx, sample_issue, tmp_path, monkeypatch, branch):
        monkeypatch.chdir(tmp_path)
        asker = ScriptedAsker(["proj-7"])
        ctx = make_ctx(git=FakeGit(branch=branch), jira=FakeJira(issues={"PROJ-7": sample_issue}), asker=asker)
        run_dev_checklist(DevChecklistOptions(), ctx)
        assert len(asker.questions) == 1
        assert (tmp_path / "checklist-PROJ-7.md").exists()

    def test_fetch_failure_propagates(self, make_ctx):
        provider = FakeProvider()
        ctx = make_ctx(provider=provider, jira=FakeJira(get_error=JiraUnreachable("down")))
        with pytest.raises(JiraUnreachable):
            run_dev_checklist(DevChecklistOptions(issue="PROJ-1"), ctx)
        assert provider.prompts == []


# ---------------------------------------------------------------------------
# pr
# ---------------------------------------------------------------------------

class TestPRCommand:

    def test_detect_pr_tool(self):
        assert detect_pr_tool(lambda tool: "/usr/bin/gh") == "gh"
        assert detect_pr_tool(lambda tool: "/usr/bin/glab" if tool == "glab" else None) == "glab"
        assert detect_pr_tool(lambda tool: None) is None

    def test_gh_command(self):
        opts = PROptions(remote="acme/shop", base="main", draft=True)
        assert build_pr_command("gh", "feat: login", "/tmp/body.md", opts, "feature/x") == [
            "gh", "pr", "create", "--title", "feat: login", "--body-file", "/tmp/body.md",
            "--repo", "acme/shop", "--base", "main", "--head", "feature/x", "--draft",
        ]

    def test_glab_command(self):
        opts = PROptions(base="develop")
        assert build_pr_command("glab", "fix: crash", "/tmp/body.md", opts, "fix/y") == [
            "glab", "mr", "create", "--title", "fix: crash", "--description", "@/tmp/body.md",
            "--target-branch", "develop",
        ]

    def test_dry_run(self, make_ctx, monkeypatch, capsys, strip_ansi):
        monkeypatch.setattr(shutil, "which", lambda tool: pytest.fail("tool lookup in dry run"))
        provider = FakeProvider(reply="fix: [ABC-9] Guard against nil user\n")
        git = FakeGit(branch="fix/ABC-9-null-check")
        ctx = make_ctx(provider=provider, git=git)

        assert run_pr(PROptions(dry_run=True), ctx) == 0

        title_prompt, description_prompt = provider.prompts
        assert "'fix'" in title_prompt
        assert "ABC-9" in title_prompt
        assert "abc1234 add login endpoint" in title_prompt
        assert "auth.go | 12" in description_prompt
        assert all(rng == "origin/main..fix/ABC-9-null-check" for rng in git.ranges)
        assert "Title: fix: [ABC-9] Guard against nil user" in strip_ansi(capsys.readouterr().out)

    def test_falls_back_to_local_base(self, make_ctx):
        git = FakeGit(branch="feature/x", has_origin=False)
        run_pr(PROptions(dry_run=True, base="develop"), make_ctx(git=git))
        assert "origin/develop..feature/x" in git.ranges
        assert "develop..feature/x" in git.ranges

    def test_title_capped(self, make_ctx, capsys, strip_ansi):
        provider = FakeProvider(reply="t" * 100)
        run_pr(PROptions(dry_run=True, description="Body"), make_ctx(provider=provider))
        out = strip_ansi(capsys.readouterr().out)
        assert f"Title: {'t' * 72}\n" in out
        assert len(provider.prompts) == 1

    def test_no_tool(self, make_ctx, monkeypatch):
        monkeypatch.setattr(shutil, "which", lambda tool: None)
        provider = FakeProvider()
        with pytest.raises(ExternalToolMissing):
            run_pr(PROptions(), make_ctx(provider=provider))
        assert provider.prompts == []

    def test_creates_with_gh(self, make_ctx, monkeypatch):
        monkeypatch.setattr(shutil, "which", lambda tool: "/usr/bin/gh" if tool == "gh" else None)
        seen = {}

        def fake_run(cmd, **kwargs):
            seen["cmd"] = cmd
            body_file = cmd[cmd.index("--body-file") + 1]
            seen["body_file"] = body_file
            with open(body_file, encoding="utf-8") as f:
                seen["body"] = f.read()
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(subprocess, "run", fake_run)
        opts = PROptions(title="feat: login", description="## Summary", draft=True)

        assert run_pr(opts, make_ctx(git=FakeGit(branch="feature/login"))) == 0

        assert seen["cmd"][:5] == ["gh", "pr", "create", "--title", "feat: login"]
        assert seen["cmd"][-1] == "--draft"
        assert seen["body"] == "## Summary"
        assert not os.path.exists(seen["body_file"])

    def test_tool_failure(self, make_ctx, monkeypatch):
        monkeypatch.setattr(shutil, "which", lambda tool: "/usr/bin/glab" if tool == "glab" else None)
        monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1))
        with pytest.raises(ExternalToolError, match="glab exited with status 1"):
            run_pr(PROptions(title="t", description="d"), make_ctx())


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------

class TestConfigCommand:

    def test_parse_issue_types(self):
        assert parse_issue_types(["bug=10004", " Epic = 7 "]) == {"Bug": "10004", "Epic": "7"}

    @pytest.mark.parametrize("pair", ["Bug", "Bug=", "=10", "Story=10", "Bug=abc"])
    def test_parse_issue_types_invalid(self, pair):
        with pytest.raises(InvalidArgument):
            parse_issue_types([pair])

    def test_update_persists_raw_file(self, make_ctx, tmp_path, capsys):
        path = tmp_path / "gojira.json"
        path.write_text(json.dumps({"ai_provider": "openai", "jira_token": "old"}))
        # The in-memory config carries a one-off override that must not be saved
        ctx = make_ctx(config=Config(ai_provider="openai", ai_model="one-off-model"))

        opts = ConfigOptions(provider="Anthropic", jira_url="https://jira.example.com/",
                             jira_project="web", issue_types=["Bug=10004"])
        assert run_config(opts, ctx) == 0

        saved = json.loads(path.read_text())
        assert saved["ai_provider"] == "anthropic"
        assert saved["ai_model"] == ""
        assert saved["jira_url"] == "https://jira.example.com"
        assert saved["jira_token"] == "old"
        assert saved["default_jira"] == "WEB"
        assert saved["jira_issue_types"] == {"Epic": "10000", "Task": "10001", "Bug": "10004"}
        assert "Saved" in capsys.readouterr().out

    def test_unknown_provider(self, make_ctx, tmp_path):
        with pytest.raises(InvalidArgument):
            run_config(ConfigOptions(provider="gemini"), make_ctx())
        assert not (tmp_path / "gojira.json").exists()

    def test_no_flags_shows_settings(self, make_ctx, capsys, strip_ansi):
        config = Config(jira_url="https://jira.example.com", jira_token="super-secret", default_jira="WEB")
        assert run_config(ConfigOptions(), make_ctx(config=config)) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert "provider:   Fake" in out
        assert "model:      fake-small (default)" in out
        assert "project:    WEB" in out
        assert "token:      set" in out
        assert "super-secret" not in out

    def test_show(self, make_ctx, capsys, strip_ansi):
        run_config_show(ConfigOptions(), make_ctx(config=Config(ai_model="fake-large")))
        out = strip_ansi(capsys.readouterr().out)
        assert "model:      fake-large\n" in out
        assert "url:        not set" in out

    def test_providers(self, make_ctx, capsys, strip_ansi):
        run_config_providers(ConfigOptions(), make_ctx())
        out = strip_ansi(capsys.readouterr().out)
        assert "openai OpenAI (default)" in out
        assert "anthropic Anthropic" in out
        assert "- gpt-4o (default)" in out
        assert "- claude-3-haiku-20240307" in out


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------

class TestUtilities:

    def test_attempt_captures_gojira_errors(self):
        def boom():
            raise JiraUnreachable("down")
        outcome = attempt(boom)
        assert not outcome.ok
        assert isinstance(outcome.error, JiraUnreachable)

    def test_attempt_lets_other_errors_through(self):
        def boom():
            raise ValueError("bug")
        with pytest.raises(ValueError):
            attempt(boom)

    def test_attempt_value(self):
        outcome = attempt(lambda a, b=0: a + b, 2, b=3)
        assert outcome.ok and outcome.value == 5

    def test_stdin_asker_eof(self, monkeypatch):
        def eof(prompt):
            raise EOFError
        monkeypatch.setattr("builtins.input", eof)
        with pytest.raises(Cancelled):
            StdinAsker().ask("Branch name: ")

    @pytest.mark.parametrize("answer, default, expected", [
        ("", True, True),
        ("", False, False),
        ("Y", False, True),
        ("yes", False, True),
        ("no", True, False),
        ("maybe", True, False),
    ])
    def test_confirm(self, answer, default, expected):
        assert ScriptedAsker([answer]).confirm("Continue?", default=default) is expected


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run main() with its own config file, no .env and no provider overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GOJIRA_CONFIG", str(tmp_path / "config.json"))
    for name in ("GOJIRA_PROVIDER", "GOJIRA_MODEL", "_ARGCOMPLETE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


class TestMain:

    def test_no_command(self, isolated, capsys):
        assert main([]) == 2
        assert "usage: gojira" in capsys.readouterr().out

    @pytest.mark.parametrize("command", ["dev", "generate"])
    def test_missing_subcommand(self, isolated, capsys, command):
        assert main([command]) == 2
        assert f"usage: gojira {command}" in capsys.readouterr().out

    def test_error_exit_code(self, isolated, capsys):
        assert main(["jira", "-t", "  "]) == 1
        assert "title cannot be empty" in capsys.readouterr().err

    def test_unconfigured_jira(self, isolated, capsys):
        assert main(["kanban", "-p", "WEB"]) == 1
        assert "not configured" in capsys.readouterr().err

    def test_config_update(self, isolated):
        assert main(["config", "-p", "anthropic", "-r", "web"]) == 0
        saved = json.loads((isolated / "config.json").read_text())
        assert saved["ai_provider"] == "anthropic"
        assert saved["default_jira"] == "WEB"

    def test_global_override_is_not_persisted(self, isolated, capsys, strip_ansi):
        (isolated / "config.json").write_text(json.dumps({"ai_provider": "openai"}))
        assert main(["-P", "anthropic", "config", "show"]) == 0
        assert "provider:   Anthropic" in strip_ansi(capsys.readouterr().out)
        assert json.loads((isolated / "config.json").read_text()) == {"ai_provider": "openai"}

    def test_corrupt_config(self, isolated, capsys):
        (isolated / "config.json").write_text("{not json")
        assert main(["config", "show"]) == 1
        assert "not valid JSON" in capsys.readouterr().err

    def test_install_completion(self, isolated, monkeypatch, capsys):
        monkeypatch.setenv("SHELL", "/bin/zsh")
        assert main(["install-completion"]) == 0
        assert "register-python-argcomplete gojira" in capsys.readouterr().out

    def test_interrupt(self, isolated, monkeypatch, capsys):
        from gojira.cli import commands

        def interrupted(opts, ctx):
            raise KeyboardInterrupt

        monkeypatch.setitem(commands.HANDLERS, ("config", "providers"), (ConfigOptions, interrupted))
        assert main(["config", "providers"]) == 130
