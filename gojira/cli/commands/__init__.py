"""Command handlers, keyed by (command, subcommand)."""

from gojira.cli import options
from gojira.cli.commands.commit import run_commit
from gojira.cli.commands.config import run_config, run_config_providers, run_config_show
from gojira.cli.commands.dev import run_dev_branch, run_dev_checklist, run_dev_start
from gojira.cli.commands.explain import run_explain
from gojira.cli.commands.generate import run_analysis, run_readme
from gojira.cli.commands.jira import run_jira
from gojira.cli.commands.kanban import run_kanban
from gojira.cli.commands.pr import run_pr
from gojira.cli.commands.standup import run_standup
from gojira.cli.commands.summary import run_summary
from gojira.cli.commands.testgen import run_test_gen

HANDLERS = {
    ('commit', None): (options.CommitOptions, run_commit),
    ('config', None): (options.ConfigOptions, run_config),
    ('config', 'show'): (options.ConfigOptions, run_config_show),
    ('config', 'providers'): (options.ConfigOptions, run_config_providers),
    ('dev', 'branch'): (options.DevBranchOptions, run_dev_branch),
    ('dev', 'start'): (options.DevStartOptions, run_dev_start),
    ('dev', 'checklist'): (options.DevChecklistOptions, run_dev_checklist),
    ('explain', None): (options.ExplainOptions, run_explain),
    ('generate', 'readme'): (options.ReadmeOptions, run_readme),
    ('generate', 'analysis'): (options.AnalysisOptions, run_analysis),
    ('jira', None): (options.JiraOptions, run_jira),
    ('kanban', None): (options.KanbanOptions, run_kanban),
    ('pr', None): (options.PROptions, run_pr),
    ('standup', None): (options.StandupOptions, run_standup),
    ('summary', None): (options.SummaryOptions, run_summary),
    ('test-gen', None): (options.TestGenOptions, run_test_gen),
}

__all__ = ["HANDLERS"]
