"""CLI Argument Parsing"""

import argparse
import argcomplete

from gojira import KANBAN_STATUSES, TASK_TYPES, __version__
from gojira.formatting import SUMMARY_FORMATS
from gojira.llm import PROVIDERS


def _add_commit(subparsers) -> None:
    p = subparsers.add_parser('commit', help='Generate a commit message from the staged diff')
    p.add_argument('-a', '--all', action='store_true', help='Use working-tree changes instead of the index')
    p.add_argument('--hint', type=str, metavar='TEXT', help='Add context: --hint "fixing the login bug"')
    p.add_argument('--copy', action='store_true', help='Also copy the message to the clipboard')


def _add_config(subparsers) -> None:
    p = subparsers.add_parser('config', help='Show or update settings')
    p.add_argument('-p', '--provider', dest='set_provider', type=str, choices=list(PROVIDERS), help='Default AI provider')
    p.add_argument('-m', '--model', dest='set_model', type=str, metavar='MODEL', help='Default model')
    p.add_argument('-j', '--jira-url', type=str, metavar='URL', help='Jira base URL')
    p.add_argument('-t', '--jira-token', type=str, metavar='TOKEN', help='Jira API token')
    p.add_argument('-r', '--jira-project', type=str, metavar='KEY', help='Default Jira project key')
    p.add_argument('--issue-type', action='append', metavar='NAME=ID', help='Jira issue type ID, e.g. --issue-type Bug=10004 (repeatable)')

    config_sub = p.add_subparsers(dest='subcommand', metavar='{show,providers}')
    config_sub.add_parser('show', help='Show the effective settings')
    config_sub.add_parser('providers', help='List providers and their models')


def _add_dev(subparsers) -> None:
    p = subparsers.add_parser('dev', help='Branch and checklist helpers')
    p.set_defaults(command_parser=p)
    dev_sub = p.add_subparsers(dest='subcommand', metavar='{branch,start,checklist}')

    branch = dev_sub.add_parser('branch', help='Create a branch with a normalized name')
    branch.add_argument('-n', '--name', type=str, help='Branch name')
    branch.add_argument('-p', '--prefix', type=str, default='feature', help='Branch prefix (default: feature)')
    branch.add_argument('-i', '--issue', type=str, metavar='KEY', help='Jira issue key, e.g. PROJ-123')

    start = dev_sub.add_parser('start', help='Start work on a Jira issue')
    start.add_argument('-i', '--issue', type=str, metavar='KEY', help='Jira issue key')
    start.add_argument('--no-checklist', action='store_true', help='Do not generate a checklist')

    checklist = dev_sub.add_parser('checklist', help='Generate an implementation checklist for an issue')
    checklist.add_argument('-i', '--issue', type=str, metavar='KEY', help='Jira issue key (default: from branch)')


def _add_explain(subparsers) -> None:
    p = subparsers.add_parser('explain', help='Explain a source file or a range of lines')
    p.add_argument('-f', '--file', type=str, required=True, help='File to explain')
    p.add_argument('-s', '--start', type=int, default=0, help='First line (default: 1)')
    p.add_argument('-e', '--end', type=int, default=0, help='Last line (default: end of file)')
    p.add_argument('-o', '--output', type=str, metavar='FILE', help='Save the explanation to FILE')
    p.add_argument('-l', '--level', type=str, default='intermediate',
                   choices=['beginner', 'intermediate', 'expert'], help='Reader experience level')


def _add_generate(subparsers) -> None:
    p = subparsers.add_parser('generate', help='Generate project documentation')
    p.set_defaults(command_parser=p)
    gen_sub = p.add_subparsers(dest='subcommand', metavar='{readme,analysis}')

    readme = gen_sub.add_parser('readme', help='Draft a README.md for this repository')
    readme.add_argument('-o', '--output', type=str, metavar='FILE', help='Save the README to FILE')

    analysis = gen_sub.add_parser('analysis', help='Write a technical analysis of the project')
    analysis.add_argument('root', nargs='?', default='.', help='Project directory (default: .)')


def _add_jira(subparsers) -> None:
    p = subparsers.add_parser('jira', help='Generate a Jira issue description')
    p.add_argument('-t', '--title', type=str, required=True, help='Issue title')
    p.add_argument('-y', '--type', type=str, default='Task', metavar='{' + ','.join(TASK_TYPES) + '}',
                   help='Issue type (default: Task)')
    p.add_argument('-d', '--description', type=str, help='Short description used as context')
    p.add_argument('-p', '--project', type=str, metavar='KEY', help='Also create the issue in this project')


def _add_kanban(subparsers) -> None:
    p = subparsers.add_parser('kanban', help='Show Jira issues as a kanban board')
    p.add_argument('-p', '--project', type=str, metavar='KEY', help='Project key (default: configured project)')
    p.add_argument('-u', '--user', type=str, help='Only issues assigned to this user')
    p.add_argument('-s', '--status', type=str, choices=list(KANBAN_STATUSES), help='Only issues in this status')
    p.add_argument('-l', '--limit', type=int, default=10, help='Max issues per column (default: 10)')
    p.add_argument('-f', '--format', type=str, default='color', choices=['color', 'plain'], help='Board style')


def _add_pr(subparsers) -> None:
    p = subparsers.add_parser('pr', help='Open a pull request with generated title and description')
    p.add_argument('-t', '--title', type=str, help='PR title (default: generated)')
    p.add_argument('-d', '--description', type=str, help='PR description (default: generated)')
    p.add_argument('-b', '--branch', type=str, help='Source branch (default: current)')
    p.add_argument('-r', '--remote', type=str, metavar='OWNER/REPO', help='Target repository')
    p.add_argument('-B', '--base', type=str, default='main', help='Base branch (default: main)')
    p.add_argument('-D', '--draft', action='store_true', help='Create as draft')
    p.add_argument('--dry-run', action='store_true', help='Print the generated title and body without creating the PR')


def _add_standup(subparsers) -> None:
    p = subparsers.add_parser('standup', help='Generate a stand-up report from recent activity')
    p.add_argument('-d', '--days', type=int, default=1, help='Days of history (default: 1)')
    p.add_argument('-e', '--email', type=str, help='Author email (default: git config user.email)')
    p.add_argument('-t', '--team', action='store_true', help='Include commits from the whole team')
    p.add_argument('-i', '--issues', action='store_true', help='Only issues and pull requests, no commits')
    p.add_argument('-o', '--output', type=str, metavar='FILE', help='Save the report to FILE')


def _add_summary(subparsers) -> None:
    p = subparsers.add_parser('summary', help='Summarize changes since a base revision')
    p.add_argument('-b', '--base', type=str, default='HEAD~10', help='Base revision (default: HEAD~10)')
    p.add_argument('-f', '--format', type=str, default='markdown', choices=list(SUMMARY_FORMATS), help='Output format')
    p.add_argument('-s', '--save', action='store_true', help='Save the summary to a file')
    p.add_argument('-o', '--output', type=str, default='changes-summary.md', help='Output file (default: changes-summary.md)')
    p.add_argument('-m', '--max', type=int, default=20, help='Max files to include, 0 for all (default: 20)')
    p.add_argument('-c', '--code', action='store_true', help='Send full diffs instead of hunk headers')


def _add_test_gen(subparsers) -> None:
    p = subparsers.add_parser('test-gen', help='Generate unit tests for a source file')
    p.add_argument('-s', '--source', type=str, required=True, help='Source file')
    p.add_argument('-o', '--output', type=str, metavar='FILE', help='Test file (default: language convention)')
    p.add_argument('-f', '--framework', type=str, help='Test framework (default: inferred)')
    p.add_argument('-c', '--coverage', type=str, default='high', help='Target coverage (default: high)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gojira',
        description='AI-assisted helper for Git, Jira and pull requests',
        epilog='Example: gojira commit --copy'
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logs on stderr')
    parser.add_argument('-P', '--provider', dest='global_provider', type=str, metavar='NAME',
                        help=f"AI provider for this run ({', '.join(PROVIDERS)})")
    parser.add_argument('-m', '--model', dest='global_model', type=str, metavar='ID', help='Model for this run')

    subparsers = parser.add_subparsers(dest='command', metavar='<command>')
    _add_commit(subparsers)
    _add_config(subparsers)
    _add_dev(subparsers)
    _add_explain(subparsers)
    _add_generate(subparsers)
    _add_jira(subparsers)
    _add_kanban(subparsers)
    _add_pr(subparsers)
    _add_standup(subparsers)
    _add_summary(subparsers)
    _add_test_gen(subparsers)
    subparsers.add_parser('install-completion', help='Show how to enable shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser, parser.parse_args(argv)
