"""Git Analyzer - Query the local repository through the git CLI."""

import logging
import subprocess
from pathlib import Path

from gojira.errors import GitQueryError, NoChanges, NoStagedFiles
from gojira.git.gitignore import load_ignore_patterns, is_ignored

logger = logging.getLogger(__name__)


class GitAnalyzer:
    """Thin facade over `git` subprocess calls."""

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = str(cwd) if cwd else None

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        logger.debug("Running: git %s", ' '.join(args))
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace',
                cwd=self.cwd,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitQueryError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}") from e
        except FileNotFoundError as e:
            raise GitQueryError("Git is not installed or not in PATH") from e

    def is_git_repository(self) -> bool:
        try:
            result = subprocess.run(
                ['git', 'rev-parse', '--is-inside-work-tree'],
                capture_output=True,
                text=True,
                cwd=self.cwd,
            )
        except (FileNotFoundError, OSError) as e:
            raise GitQueryError(f"Could not run git: {e}") from e
        return result.returncode == 0 and result.stdout.strip() == 'true'

    def current_branch(self) -> str:
        try:
            branch = self._run_git('rev-parse', '--abbrev-ref', 'HEAD').strip()
        except GitQueryError as e:
            raise GitQueryError(f"Could not resolve the current branch (no commits yet?)\n{e}") from e
        if not branch or branch == 'HEAD':
            raise GitQueryError("HEAD is detached; check out a branch first")
        return branch

    def collect_diff(self, staged: bool = True) -> dict[str, str]:
        """Map each changed file to its unified diff, minus .gitignore matches."""
        patterns = load_ignore_patterns(Path(self.cwd or '.') / '.gitignore')

        if staged:
            candidates = self._staged_files()
        else:
            candidates = self._working_tree_files()

        files = [path for path in candidates if not is_ignored(path, patterns)]
        if not files:
            if staged:
                raise NoStagedFiles("No staged changes. Run 'git add' first.")
            raise NoChanges("No changes found in the working tree.")

        logger.debug("Collecting diffs for %d files (staged=%s)", len(files), staged)
        diff_args = ['diff', '--cached'] if staged else ['diff']
        return {path: self._run_git(*diff_args, '--', path) for path in files}

    def _staged_files(self) -> list[str]:
        output = self._run_git('diff', '--name-only', '--cached')
        return [line.strip() for line in output.splitlines() if line.strip()]

    def _working_tree_files(self) -> list[str]:
        """Parse 'git status --porcelain' output."""
        files = []
        for line in self._run_git('status', '--porcelain').splitlines():
            if len(line) < 4:
                continue
            path = line[3:]
            if ' -> ' in path:
                path = path.split(' -> ', 1)[1]
            files.append(path.strip().strip('"'))
        return files

    def changed_files_since(self, base: str) -> list[str]:
        output = self._run_git('diff', '--name-only', base)
        return [line.strip() for line in output.splitlines() if line.strip()]

    def diff_since(self, base: str, path: str) -> str:
        return self._run_git('diff', base, '--', path)

    def diff_stat(self, revision_range: str) -> str:
        return self._run_git('diff', '--stat', revision_range)

    def log(self, revision_range: str, fmt: str | None = None, no_merges: bool = True) -> str:
        args = ['log']
        if fmt:
            args.append(f'--pretty=format:{fmt}')
        else:
            args.append('--oneline')
        if no_merges:
            args.append('--no-merges')
        args.append(revision_range)
        return self._run_git(*args)

    def log_since(self, since: str, author: str | None = None, fmt: str = '%h | %s') -> list[str]:
        args = ['log', f'--since={since}']
        if author:
            args.append(f'--author={author}')
        args.append(f'--format={fmt}')
        return [line for line in self._run_git(*args).splitlines() if line.strip()]

    def config_value(self, key: str) -> str:
        """Read a git config value, empty when unset."""
        try:
            return self._run_git('config', key).strip()
        except GitQueryError:
            return ''

    def remote_url(self, remote: str = 'origin') -> str:
        try:
            return self._run_git('remote', 'get-url', remote).strip()
        except GitQueryError:
            return ''

    def author_name(self, email: str) -> str:
        try:
            return self._run_git('log', '-1', f'--author={email}', '--format=%an').strip()
        except GitQueryError:
            return ''

    def create_branch(self, name: str) -> None:
        self._run_git('checkout', '-b', name)
