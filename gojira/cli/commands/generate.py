"""generate: README drafts and whole-project analysis."""

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path

from gojira.output import display_block, dim, print_warning
from gojira.prompts import build_analysis_prompt, build_readme_prompt

from gojira.cli.commands.commit import require_repository
from gojira.cli.context import CommandContext
from gojira.cli.options import AnalysisOptions, ReadmeOptions
from gojira.cli.utils import save_and_report, write_text

logger = logging.getLogger(__name__)

FILE_PREVIEW_CHARS = 1000
MAX_ANALYSIS_FILE_BYTES = 500 * 1024
CODE_EXTENSIONS = {'.go', '.js', '.ts', '.py', '.java', '.cpp', '.h', '.cs', '.rb', '.php', '.rs'}
YAML_EXTENSIONS = {'.yaml', '.yml'}
SKIP_DIRS = {'.git', 'node_modules', 'vendor'}


def _is_binary(data: bytes) -> bool:
    return b'\x00' in data[:8000]


def list_two_levels(root: str | Path = '.') -> str:
    """Two-level listing used when `tree` is not installed."""
    root = Path(root)
    lines = ['.']
    for entry in sorted(root.iterdir()):
        if entry.name.startswith('.'):
            continue
        lines.append(f"├── {entry.name}{'/' if entry.is_dir() else ''}")
        if entry.is_dir():
            try:
                children = sorted(c for c in entry.iterdir() if not c.name.startswith('.'))
            except OSError:
                continue
            for child in children:
                lines.append(f"│   ├── {child.name}{'/' if child.is_dir() else ''}")
    return "\n".join(lines)


def project_tree(root: str | Path = '.') -> str:
    try:
        result = subprocess.run(['tree', '-L', '2'], capture_output=True, text=True, cwd=str(root))
    except OSError:
        logger.debug("tree not available, using built-in listing")
        return list_two_levels(root)
    if result.returncode != 0:
        logger.debug("tree failed (%s), using built-in listing", result.stderr.strip())
        return list_two_levels(root)
    return result.stdout


def collect_file_details(root: str | Path = '.') -> str:
    """Each non-hidden file with the head of its content. README.md is left out."""
    parts = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith('.'))
        for name in sorted(filenames):
            if name.startswith('.') or name.lower() == 'readme.md':
                continue
            path = Path(dirpath) / name
            try:
                data = path.read_bytes()
            except OSError:
                continue
            if _is_binary(data):
                continue
            content = data.decode('utf-8', errors='replace')
            if len(content) > FILE_PREVIEW_CHARS:
                content = content[:FILE_PREVIEW_CHARS] + "\n...[truncated]..."
            rel = path.relative_to(root).as_posix()
            parts.append(f"File: {rel}\nContent:\n{content}")
    return "\n\n".join(parts)


def run_readme(opts: ReadmeOptions, ctx: CommandContext) -> int:
    require_repository(ctx)
    prompt = build_readme_prompt(project_tree('.'), collect_file_details('.'))
    readme = ctx.complete(prompt, "Writing README").strip()

    display_block(readme, "README.md")
    if opts.output:
        save_and_report(opts.output, readme + "\n", "README saved")
    return 0


def collect_project_files(root: str | Path = '.') -> dict[str, str]:
    """Code and YAML files, keeping .github/workflows for the CI/CD section."""
    root = Path(root)
    files = {}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.suffix not in CODE_EXTENSIONS and path.suffix not in YAML_EXTENSIONS:
                continue
            rel = path.relative_to(root).as_posix()
            try:
                data = path.read_bytes()
            except OSError as e:
                logger.warning("Could not read %s: %s", rel, e)
                continue
            if _is_binary(data) or len(data) > MAX_ANALYSIS_FILE_BYTES:
                logger.info("Skipping binary or oversized file %s", rel)
                continue
            files[rel] = data.decode('utf-8', errors='replace')
    return files


def log_prompt(prompt: str, log_dir: Path | None = None) -> Path:
    log_dir = log_dir or Path.home() / '.log'
    timestamp = datetime.now().strftime('%Y%m%d-%H%M%S')
    return write_text(log_dir / f"{timestamp}-gojira-analysis.log", prompt)


def run_analysis(opts: AnalysisOptions, ctx: CommandContext) -> int:
    files = collect_project_files(opts.root)
    if not files:
        print_warning(f"No code or YAML files found under {opts.root}")

    prompt = build_analysis_prompt(files)
    log_path = log_prompt(prompt)
    print(dim(f"Analyzing {len(files)} files (prompt logged to {log_path})"))

    analysis = ctx.complete(prompt, "Analyzing project").strip()
    display_block(analysis, "Project Analysis")
    return 0
