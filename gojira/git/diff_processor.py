"""Diff Processor - Turn per-file diffs into a size-bounded digest for summaries."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath

logger = logging.getLogger(__name__)


@dataclass
class DiffDigest:
    """LLM-ready representation of a set of file diffs."""
    text: str
    included_files: list[str] = field(default_factory=list)
    omitted_files: list[str] = field(default_factory=list)
    truncated: bool = False

    @property
    def estimated_tokens(self) -> int:
        """Rough token estimate (~4 chars per token)."""
        return len(self.text) // 4


@dataclass
class ProcessorConfig:
    """Tunable settings for diff processing."""
    max_tokens: int = 12000
    max_lines_per_file: int = 200


class DiffProcessor:
    """Filters noise out of a change list and packs diffs into a digest."""

    IGNORABLE_EXTENSIONS: frozenset[str] = frozenset({
        '.png', '.jpg', '.jpeg', '.gif', '.bmp', '.ico', '.svg',
        '.pdf', '.doc', '.docx', '.xls', '.xlsx', '.ppt', '.pptx',
        '.zip', '.tar', '.gz', '.rar', '.7z',
        '.mp3', '.mp4', '.avi', '.mov', '.wav',
        '.o', '.so', '.dll', '.exe', '.bin',
        '.log', '.cache',
    })

    NOISE_PATTERNS: list[str] = [
        r'(^|/)node_modules/', r'(^|/)\.git/', r'(^|/)dist/', r'(^|/)build/', r'(^|/)vendor/',
        r'package-lock\.json$', r'yarn\.lock$', r'\.DS_Store$',
    ]

    HUNK_HEADER = re.compile(r'^@@ .* @@')

    def __init__(self, config: ProcessorConfig | None = None):
        self.config = config or ProcessorConfig()
        self._noise_re = [re.compile(p) for p in self.NOISE_PATTERNS]

    def is_ignorable(self, path: str) -> bool:
        """Binary, asset and vendored/build files never reach the model."""
        if PurePosixPath(path).suffix.lower() in self.IGNORABLE_EXTENSIONS:
            return True
        return any(p.search(path) for p in self._noise_re)

    def select_files(self, files: list[str], max_files: int = 0) -> list[str]:
        """Cap the change list (0 keeps everything), then drop ignorable files."""
        if max_files > 0:
            files = files[:max_files]
        return [f for f in files if not self.is_ignorable(f)]

    def process(self, file_diffs: dict[str, str], include_code: bool = False) -> DiffDigest:
        """Main entry point: path -> diff mapping -> digest text."""
        parts = []
        included = []
        omitted = []
        tokens_used = 0
        truncated = False

        for path, diff in file_diffs.items():
            body = diff if include_code else self._hunk_headers(diff)
            section = self._format_section(path, self._truncate_file_diff(body, path), include_code)
            section_tokens = len(section) // 4

            if tokens_used + section_tokens > self.config.max_tokens:
                truncated = True
                omitted.append(path)
                continue

            parts.append(section)
            included.append(path)
            tokens_used += section_tokens

        if truncated:
            parts.append(f"\n[... {len(omitted)} more files omitted to keep the prompt short]")
            logger.debug("Digest truncated, omitted %d files", len(omitted))

        return DiffDigest(
            text="".join(parts),
            included_files=included,
            omitted_files=omitted,
            truncated=truncated,
        )

    def _hunk_headers(self, diff: str) -> str:
        return "\n".join(line for line in diff.split('\n') if self.HUNK_HEADER.match(line))

    def _format_section(self, path: str, body: str, include_code: bool) -> str:
        if include_code:
            return f"\n## {path}\n```diff\n{body}\n```\n"
        return f"\n## {path}\n{body}\n"

    def _truncate_file_diff(self, diff: str, path: str) -> str:
        lines = diff.split('\n')
        if len(lines) <= self.config.max_lines_per_file:
            return diff

        truncated_lines = lines[:self.config.max_lines_per_file]
        truncated_lines.append(f"... [{len(lines) - self.config.max_lines_per_file} more lines truncated from {path}]")
        return '\n'.join(truncated_lines)
