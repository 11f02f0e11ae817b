"""Simplified .gitignore filtering.

Each pattern is a shell glob matched against the whole relative path, segment
by segment: `*`, `?` and `[...]` never cross a `/`. There is no directory
anchoring, negation or `**` support, so `*.log` matches `debug.log` but not
`logs/debug.log`. Patterns with an unclosed `[` are skipped with a warning.
"""

import logging
from fnmatch import fnmatchcase
from pathlib import Path

logger = logging.getLogger(__name__)


def valid_pattern(pattern: str) -> bool:
    """False when a `[` class is never closed."""
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == '\\':
            i += 2
            continue
        if char == '[':
            # The first character of a class (after any negation) may be ']'
            j = i + 1
            if j < len(pattern) and pattern[j] in '!^':
                j += 1
            close = pattern.find(']', j + 1)
            if close == -1:
                return False
            i = close
        i += 1
    return True


def load_ignore_patterns(path: str | Path = '.gitignore') -> list[str]:
    path = Path(path)
    if not path.exists():
        return []
    try:
        lines = path.read_text(encoding='utf-8', errors='replace').splitlines()
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return []
    patterns = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if not valid_pattern(line):
            logger.warning("Skipping malformed pattern in %s: %s", path, line)
            continue
        patterns.append(line)
    return patterns


def glob_match(pattern: str, path: str) -> bool:
    pattern_parts = pattern.split('/')
    path_parts = path.split('/')
    if len(pattern_parts) != len(path_parts):
        return False
    return all(fnmatchcase(part, pat) for pat, part in zip(pattern_parts, path_parts))


def is_ignored(path: str, patterns: list[str]) -> bool:
    return any(glob_match(pattern, path) for pattern in patterns)
