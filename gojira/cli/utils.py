"""CLI Utility Functions"""

import logging
import subprocess
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from gojira.errors import Cancelled, GojiraError, OutputWriteError
from gojira.output import dim, print_success, print_warning

logger = logging.getLogger(__name__)


def _clipboard_commands() -> list[list[str]]:
    if sys.platform == 'win32':
        return [['clip']]
    if sys.platform == 'darwin':
        return [['pbcopy']]
    return [
        ['wl-copy'],
        ['xclip', '-selection', 'clipboard'],
        ['xsel', '--clipboard', '--input'],
    ]


def copy_to_clipboard(text: str) -> tuple[bool, str]:
    """Copy text to clipboard. Returns (success, failure_reason).

    Tries each platform tool in turn until one is installed.
    """
    data = text.encode('utf-8')
    for cmd in _clipboard_commands():
        try:
            subprocess.run(cmd, input=data, check=True, capture_output=True)
        except FileNotFoundError:
            logger.debug("Clipboard tool not found: %s", cmd[0])
            continue
        except (subprocess.CalledProcessError, OSError) as e:
            return False, f"{cmd[0]} failed: {e}"
        return True, ""
    if sys.platform.startswith('linux'):
        return False, "install wl-clipboard, xclip or xsel"
    return False, "no clipboard tool found"


def report_copy(clipboard: Callable[[str], tuple[bool, str]], text: str) -> bool:
    """Copy text and tell the user how it went. Failure is only a warning."""
    copied, reason = clipboard(text)
    if copied:
        print_success("Copied to clipboard!")
    else:
        print_warning(f"Could not copy to clipboard{': ' + reason if reason else ''}")
        print(dim("  Select the text above to copy manually."))
    return copied


class PromptAsker(ABC):
    """Source of interactive answers."""

    @abstractmethod
    def ask(self, question: str) -> str:
        pass

    def confirm(self, question: str, default: bool = True) -> bool:
        suffix = "[Y/n]" if default else "[y/N]"
        answer = self.ask(f"{question} {suffix} ").strip().lower()
        if not answer:
            return default
        return answer in ('y', 'yes')


class StdinAsker(PromptAsker):

    def ask(self, question: str) -> str:
        try:
            return input(question).strip()
        except (KeyboardInterrupt, EOFError) as e:
            print()
            raise Cancelled("Cancelled.") from e


@dataclass
class Outcome:
    """Result of a best-effort side operation."""
    value: Any = None
    error: GojiraError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def attempt(func: Callable[..., Any], *args, **kwargs) -> Outcome:
    """Run func, capturing gojira failures instead of raising them."""
    try:
        return Outcome(value=func(*args, **kwargs))
    except GojiraError as e:
        logger.debug("Best-effort operation %s failed: %s", getattr(func, '__name__', func), e)
        return Outcome(error=e)


def write_text(path: str | Path, content: str) -> Path:
    path = Path(path)
    try:
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    except OSError as e:
        raise OutputWriteError(f"Could not write {path}: {e}") from e
    logger.debug("Wrote %d chars to %s", len(content), path)
    return path


def save_and_report(path: str | Path, content: str, label: str = "Saved") -> Path:
    written = write_text(path, content)
    print_success(f"{label} to {written}")
    return written
