"""Terminal Output Formatting Package

Generated text goes to stdout so it can be piped. Errors and the spinner go to
stderr.
"""

import os
import shutil
import sys
import threading
import time


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


def _is_tty(stream) -> bool:
    return hasattr(stream, 'isatty') and stream.isatty()


def _enable_windows_ansi() -> bool:
    try:
        import ctypes
        kernel32 = ctypes.windll.kernel32
        kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
        return True
    except (AttributeError, OSError):
        return False


def _supports_color(stream=None) -> bool:
    """NO_COLOR and FORCE_COLOR win over TTY detection."""
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not _is_tty(stream or sys.stdout):
        return False
    return _enable_windows_ansi() if sys.platform == 'win32' else True


def _supports_unicode(stream=None) -> bool:
    encoding = getattr(stream or sys.stdout, 'encoding', None) or 'utf-8'
    try:
        '✓─⠋'.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'
ARROW = '→' if UNICODE_ENABLED else '->'
RULE = '─' if UNICODE_ENABLED else '-'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED or not codes:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning(WARN)} {warning(message)}")


def print_info(message: str) -> None:
    print(f"{info(ARROW)} {message}")


def terminal_width(default: int = 80) -> int:
    return shutil.get_terminal_size((default, 24)).columns


def display_block(text: str, title: str | None = None) -> None:
    """Print generated text between two horizontal rules."""
    width = min(terminal_width(), 100)
    if title:
        label = f" {title} "
        top = RULE * 2 + label + RULE * max(width - len(label) - 2, 0)
    else:
        top = RULE * width
    print(dim(top))
    print(text)
    print(dim(RULE * width))


ISSUE_TYPE_COLORS = {
    'Epic': Colors.MAGENTA,
    'Task': Colors.CYAN,
    'Bug': Colors.RED,
}

STATUS_COLORS = {
    'To Do': Colors.BLUE,
    'In Progress': Colors.YELLOW,
    'Review': Colors.MAGENTA,
    'Done': Colors.GREEN,
}


def colorize_issue_type(issue_type: str) -> str:
    color = ISSUE_TYPE_COLORS.get(issue_type)
    return _colorize(issue_type, color) if color else issue_type


def colorize_status(status: str) -> str:
    color = STATUS_COLORS.get(status)
    return _colorize(status, Colors.BOLD, color) if color else bold(status)


class Spinner:
    """Spinner with elapsed seconds, drawn on stderr while a request runs.

    Does nothing unless stderr is a terminal, so piped or captured output
    stays clean.
    """
    FRAMES_UNICODE = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏'
    FRAMES_ASCII = '-\\|/'
    INTERVAL = 0.08

    def __init__(self, message: str = "", stream=None):
        self.message = message
        self.stream = stream or sys.stderr
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII
        self._started = 0.0

    @property
    def active(self) -> bool:
        return self._thread is not None

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            elapsed = int(time.monotonic() - self._started)
            frame = self._frames[idx % len(self._frames)]
            self._write(f"\r\033[K{frame} {dim(self.message)} {dim(f'({elapsed}s)')}")
            idx += 1
            self._stop_event.wait(self.INTERVAL)

    def __enter__(self):
        if _is_tty(self.stream):
            self._started = time.monotonic()
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None
        self._write('\r\033[K')


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN", "ARROW", "RULE",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning", "print_info",
    "terminal_width", "display_block",
    "ISSUE_TYPE_COLORS", "STATUS_COLORS", "colorize_issue_type", "colorize_status",
    "Spinner",
]
