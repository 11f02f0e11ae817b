"""Text helpers: summary output formats, code-block extraction and language labels."""

import html
import re
from pathlib import Path

SUMMARY_FORMATS = ("markdown", "jira", "text", "plain", "html")

LANGUAGES = {
    "go": "Go",
    "py": "Python",
    "js": "JavaScript",
    "ts": "TypeScript",
    "java": "Java",
    "c": "C",
    "cpp": "C++",
    "cc": "C++",
    "cxx": "C++",
    "cs": "C#",
    "php": "PHP",
    "rb": "Ruby",
    "swift": "Swift",
    "kt": "Kotlin",
    "rs": "Rust",
    "sh": "Shell",
    "sql": "SQL",
    "html": "HTML",
    "css": "CSS",
    "json": "JSON",
    "xml": "XML",
    "yaml": "YAML",
    "yml": "YAML",
    "md": "Markdown",
    "dart": "Dart",
    "scala": "Scala",
    "pl": "Perl",
    "clj": "Clojure",
    "ex": "Elixir",
    "exs": "Elixir",
    "f": "Fortran",
    "f90": "Fortran",
    "hs": "Haskell",
    "lua": "Lua",
    "m": "Objective-C",
    "r": "R",
}

UNKNOWN_LANGUAGE = "unknown"

TEST_FRAMEWORKS = {
    "Go": "testing (Go standard library)",
    "Python": "pytest",
    "JavaScript": "Jest",
    "TypeScript": "Jest",
    "Java": "JUnit",
    "Ruby": "RSpec",
    "PHP": "PHPUnit",
    "C#": "xUnit",
    "C++": "Google Test",
    "C": "Unity",
    "Rust": "Rust's built-in test harness",
    "Swift": "XCTest",
    "Kotlin": "JUnit",
}

HEADING_RE = re.compile(r'^(#{1,6}) +(.*)$')
BULLET_RE = re.compile(r'^(\s*)[-*] +(.*)$')
BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
FENCE_RE = re.compile(r'```[^\n]*\n(.*?)```', re.DOTALL)
FENCE_LINE_RE = re.compile(r'^\s*```[\w+#.-]*\s*$')
HASH_RE = re.compile(r'#+ ?')


def language_for_extension(ext: str) -> str:
    """'.py' or 'py' -> 'Python'. Unknown extensions give 'unknown'."""
    return LANGUAGES.get(ext.lstrip('.').lower(), UNKNOWN_LANGUAGE)


def infer_test_framework(language: str) -> str:
    return TEST_FRAMEWORKS.get(language, "the standard test framework")


def default_test_path(source: str | Path) -> Path:
    """Conventional test file location next to the source file."""
    source = Path(source)
    stem, ext = source.stem, source.suffix
    if ext == ".go":
        name = f"{stem}_test.go"
    elif ext == ".py":
        name = f"test_{stem}.py"
    elif ext in (".js", ".ts"):
        name = f"{stem}.test{ext}"
    elif ext == ".java":
        name = f"{stem}Test.java"
    else:
        name = f"{stem}_test{ext}"
    return source.with_name(name)


def extract_largest_code_block(text: str) -> str:
    """Return the longest fenced block, or the whole text when there is none."""
    blocks = FENCE_RE.findall(text)
    if not blocks:
        return text.strip()
    return max(blocks, key=len).strip('\n')


def format_summary(summary: str, fmt: str) -> str:
    fmt = (fmt or "markdown").lower()
    if fmt == "jira":
        return _to_jira(summary)
    if fmt in ("text", "plain"):
        return _to_plain(summary)
    if fmt == "html":
        return _to_html(summary)
    return summary


def _to_jira(summary: str) -> str:
    lines = []
    for line in summary.split('\n'):
        heading = HEADING_RE.match(line)
        if heading:
            line = f"h{len(heading.group(1))}. {heading.group(2)}"
        else:
            bullet = BULLET_RE.match(line)
            if bullet:
                depth = len(bullet.group(1)) // 2 + 1
                line = f"{'*' * depth} {bullet.group(2)}"
        lines.append(BOLD_RE.sub(r'*\1*', line))
    return '\n'.join(lines)


def _to_plain(summary: str) -> str:
    lines = []
    for line in summary.split('\n'):
        # A line holding only a fence (and its language tag) disappears
        if FENCE_LINE_RE.match(line):
            continue
        line = HASH_RE.sub('', line.replace('```', ''))
        lines.append(line.replace('**', '').replace('__', ''))
    return '\n'.join(lines)


def _to_html(summary: str) -> str:
    body = []
    in_list = False
    in_code = False

    for line in summary.split('\n'):
        if line.strip().startswith('```'):
            if in_list:
                body.append("</ul>")
                in_list = False
            body.append("</code></pre>" if in_code else "<pre><code>")
            in_code = not in_code
            continue
        if in_code:
            body.append(html.escape(line))
            continue

        bullet = BULLET_RE.match(line)
        if bullet and not in_list:
            body.append("<ul>")
            in_list = True
        elif not bullet and in_list:
            body.append("</ul>")
            in_list = False

        text = BOLD_RE.sub(r'<strong>\1</strong>', html.escape(line))
        heading = HEADING_RE.match(line)
        if heading:
            level = len(heading.group(1))
            content = BOLD_RE.sub(r'<strong>\1</strong>', html.escape(heading.group(2)))
            body.append(f"<h{level}>{content}</h{level}>")
        elif bullet:
            content = BOLD_RE.sub(r'<strong>\1</strong>', html.escape(bullet.group(2)))
            body.append(f"<li>{content}</li>")
        elif line.strip():
            body.append(f"<p>{text}</p>")

    if in_list:
        body.append("</ul>")
    if in_code:
        body.append("</code></pre>")

    return "<html><body>\n" + "\n".join(body) + "\n</body></html>"
