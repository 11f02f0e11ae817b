"""explain: walk through a source file for a reader of a given level."""

from pathlib import Path

from gojira.errors import InvalidArgument
from gojira.formatting import language_for_extension
from gojira.output import display_block, dim
from gojira.prompts import build_explain_prompt

from gojira.cli.context import CommandContext
from gojira.cli.options import ExplainOptions
from gojira.cli.utils import save_and_report


def select_line_range(total: int, start: int, end: int) -> tuple[int, int]:
    """Clamp a 1-based inclusive range to the file and put it in order."""
    if start < 1:
        start = 1
    if end <= 0 or end > total:
        end = total
    if start > end:
        start, end = end, start
    return start, end


def read_source(path: str) -> str:
    source = Path(path)
    if not source.is_file():
        raise InvalidArgument(f"File not found: {path}")
    try:
        return source.read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        raise InvalidArgument(f"Could not read {path}: {e}") from e


def run_explain(opts: ExplainOptions, ctx: CommandContext) -> int:
    lines = read_source(opts.file).splitlines()
    if not lines:
        raise InvalidArgument(f"{opts.file} is empty")
    start, end = select_line_range(len(lines), opts.start, opts.end)
    code = "\n".join(lines[start - 1:end])

    language = language_for_extension(Path(opts.file).suffix)
    print(dim(f"Explaining {opts.file} lines {start}-{end} ({language})"))

    prompt = build_explain_prompt(code, language, opts.level)
    explanation = ctx.complete(prompt, "Reading the code").strip()

    if opts.output:
        save_and_report(opts.output, explanation, "Explanation saved")
    display_block(explanation, "Explanation")
    return 0
