"""test-gen: write a unit test file for a source file."""

import logging
from pathlib import Path

from gojira.formatting import default_test_path, extract_largest_code_block, infer_test_framework, language_for_extension
from gojira.output import dim
from gojira.prompts import build_test_prompt

from gojira.cli.commands.explain import read_source
from gojira.cli.context import CommandContext
from gojira.cli.options import TestGenOptions
from gojira.cli.utils import save_and_report

logger = logging.getLogger(__name__)


def run_test_gen(opts: TestGenOptions, ctx: CommandContext) -> int:
    source = read_source(opts.source)
    output = Path(opts.output) if opts.output else default_test_path(opts.source)

    language = language_for_extension(Path(opts.source).suffix)
    framework = opts.framework or infer_test_framework(language)

    existing = None
    if output.is_file():
        logger.debug("Merging into existing test file %s", output)
        existing = read_source(str(output))

    print(dim(f"Generating {framework} tests for {opts.source}"))
    prompt = build_test_prompt(source, language, framework, opts.coverage, existing_tests=existing)
    response = ctx.complete(prompt, "Writing tests")

    save_and_report(output, extract_largest_code_block(response) + "\n", "Tests written")
    return 0
