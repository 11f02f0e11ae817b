"""CLI Main Entry Point"""

import logging
import os
import sys

from gojira.env import load_env
from gojira.errors import GojiraError
from gojira.output import dim, print_error

from gojira.cli.args import parse_args
from gojira.cli.commands import HANDLERS
from gojira.cli.commands.completion import run_install_completion
from gojira.cli.context import CommandContext

logger = logging.getLogger(__name__)

QUIET_LOGGERS = ('openai', 'anthropic', 'httpx', 'httpcore', 'urllib3')


def setup_logging(verbose: bool = False) -> None:
    """Diagnostics go to stderr: warnings by default, everything with --verbose."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s' if verbose else '%(levelname)s: %(message)s'
    ))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _get_provider_and_model(args) -> tuple[str | None, str | None]:
    """Resolve one-off overrides.

    Precedence: CLI args > environment variables > config file
    """
    provider = args.global_provider or os.environ.get('GOJIRA_PROVIDER')
    model = args.global_model or os.environ.get('GOJIRA_MODEL')
    return provider, model


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser, args = parse_args(argv)
    setup_logging(args.verbose)
    load_env()

    if not args.command:
        parser.print_help()
        return 2
    if args.command == 'install-completion':
        return run_install_completion()

    key = (args.command, getattr(args, 'subcommand', None))
    if key not in HANDLERS:
        args.command_parser.print_help()
        return 2
    options_class, handler = HANDLERS[key]

    try:
        provider, model = _get_provider_and_model(args)
        ctx = CommandContext.build(provider=provider, model=model)
        return handler(options_class.from_args(args), ctx)
    except KeyboardInterrupt:
        print(dim("\nInterrupted."), file=sys.stderr)
        return 130
    except GojiraError as e:
        logger.debug("Command failed", exc_info=True)
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
