"""config: show, list providers, and update persisted settings."""

from dataclasses import replace

from gojira.config import DEFAULT_ISSUE_TYPE_IDS
from gojira.errors import InvalidArgument
from gojira.llm import DEFAULT_PROVIDER, PROVIDERS
from gojira.output import bold, dim, info, print_success

from gojira.cli.context import CommandContext
from gojira.cli.options import ConfigOptions


def parse_issue_types(pairs: list[str]) -> dict[str, str]:
    """['Bug=10004'] -> {'Bug': '10004'}. Names are matched to the known types."""
    known = {name.lower(): name for name in DEFAULT_ISSUE_TYPE_IDS}
    parsed = {}
    for pair in pairs:
        name, sep, type_id = pair.partition('=')
        name, type_id = name.strip(), type_id.strip()
        if not sep or not name or not type_id:
            raise InvalidArgument(f"Invalid --issue-type '{pair}'. Use NAME=ID, e.g. Bug=10004")
        if name.lower() not in known:
            raise InvalidArgument(f"Unknown issue type '{name}'. Use one of: {', '.join(DEFAULT_ISSUE_TYPE_IDS)}")
        if not type_id.isdigit():
            raise InvalidArgument(f"Issue type ID must be numeric, got '{type_id}'")
        parsed[known[name.lower()]] = type_id
    return parsed


def run_config(opts: ConfigOptions, ctx: CommandContext) -> int:
    if not opts.has_updates:
        return run_config_show(opts, ctx)

    if opts.provider and opts.provider.lower() not in PROVIDERS:
        raise InvalidArgument(f"Unknown provider '{opts.provider}'. Use one of: {', '.join(PROVIDERS)}")
    issue_types = parse_issue_types(opts.issue_types)

    # Read the file again so one-off flag and environment overrides are not persisted
    config = ctx.config_manager.load()
    changes = {}
    if opts.provider:
        changes['ai_provider'] = opts.provider.lower()
    if opts.model:
        changes['ai_model'] = opts.model
    if opts.jira_url:
        changes['jira_url'] = opts.jira_url.rstrip('/')
    if opts.jira_token:
        changes['jira_token'] = opts.jira_token
    if opts.jira_project:
        changes['default_jira'] = opts.jira_project.upper()
    if issue_types:
        changes['jira_issue_types'] = {**config.jira_issue_types, **issue_types}

    path = ctx.config_manager.save(replace(config, **changes))
    print_success(f"Saved {', '.join(sorted(changes))} to {path}")
    return 0


def run_config_show(opts: ConfigOptions, ctx: CommandContext) -> int:
    config = ctx.config
    provider = ctx.provider

    print(f"\n{bold('Current Configuration')}\n")
    print(f"  {dim('Loaded from:')} {ctx.config_manager.path}")
    print()
    print(f"  {bold('AI:')}")
    print(f"    provider:   {info(provider.name)}")
    print(f"    model:      {info(config.ai_model or provider.default_model())}"
          f"{dim(' (default)') if not config.ai_model else ''}")
    print(f"    available:  {', '.join(provider.available_models())}")
    print()
    print(f"  {bold('Jira:')}")
    print(f"    url:        {info(config.jira_url or 'not set')}")
    print(f"    project:    {info(config.default_jira or 'not set')}")
    print(f"    token:      {info('set' if config.jira_token else 'not set')}")
    types = ", ".join(f"{name}={type_id}" for name, type_id in config.jira_issue_types.items())
    print(f"    types:      {types}")
    print(f"\n  {dim('Run')} gojira config --help {dim('to change settings')}\n")
    return 0


def run_config_providers(opts: ConfigOptions, ctx: CommandContext) -> int:
    print(f"\n{bold('Providers')}\n")
    for key, provider_class in PROVIDERS.items():
        provider = provider_class()
        marker = info(' (default)') if key == DEFAULT_PROVIDER else ''
        print(f"  {bold(key)} {dim(provider.name)}{marker}")
        for model in provider.available_models():
            suffix = dim(' (default)') if model == provider.default_model() else ''
            print(f"    - {model}{suffix}")
    print()
    return 0
