"""Error taxonomy shared by every gojira module."""


class GojiraError(Exception):
    """Base class for every failure reported to the user."""
    pass


# Git

class NotAGitRepo(GojiraError):
    pass


class GitQueryError(GojiraError):
    """A git command could not run or returned an unusable answer."""
    pass


class NoChanges(GojiraError):
    pass


class NoStagedFiles(NoChanges):
    pass


# Completion providers

class ProviderError(GojiraError):
    pass


class MissingCredential(ProviderError):
    pass


class ProviderHTTPError(ProviderError):
    """Non-2xx answer or transport failure talking to a provider."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderMalformedResponse(ProviderError):
    pass


# Jira

class JiraError(GojiraError):
    pass


class JiraUnconfigured(JiraError):
    pass


class JiraUnreachable(JiraError):
    pass


class JiraBadStatus(JiraError):

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class JiraMalformedResponse(JiraError):
    pass


# Configuration

class ConfigError(GojiraError):
    pass


class ConfigCorrupt(ConfigError):
    pass


class ConfigWriteError(ConfigError):
    pass


# External tools and user input

class ExternalToolMissing(GojiraError):
    pass


class ExternalToolError(GojiraError):
    """An external CLI (gh, glab) ran but exited non-zero."""
    pass


class InvalidArgument(GojiraError):
    pass


class OutputWriteError(GojiraError):
    """A generated file could not be written."""
    pass


class Cancelled(GojiraError):
    """The user declined to continue, or input could not be read."""
    pass


__all__ = [
    "GojiraError",
    "NotAGitRepo", "GitQueryError", "NoChanges", "NoStagedFiles",
    "ProviderError", "MissingCredential", "ProviderHTTPError", "ProviderMalformedResponse",
    "JiraError", "JiraUnconfigured", "JiraUnreachable", "JiraBadStatus", "JiraMalformedResponse",
    "ConfigError", "ConfigCorrupt", "ConfigWriteError",
    "ExternalToolMissing", "ExternalToolError", "InvalidArgument", "OutputWriteError", "Cancelled",
]
