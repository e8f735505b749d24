"""Exceptions raised by the auto-assign action."""


class AutoAssignError(Exception):
    """Base exception for all auto-assign errors."""


class ConfigError(AutoAssignError):
    """The configuration file is invalid."""


class MissingPullRequestContext(AutoAssignError):
    """The triggering event carries no pull request."""

    def __init__(self, event_name: str = None):
        message = "The webhook payload does not contain a pull request"
        if event_name:
            message += f" (event: {event_name})"
        super().__init__(message)
