"""Auto Assign - labels pull requests and requests reviewers/assignees from a YAML config."""

from .models import Decision, PullRequestSnapshot
from .config import AutoAssignConfig, FilterLabels, load_config, parse_config
from .exceptions import AutoAssignError, ConfigError, MissingPullRequestContext
from .api_client import GitHubAPIClient
from .pull_request import PullRequest
from .handler import apply_decision, evaluate, handle_pull_request

__all__ = [
    'Decision',
    'PullRequestSnapshot',
    'AutoAssignConfig',
    'FilterLabels',
    'load_config',
    'parse_config',
    'AutoAssignError',
    'ConfigError',
    'MissingPullRequestContext',
    'GitHubAPIClient',
    'PullRequest',
    'apply_decision',
    'evaluate',
    'handle_pull_request',
]
