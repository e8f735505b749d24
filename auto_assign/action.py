"""Workflow step entry point: read the event, load the rules, handle the pull request."""

import json
import os
import sys
import logging
from typing import Dict

from dotenv import load_dotenv

from .api_client import GitHubAPIClient
from .config import DEFAULT_CONFIG_FILE, AutoAssignConfig, load_config, parse_config
from .exceptions import AutoAssignError
from .handler import handle_pull_request
from .pull_request import PullRequest


def _input(name: str, default: str = None) -> str:
    """Read a workflow input, falling back to the plain environment variable."""
    value = os.environ.get(f"INPUT_{name.upper()}")
    if value:
        return value.strip()
    return default


def read_event(event_path: str) -> Dict:
    with open(event_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def resolve_config(api_client: GitHubAPIClient, config_path: str, payload: Dict) -> AutoAssignConfig:
    """Load the rules from the workspace, or from the repository at the PR head commit."""
    if os.path.exists(config_path):
        return load_config(config_path)

    head_sha = ((payload.get('pull_request') or {}).get('head') or {}).get('sha')
    logging.info(f"Fetching configuration {config_path} at {head_sha or 'default branch'}")
    return parse_config(api_client.get_file_contents(config_path, ref=head_sha))


def run() -> int:
    """Handle the pull request of the triggering event.

    Returns:
        Process exit status
    """
    event_path = os.environ.get('GITHUB_EVENT_PATH')
    repo = os.environ.get('GITHUB_REPOSITORY')
    if not event_path or not repo:
        logging.error("GITHUB_EVENT_PATH and GITHUB_REPOSITORY must be set")
        return 1

    token = _input('repo-token', os.environ.get('GITHUB_TOKEN'))
    config_path = _input('configuration-path', os.environ.get('CONFIG_PATH', DEFAULT_CONFIG_FILE))

    try:
        payload = read_event(event_path)
        api_client = GitHubAPIClient(repo, token)
        pull_request = PullRequest(api_client, payload)
        config = resolve_config(api_client, config_path, payload)
        handle_pull_request(pull_request, config)
    except AutoAssignError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Error handling pull request: {e}", exc_info=True)
        return 1

    return 0


def main():
    """Main entry point for the console script."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    # Configure logging (can be overridden by LOG_LEVEL environment variable)
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )
    sys.exit(run())
