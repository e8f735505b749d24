"""Pull request bound to the event that triggered the run."""

import logging
from typing import Dict, List

from .api_client import GitHubAPIClient
from .models import PullRequestSnapshot


class PullRequest:
    """Reads the triggering pull request and forwards label, reviewer and assignee requests."""

    def __init__(self, api_client: GitHubAPIClient, payload: Dict):
        """Initialize the pull request.

        Args:
            api_client: Client for the repository the event came from
            payload: The webhook event payload

        Raises:
            MissingPullRequestContext: If the payload has no pull request
        """
        self.api_client = api_client
        self._snapshot = PullRequestSnapshot.from_payload(payload)

    @property
    def number(self) -> int:
        return self._snapshot.number

    def snapshot(self) -> PullRequestSnapshot:
        return self._snapshot

    def add_reviewers(self, reviewers: List[str]) -> None:
        result = self.api_client.request_reviewers(self.number, reviewers)
        logging.debug(f"Requested reviewers on PR #{self.number}: {result}")

    def add_assignees(self, assignees: List[str]) -> None:
        result = self.api_client.add_assignees(self.number, assignees)
        logging.debug(f"Added assignees on PR #{self.number}: {result}")

    def add_labels(self, labels: List[str]) -> None:
        result = self.api_client.add_labels(self.number, labels)
        logging.debug(f"Added labels on PR #{self.number}: {result}")
