"""Data models for pull request evaluation."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .exceptions import MissingPullRequestContext


@dataclass(frozen=True)
class PullRequestSnapshot:
    """State of a pull request at the time the event fired."""
    title: str
    number: int
    author: str
    target_branch: str = ''
    draft: bool = False
    requested_reviewers: Tuple[str, ...] = ()  # user logins
    requested_teams: Tuple[str, ...] = ()  # team names
    labels: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Dict) -> 'PullRequestSnapshot':
        """Build a snapshot from a pull_request webhook payload.

        Args:
            payload: The full event payload (the dict GitHub writes to GITHUB_EVENT_PATH)

        Returns:
            The snapshot of the payload's pull request

        Raises:
            MissingPullRequestContext: If the payload has no pull request
        """
        pr = payload.get('pull_request')
        if not pr:
            raise MissingPullRequestContext(payload.get('action'))

        return cls(
            title=pr.get('title') or '',
            number=pr['number'],
            author=(pr.get('user') or {}).get('login', ''),
            target_branch=(pr.get('base') or {}).get('ref', ''),
            draft=bool(pr.get('draft', False)),
            requested_reviewers=tuple(r['login'] for r in pr.get('requested_reviewers') or []),
            requested_teams=tuple(t['name'] for t in pr.get('requested_teams') or []),
            labels=tuple(label['name'] for label in pr.get('labels') or []),
        )

    def has_any_label(self, labels: List[str]) -> bool:
        """Check whether the pull request carries at least one of the given labels."""
        return any(label in labels for label in self.labels)


@dataclass
class Decision:
    """Outcome of evaluating one pull request event."""
    proceed: bool = True
    skip_reason: Optional[str] = None
    labels: Set[str] = field(default_factory=set)
    reviewers: List[str] = field(default_factory=list)
    assignees: List[str] = field(default_factory=list)

    def skip(self, reason: str) -> 'Decision':
        """Mark the decision as skipped and return it."""
        self.proceed = False
        self.skip_reason = reason
        return self
