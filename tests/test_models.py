"""
Unit tests for PullRequestSnapshot and Decision dataclasses
"""

import pytest
from auto_assign.exceptions import MissingPullRequestContext
from auto_assign.models import Decision, PullRequestSnapshot


class TestPullRequestSnapshot:
    """Test cases for building snapshots from webhook payloads."""

    @pytest.fixture
    def payload(self):
        return {
            'action': 'opened',
            'pull_request': {
                'number': 42,
                'title': 'Add login form',
                'draft': False,
                'user': {'login': 'alice'},
                'base': {'ref': 'release/1.0'},
                'requested_reviewers': [{'login': 'bob'}, {'login': 'carol'}],
                'requested_teams': [{'name': 'Enterprise Squad'}],
                'labels': [{'name': 'Team: Blue'}, {'name': 'bug'}],
            }
        }

    def test_from_payload(self, payload):
        """Test that all fields are read from the payload."""
        pr = PullRequestSnapshot.from_payload(payload)
        assert pr.number == 42
        assert pr.title == 'Add login form'
        assert pr.author == 'alice'
        assert pr.target_branch == 'release/1.0'
        assert pr.draft is False
        assert pr.requested_reviewers == ('bob', 'carol')
        assert pr.requested_teams == ('Enterprise Squad',)
        assert pr.labels == ('Team: Blue', 'bug')

    def test_from_payload_missing_optional_fields(self):
        """Test that absent lists default to empty tuples."""
        pr = PullRequestSnapshot.from_payload({
            'pull_request': {'number': 1, 'title': 'Fix', 'user': {'login': 'alice'}}
        })
        assert pr.requested_reviewers == ()
        assert pr.requested_teams == ()
        assert pr.labels == ()
        assert pr.target_branch == ''
        assert pr.draft is False

    def test_from_payload_without_pull_request(self):
        """Test that an event without a pull request is rejected."""
        with pytest.raises(MissingPullRequestContext):
            PullRequestSnapshot.from_payload({'action': 'created', 'issue': {'number': 1}})

    def test_snapshot_is_immutable(self, payload):
        """Test that the snapshot cannot be changed during a run."""
        pr = PullRequestSnapshot.from_payload(payload)
        with pytest.raises(AttributeError):
            pr.title = 'changed'

    def test_has_any_label(self, payload):
        pr = PullRequestSnapshot.from_payload(payload)
        assert pr.has_any_label(['bug', 'docs'])
        assert not pr.has_any_label(['Team: Red'])
        assert not pr.has_any_label([])


class TestDecision:
    """Test cases for Decision dataclass."""

    def test_decision_initialization(self):
        """Test that Decision initializes with default values."""
        decision = Decision()
        assert decision.proceed is True
        assert decision.skip_reason is None
        assert decision.labels == set()
        assert decision.reviewers == []
        assert decision.assignees == []

    def test_skip(self):
        decision = Decision().skip('draft')
        assert decision.proceed is False
        assert decision.skip_reason == 'draft'

    def test_labels_deduplicate(self):
        """Test that adding an already present label leaves the set unchanged."""
        decision = Decision()
        decision.labels.add('Team: Red')
        decision.labels.add('Team: Red')
        assert decision.labels == {'Team: Red'}
