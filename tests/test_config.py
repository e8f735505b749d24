"""
Unit tests for configuration loading
"""

import pytest
from auto_assign.config import AutoAssignConfig, load_config, parse_config
from auto_assign.exceptions import ConfigError


EXAMPLE_CONFIG = """
addReviewers: true
addAssignees: author
reviewers:
  - reviewer1
  - reviewer2
numberOfReviewers: 1
skipKeywords:
  - wip
filterLabels:
  include:
    - 'Team: Red'
reviewerToLabelMap:
  'Enterprise Squad': 'Team: Red'
  'Social Squad': 'Team: Green'
branchesToLabelMap:
  release: 'Team: Black'
  master: 'Team: Black'
releaseLabel: 'Planned for next release'
waitingForReviewLabel: 'Waiting for Review'
"""


class TestParseConfig:
    """Test cases for parsing the YAML rules file."""

    def test_parse_example_config(self):
        """Test that camelCase keys are mapped onto the config."""
        config = parse_config(EXAMPLE_CONFIG)
        assert config.add_reviewers is True
        assert config.add_assignees == 'author'
        assert config.reviewers == ['reviewer1', 'reviewer2']
        assert config.assignees is None
        assert config.number_of_reviewers == 1
        assert config.number_of_assignees == 0
        assert config.skip_keywords == ['wip']
        assert config.filter_labels.include == ['Team: Red']
        assert config.filter_labels.exclude == []
        assert config.release_label == 'Planned for next release'
        assert config.waiting_for_review_label == 'Waiting for Review'
        assert config.run_on_draft is False

    def test_maps_keep_file_order(self):
        """Test that label maps keep the order of the config file."""
        config = parse_config(EXAMPLE_CONFIG)
        assert list(config.branches_to_label_map) == ['release', 'master']
        assert list(config.reviewer_to_label_map) == ['Enterprise Squad', 'Social Squad']

    def test_empty_document(self):
        """Test that an empty file gives the defaults."""
        config = parse_config('')
        assert config == AutoAssignConfig()

    def test_non_mapping_document(self):
        with pytest.raises(ConfigError):
            parse_config('- reviewer1\n- reviewer2\n')

    def test_invalid_yaml(self):
        with pytest.raises(ConfigError):
            parse_config('reviewers: [unclosed')


class TestGroupValidation:
    """Test cases for the group mode invariant."""

    def test_review_groups_required(self):
        with pytest.raises(ConfigError, match='reviewGroups'):
            AutoAssignConfig.from_dict({'useReviewGroups': True})

    def test_empty_review_groups_rejected(self):
        with pytest.raises(ConfigError, match='reviewGroups'):
            AutoAssignConfig.from_dict({'useReviewGroups': True, 'reviewGroups': {}})

    def test_assignee_groups_required(self):
        with pytest.raises(ConfigError, match='assigneeGroups'):
            AutoAssignConfig.from_dict({'useAssigneeGroups': True})

    def test_groups_present(self):
        config = AutoAssignConfig.from_dict({
            'useReviewGroups': True,
            'reviewGroups': {'groupA': ['alice', 'bob'], 'groupB': ['carol']},
            'useAssigneeGroups': True,
            'assigneeGroups': {'groupA': ['dave']},
        })
        assert config.review_groups == {'groupA': ['alice', 'bob'], 'groupB': ['carol']}
        assert config.assignee_groups == {'groupA': ['dave']}

    def test_groups_without_group_mode(self):
        """Test that a missing group map is fine when group mode is off."""
        config = AutoAssignConfig.from_dict({'useReviewGroups': False})
        assert config.review_groups == {}


class TestLoadConfig:
    """Test cases for reading the rules file from disk."""

    def test_load_config(self, tmp_path):
        path = tmp_path / 'auto_assign.yml'
        path.write_text(EXAMPLE_CONFIG, encoding='utf-8')

        config = load_config(str(path))

        assert config.reviewers == ['reviewer1', 'reviewer2']

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match='not found'):
            load_config(str(tmp_path / 'missing.yml'))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
