"""
Configuration loading for the auto-assign action.

Reads the YAML rules file (usually ``.github/auto_assign.yml``) and turns it
into an AutoAssignConfig. Keys in the file are camelCase, attributes are
snake_case.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import yaml

from .exceptions import ConfigError

# Default config file path (relative to repository root)
DEFAULT_CONFIG_FILE = ".github/auto_assign.yml"

# Value of addAssignees that assigns the pull request author
ASSIGN_AUTHOR = 'author'


@dataclass
class FilterLabels:
    """Labels gating the reviewer/assignee step."""
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)


@dataclass
class AutoAssignConfig:
    """Rules deciding which labels, reviewers and assignees a pull request gets."""
    add_reviewers: bool = False
    add_assignees: Union[bool, str] = False
    reviewers: List[str] = field(default_factory=list)
    assignees: Optional[List[str]] = None  # None falls back to reviewers
    number_of_reviewers: int = 0  # 0 selects every candidate
    number_of_assignees: int = 0  # 0 falls back to number_of_reviewers
    skip_keywords: List[str] = field(default_factory=list)
    use_review_groups: bool = False
    use_assignee_groups: bool = False
    review_groups: Dict[str, List[str]] = field(default_factory=dict)
    assignee_groups: Dict[str, List[str]] = field(default_factory=dict)
    filter_labels: FilterLabels = field(default_factory=FilterLabels)
    run_on_draft: bool = False
    reviewer_to_label_map: Dict[str, str] = field(default_factory=dict)
    branches_to_label_map: Dict[str, str] = field(default_factory=dict)
    release_label: Optional[str] = None
    waiting_for_review_label: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'AutoAssignConfig':
        """
        Build a configuration from the parsed YAML document.

        Args:
            data: Mapping with the camelCase keys of the config file

        Returns:
            The validated configuration

        Raises:
            ConfigError: If the document is not a mapping or group mode is
                enabled without its group map
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Expected the configuration file to contain a mapping, got {type(data).__name__}"
            )

        filter_labels = data.get('filterLabels') or {}
        config = cls(
            add_reviewers=bool(data.get('addReviewers', False)),
            add_assignees=data.get('addAssignees', False),
            reviewers=list(data.get('reviewers') or []),
            assignees=list(data['assignees']) if data.get('assignees') is not None else None,
            number_of_reviewers=int(data.get('numberOfReviewers') or 0),
            number_of_assignees=int(data.get('numberOfAssignees') or 0),
            skip_keywords=list(data.get('skipKeywords') or []),
            use_review_groups=bool(data.get('useReviewGroups', False)),
            use_assignee_groups=bool(data.get('useAssigneeGroups', False)),
            review_groups=dict(data.get('reviewGroups') or {}),
            assignee_groups=dict(data.get('assigneeGroups') or {}),
            filter_labels=FilterLabels(
                include=list(filter_labels.get('include') or []),
                exclude=list(filter_labels.get('exclude') or []),
            ),
            run_on_draft=bool(data.get('runOnDraft', False)),
            reviewer_to_label_map=dict(data.get('reviewerToLabelMap') or {}),
            branches_to_label_map=dict(data.get('branchesToLabelMap') or {}),
            release_label=data.get('releaseLabel') or None,
            waiting_for_review_label=data.get('waitingForReviewLabel') or None,
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check that group mode has a group map to draw from."""
        if self.use_review_groups and not self.review_groups:
            raise ConfigError(
                "Error in configuration file to do with using review groups. Expected "
                "'reviewGroups' variable to be set because the variable 'useReviewGroups' = true."
            )
        if self.use_assignee_groups and not self.assignee_groups:
            raise ConfigError(
                "Error in configuration file to do with using assignee groups. Expected "
                "'assigneeGroups' variable to be set because the variable 'useAssigneeGroups' = true."
            )


def parse_config(text: str) -> AutoAssignConfig:
    """Parse a YAML configuration document.

    Raises:
        ConfigError: If the text is not valid YAML or fails validation
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse configuration: {e}") from e
    return AutoAssignConfig.from_dict(data)


def load_config(config_path: str = DEFAULT_CONFIG_FILE) -> AutoAssignConfig:
    """Load the configuration from a YAML file on disk."""
    if not os.path.exists(config_path):
        raise ConfigError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = parse_config(f.read())
    logging.info(f"Loaded configuration from {config_path}")
    return config
