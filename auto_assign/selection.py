"""Label lookup and reviewer/assignee selection rules."""

import random
from typing import Dict, List, Optional

from .config import ASSIGN_AUTHOR, AutoAssignConfig

RELEASE_BRANCH_PREFIXES = ('release', 'hotfix')


def includes_skip_keywords(title: str, skip_keywords: List[str]) -> bool:
    """Check whether the title contains any skip keyword (case-sensitive)."""
    return any(keyword in title for keyword in skip_keywords)


def choose_label_for_target_branch(target_branch: str, config: AutoAssignConfig) -> Optional[str]:
    """Return the label of the first branch prefix matching the target branch.

    Prefixes are tried in the order they appear in the config file.
    """
    for prefix, label in config.branches_to_label_map.items():
        if target_branch.startswith(prefix):
            return label
    return None


def choose_label_for_reviewer(reviewer: str, config: AutoAssignConfig) -> Optional[str]:
    return config.reviewer_to_label_map.get(reviewer)


def is_release_branch(target_branch: str) -> bool:
    return target_branch.startswith(RELEASE_BRANCH_PREFIXES)


def choose_users(candidates: List[str], desired_number: int, filter_user: str = '',
                 rng: random.Random = None) -> List[str]:
    """Pick users at random from the candidates, never returning filter_user.

    Args:
        candidates: Pool of logins to choose from
        desired_number: How many to pick (0 picks every candidate)
        filter_user: Login to exclude, usually the pull request author
        rng: Source of randomness, defaults to the module-level generator

    Returns:
        Up to desired_number distinct logins
    """
    filtered = []
    for candidate in candidates:
        if candidate != filter_user and candidate not in filtered:
            filtered.append(candidate)

    if desired_number == 0 or desired_number >= len(filtered):
        return filtered

    rng = rng or random
    return rng.sample(filtered, desired_number)


def choose_users_from_groups(owner: str, groups: Dict[str, List[str]], desired_number: int,
                             rng: random.Random = None) -> List[str]:
    """Pick desired_number users from every group and merge the results."""
    users: List[str] = []
    for members in groups.values():
        for user in choose_users(members or [], desired_number, owner, rng):
            if user not in users:
                users.append(user)
    return users


def choose_reviewers(owner: str, config: AutoAssignConfig, rng: random.Random = None) -> List[str]:
    if config.use_review_groups and config.review_groups:
        return choose_users_from_groups(owner, config.review_groups, config.number_of_reviewers, rng)
    return choose_users(config.reviewers, config.number_of_reviewers, owner, rng)


def choose_assignees(owner: str, config: AutoAssignConfig, rng: random.Random = None) -> List[str]:
    """Pick the assignees for a pull request opened by owner.

    Raises:
        ValueError: If addAssignees is a string other than 'author'
    """
    if isinstance(config.add_assignees, str):
        if config.add_assignees != ASSIGN_AUTHOR:
            raise ValueError(
                "Error in configuration file to do with using addAssignees. "
                f"Expected 'addAssignees' variable to be either boolean or '{ASSIGN_AUTHOR}'"
            )
        return [owner]

    desired_number = config.number_of_assignees or config.number_of_reviewers
    if config.use_assignee_groups and config.assignee_groups:
        return choose_users_from_groups(owner, config.assignee_groups, desired_number, rng)

    candidates = config.assignees if config.assignees is not None else config.reviewers
    return choose_users(candidates, desired_number, owner, rng)
