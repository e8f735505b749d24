"""Rule pipeline deciding labels, reviewers and assignees for a pull request."""

import logging
import random

from .config import AutoAssignConfig
from .models import Decision, PullRequestSnapshot
from .pull_request import PullRequest
from .selection import (
    choose_assignees,
    choose_label_for_reviewer,
    choose_label_for_target_branch,
    choose_reviewers,
    includes_skip_keywords,
    is_release_branch,
)


def _collect_labels(pr: PullRequestSnapshot, config: AutoAssignConfig, decision: Decision):
    """Add branch, reviewer, release and waiting-for-review labels to the decision."""
    if config.branches_to_label_map:
        try:
            label = choose_label_for_target_branch(pr.target_branch, config)
            if label:
                decision.labels.add(label)
                logging.info(f"Added branch-based label to PR #{pr.number}: {label}")
        except Exception as e:
            logging.warning(f"Error adding branch-based label: {e}")

    if config.reviewer_to_label_map:
        try:
            for reviewer in pr.requested_reviewers:
                label = choose_label_for_reviewer(reviewer, config)
                if label:
                    decision.labels.add(label)
                    logging.info(f"Added reviewer-based label to PR #{pr.number}: {label}")

            for team in pr.requested_teams:
                label = choose_label_for_reviewer(team, config)
                if label:
                    decision.labels.add(label)
                    logging.info(f"Added team reviewer-based label to PR #{pr.number}: {label}")
        except Exception as e:
            logging.warning(f"Error adding reviewer-based labels: {e}")

    if config.release_label:
        try:
            if is_release_branch(pr.target_branch):
                decision.labels.add(config.release_label)
                logging.info(f"Added \"{config.release_label}\" label to PR #{pr.number}")
        except Exception as e:
            logging.warning(f"Error adding release planning label: {e}")

    if config.waiting_for_review_label and not pr.draft:
        decision.labels.add(config.waiting_for_review_label)
        logging.info(f"Added \"{config.waiting_for_review_label}\" label to PR #{pr.number}")


def evaluate(pr: PullRequestSnapshot, config: AutoAssignConfig, rng: random.Random = None) -> Decision:
    """Decide what should happen to a pull request.

    The filter-labels gate looks at the labels the pull request had when the
    event fired, so labels collected here are still applied when the gate
    skips reviewer and assignee selection.

    Args:
        pr: Snapshot of the pull request
        config: Validated configuration
        rng: Source of randomness for reviewer/assignee sampling

    Returns:
        The decision; labels are set even when proceed is False after the
        filter-labels gate
    """
    decision = Decision()

    if config.skip_keywords and includes_skip_keywords(pr.title, config.skip_keywords):
        logging.info("Skips the process to add reviewers/assignees since PR title includes skip-keywords")
        return decision.skip('skip-keywords')

    if pr.draft and not config.run_on_draft:
        logging.info("Skips the process to add reviewers/assignees since PR type is draft")
        return decision.skip('draft')

    _collect_labels(pr, config, decision)

    include = config.filter_labels.include
    if include and not pr.has_any_label(include):
        logging.info("Skips the process to add reviewers/assignees since PR is not tagged "
                     "with any of the filterLabels.include")
        return decision.skip('filter-labels-include')

    exclude = config.filter_labels.exclude
    if exclude and pr.has_any_label(exclude):
        logging.info("Skips the process to add reviewers/assignees since PR is tagged "
                     "with any of the filterLabels.exclude")
        return decision.skip('filter-labels-exclude')

    if config.add_reviewers:
        try:
            decision.reviewers = choose_reviewers(pr.author, config, rng)
        except Exception as e:
            logging.warning(f"Error choosing reviewers: {e}")

    if config.add_assignees:
        try:
            decision.assignees = choose_assignees(pr.author, config, rng)
        except Exception as e:
            logging.warning(f"Error choosing assignees: {e}")

    return decision


def apply_decision(pull_request: PullRequest, decision: Decision) -> None:
    """Send the decision to GitHub. Each request is attempted even if an earlier one failed."""
    number = pull_request.number

    if decision.labels:
        labels = sorted(decision.labels)
        try:
            pull_request.add_labels(labels)
            logging.info(f"Applied {len(labels)} labels to PR #{number}")
        except Exception as e:
            logging.warning(f"Error applying labels: {e}")

    if not decision.proceed:
        return

    if decision.reviewers:
        try:
            pull_request.add_reviewers(decision.reviewers)
            logging.info(f"Added reviewers to PR #{number}: {', '.join(decision.reviewers)}")
        except Exception as e:
            logging.warning(f"Error adding reviewers: {e}")

    if decision.assignees:
        try:
            pull_request.add_assignees(decision.assignees)
            logging.info(f"Added assignees to PR #{number}: {', '.join(decision.assignees)}")
        except Exception as e:
            logging.warning(f"Error adding assignees: {e}")


def handle_pull_request(pull_request: PullRequest, config: AutoAssignConfig,
                        rng: random.Random = None) -> Decision:
    """Evaluate the pull request and apply the outcome."""
    decision = evaluate(pull_request.snapshot(), config, rng)
    apply_decision(pull_request, decision)
    return decision
