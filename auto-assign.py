#!/usr/bin/env python3
"""
Auto Assign
Adds labels, reviewers and assignees to the pull request that triggered the workflow.
"""

from auto_assign.action import main


if __name__ == "__main__":
    main()
