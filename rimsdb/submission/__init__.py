"""
Submission of schemes to the database.

This module provides composers that embed a serialized document into a
GitHub issue link or an e-mail link.
"""

from rimsdb.submission.composer import (
    Composer,
    GitHubIssueComposer,
    EmailComposer,
    create_composer,
    composer_from_settings,
    create_gh_issue,
    create_email_link,
    issue_title,
)

__all__ = [
    "Composer",
    "GitHubIssueComposer",
    "EmailComposer",
    "create_composer",
    "composer_from_settings",
    "create_gh_issue",
    "create_email_link",
    "issue_title",
]
