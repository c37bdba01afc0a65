"""
Submission links for the scheme database.

A serialized submission document is embedded into a link that the user's
browser or mail client opens:

- GitHub: a pre-filled "new issue" page of the database repository
- E-mail: a ``mailto:`` link to the database maintainers

The document text is embedded as is; percent-encoding is left to the
browser. Only the newlines of e-mail bodies are encoded, since ``mailto:``
bodies cannot contain raw line breaks.

Example
-------
>>> from rimsdb.submission.composer import create_composer
>>> composer = create_composer("github")
>>> url = composer.compose(to_json(doc), doc.scheme.element)
"""

from abc import ABC, abstractmethod

from rimsdb.core.config import (
    DEFAULT_ISSUE_LABEL,
    DEFAULT_ISSUE_URL,
    DEFAULT_MAINTAINER_EMAIL,
    SubmissionSettings,
)
from rimsdb.core.logging_config import get_logger
from rimsdb.scheme.elements import Element

logger = get_logger("submission.composer")

EMAIL_BANNER = (
    "Thank you for your submission! Please do not edit the text below this line.\n"
    "\n"
    "----------\n"
    "\n"
)

MAILTO_NEWLINE = "%0D%0A"


def issue_title(element: Element) -> str:
    """Title of a submission, e.g. "Scheme submission: Fe"."""
    return f"Scheme submission: {element.symbol}"


class Composer(ABC):
    """
    Abstract base class for submission link composers.

    Subclasses
    ----------
    GitHubIssueComposer : Link to a pre-filled GitHub issue
    EmailComposer : mailto: link to the maintainers
    """

    @abstractmethod
    def compose(self, body: str, element: Element) -> str:
        """
        Build the submission link.

        Parameters
        ----------
        body : str
            Serialized submission document
        element : Element
            Element of the scheme, used for the title

        Returns
        -------
        str
            URL to open
        """
        pass

    @abstractmethod
    def get_channel(self) -> str:
        """Return the submission channel name (github, email)."""
        pass


class GitHubIssueComposer(Composer):
    """
    Compose a link to a new, pre-filled GitHub issue.

    Parameters
    ----------
    issue_url : str
        "New issue" page of the database repository
    label : str
        Label attached to the issue
    """

    def __init__(self, issue_url: str = DEFAULT_ISSUE_URL, label: str = DEFAULT_ISSUE_LABEL):
        self.issue_url = issue_url
        self.label = label

    def get_channel(self) -> str:
        return "github"

    def compose(self, body: str, element: Element) -> str:
        url = f"{self.issue_url}?labels={self.label}&title={issue_title(element)}&body={body}"
        logger.debug(f"Composed GitHub issue link for {element.symbol}")
        return url


class EmailComposer(Composer):
    """
    Compose a ``mailto:`` link to the database maintainers.

    Parameters
    ----------
    address : str
        Maintainer e-mail address
    banner : str
        Text placed in front of the document
    """

    def __init__(self, address: str = DEFAULT_MAINTAINER_EMAIL, banner: str = EMAIL_BANNER):
        self.address = address
        self.banner = banner

    def get_channel(self) -> str:
        return "email"

    def compose(self, body: str, element: Element) -> str:
        text = (self.banner + body).replace("\n", MAILTO_NEWLINE)
        url = f"mailto:{self.address}?subject={issue_title(element)}&body={text}"
        logger.debug(f"Composed e-mail link for {element.symbol}")
        return url


# --- Factory Function ---


def create_composer(channel: str, **kwargs) -> Composer:
    """
    Factory function to create composers by channel name.

    Parameters
    ----------
    channel : str
        Submission channel: "github" or "email"
    **kwargs
        Channel-specific options passed to the composer constructor

    Returns
    -------
    Composer
        Configured composer instance

    Raises
    ------
    ValueError
        If the channel is not supported
    """
    channel_lower = channel.lower()

    if channel_lower in ("github", "gh"):
        return GitHubIssueComposer(**kwargs)
    elif channel_lower in ("email", "e-mail", "mail"):
        return EmailComposer(**kwargs)
    else:
        supported = ["github", "email"]
        raise ValueError(
            f"Unsupported submission channel: '{channel}'. " f"Supported channels: {supported}"
        )


def composer_from_settings(channel: str, settings: SubmissionSettings) -> Composer:
    """Create a composer configured from submission settings."""
    if create_composer(channel).get_channel() == "github":
        return GitHubIssueComposer(issue_url=settings.issue_url, label=settings.issue_label)
    return EmailComposer(address=settings.maintainer_email)


# --- Convenience functions ---


def create_gh_issue(body: str, element: Element, **kwargs) -> str:
    """Link to a new GitHub issue containing the document."""
    return GitHubIssueComposer(**kwargs).compose(body, element)


def create_email_link(body: str, element: Element, **kwargs) -> str:
    """mailto: link with the document as message body."""
    return EmailComposer(**kwargs).compose(body, element)
