"""
Configuration management for rimsdb.

Provides utilities for loading and validating YAML/JSON settings files that
control where submissions are sent and where the form state is kept.
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Union

import yaml

from rimsdb.core.logging_config import get_logger

logger = get_logger("core.config")

DEFAULT_ISSUE_URL = "https://github.com/RIMS-Code/RIMSDatabase/issues/new"
DEFAULT_ISSUE_LABEL = "new_scheme"
DEFAULT_MAINTAINER_EMAIL = "rimsdb@rims-code.org"
DEFAULT_STATE_PATH = "~/.rimsdb/state.json"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters
    ----------
    config_path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    FileNotFoundError
        If config file does not exist
    ValueError
        If file format is not supported
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, "r", encoding="utf-8") as f:
        if suffix in [".yaml", ".yml"]:
            config = yaml.safe_load(f)
        elif suffix == ".json":
            config = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. " "Use .yaml, .yml, or .json"
            )

    if config is None:
        config = {}

    logger.info(f"Loaded configuration from {config_path}")
    return config


def save_config(config: Dict[str, Any], config_path: Union[str, Path]) -> None:
    """
    Save configuration to YAML or JSON file.

    Parameters
    ----------
    config : dict
        Configuration dictionary
    config_path : str or Path
        Path to output file; anything that is not JSON is written as YAML
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()

    if suffix not in [".yaml", ".yml", ".json"]:
        config_path = config_path.with_suffix(".yaml")
        suffix = ".yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        if suffix == ".json":
            json.dump(config, f, indent=2)
        else:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")


def validate_submission_config(config: Dict[str, Any]) -> bool:
    """
    Validate submission configuration structure.

    Parameters
    ----------
    config : dict
        Configuration dictionary

    Returns
    -------
    bool
        True if valid

    Raises
    ------
    ValueError
        If configuration is invalid
    """
    if "submission" not in config:
        raise ValueError("Configuration must contain 'submission' section")

    submission = config["submission"]
    if not isinstance(submission, dict):
        raise ValueError("'submission' section must be a mapping")

    issue_url = submission.get("issue_url", DEFAULT_ISSUE_URL)
    if not str(issue_url).startswith(("http://", "https://")):
        raise ValueError(f"Invalid issue URL: {issue_url}. Must start with http:// or https://")

    email = submission.get("maintainer_email", DEFAULT_MAINTAINER_EMAIL)
    if str(email).count("@") != 1:
        raise ValueError(f"Invalid maintainer email: {email}")

    if not submission.get("issue_label", DEFAULT_ISSUE_LABEL):
        raise ValueError("Issue label must not be empty")

    log_level = str(config.get("log_level", "INFO")).upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {log_level}. " f"Must be one of: {VALID_LOG_LEVELS}")

    return True


@dataclass
class SubmissionSettings:
    """
    Settings for composing submissions and persisting the form.

    Attributes
    ----------
    issue_url : str
        Base URL of the "new issue" page of the database repository
    issue_label : str
        Label attached to every submitted issue
    maintainer_email : str
        Address that e-mail submissions are sent to
    state_path : str
        File in which the form state is kept between sessions
    log_level : str
        Logging level used by the command-line interface
    """

    issue_url: str = DEFAULT_ISSUE_URL
    issue_label: str = DEFAULT_ISSUE_LABEL
    maintainer_email: str = DEFAULT_MAINTAINER_EMAIL
    state_path: str = DEFAULT_STATE_PATH
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "SubmissionSettings":
        """Build settings from a configuration dictionary (validated first)."""
        validate_submission_config(config)
        submission = config["submission"]
        return cls(
            issue_url=submission.get("issue_url", DEFAULT_ISSUE_URL),
            issue_label=submission.get("issue_label", DEFAULT_ISSUE_LABEL),
            maintainer_email=submission.get("maintainer_email", DEFAULT_MAINTAINER_EMAIL),
            state_path=submission.get("state_path", DEFAULT_STATE_PATH),
            log_level=str(config.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "SubmissionSettings":
        """
        Load submission settings from a YAML or JSON file.

        Parameters
        ----------
        config_path : str or Path
            Path to configuration file

        Returns
        -------
        SubmissionSettings
            Settings instance
        """
        return cls.from_dict(load_config(config_path))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the configuration file layout."""
        submission = asdict(self)
        log_level = submission.pop("log_level")
        return {"submission": submission, "log_level": log_level}

    def validate(self) -> bool:
        """Validate settings; raises ValueError if invalid."""
        return validate_submission_config(self.to_dict())

    @property
    def resolved_state_path(self) -> Path:
        """State path with the user directory expanded."""
        return Path(self.state_path).expanduser()
