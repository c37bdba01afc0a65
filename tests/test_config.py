"""
Tests for configuration management module.
"""

import json
import os
import tempfile
from pathlib import Path

import pytest

from rimsdb.core.config import (
    DEFAULT_ISSUE_URL,
    SubmissionSettings,
    load_config,
    save_config,
    validate_submission_config,
)


@pytest.fixture
def sample_config_dict():
    return {
        "submission": {
            "issue_url": "https://github.com/example/db/issues/new",
            "issue_label": "scheme",
            "maintainer_email": "db@example.org",
            "state_path": "~/.rimsdb-test/state.json",
        },
        "log_level": "DEBUG",
    }


def _temp_path(suffix):
    fd, path = tempfile.mkstemp(suffix=suffix)
    os.close(fd)  # Close file descriptor to prevent leaks
    Path(path).unlink()
    return Path(path)


def test_load_config_yaml(sample_config_dict):
    """Test loading YAML configuration."""
    path = _temp_path(".yaml")
    try:
        path.write_text(
            "submission:\n"
            "  issue_url: https://github.com/example/db/issues/new\n"
            "  issue_label: scheme\n"
            "log_level: DEBUG\n"
        )
        config = load_config(path)
        assert config["submission"]["issue_label"] == "scheme"
        assert config["log_level"] == "DEBUG"
    finally:
        if path.exists():
            path.unlink()


def test_load_config_json(sample_config_dict):
    """Test loading JSON configuration."""
    path = _temp_path(".json")
    try:
        path.write_text(json.dumps(sample_config_dict))
        config = load_config(path)
        assert config["submission"]["maintainer_email"] == "db@example.org"
    finally:
        if path.exists():
            path.unlink()


def test_load_config_empty_yaml():
    path = _temp_path(".yml")
    try:
        path.write_text("")
        assert load_config(path) == {}
    finally:
        if path.exists():
            path.unlink()


def test_load_config_not_found():
    """Test loading non-existent config file."""
    with pytest.raises(FileNotFoundError):
        load_config("nonexistent.yaml")


def test_load_config_invalid_format():
    """Test loading invalid file format."""
    path = _temp_path(".txt")
    try:
        path.write_text("not yaml or json")
        with pytest.raises(ValueError, match="Unsupported config file format"):
            load_config(path)
    finally:
        if path.exists():
            path.unlink()


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_save_config_round_trip(sample_config_dict, suffix):
    """Test saving and loading configuration."""
    path = _temp_path(suffix)
    try:
        save_config(sample_config_dict, path)
        assert path.exists()
        assert load_config(path) == sample_config_dict
    finally:
        if path.exists():
            path.unlink()


def test_save_config_unknown_suffix_writes_yaml(sample_config_dict):
    path = _temp_path(".cfg")
    yaml_path = path.with_suffix(".yaml")
    try:
        save_config(sample_config_dict, path)
        assert yaml_path.exists()
        assert load_config(yaml_path)["log_level"] == "DEBUG"
    finally:
        if yaml_path.exists():
            yaml_path.unlink()


def test_validate_submission_config_valid(sample_config_dict):
    assert validate_submission_config(sample_config_dict) is True
    assert validate_submission_config({"submission": {}}) is True


def test_validate_submission_config_missing_section():
    with pytest.raises(ValueError, match="must contain 'submission' section"):
        validate_submission_config({"log_level": "INFO"})


def test_validate_submission_config_invalid_url():
    with pytest.raises(ValueError, match="Invalid issue URL"):
        validate_submission_config({"submission": {"issue_url": "ftp://example.org"}})


def test_validate_submission_config_invalid_email():
    with pytest.raises(ValueError, match="Invalid maintainer email"):
        validate_submission_config({"submission": {"maintainer_email": "nobody"}})


def test_validate_submission_config_invalid_log_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        validate_submission_config({"submission": {}, "log_level": "LOUD"})


def test_settings_defaults():
    settings = SubmissionSettings()
    assert settings.issue_url == DEFAULT_ISSUE_URL
    assert settings.validate() is True


def test_settings_from_file(sample_config_dict):
    path = _temp_path(".yaml")
    try:
        save_config(sample_config_dict, path)
        settings = SubmissionSettings.from_file(path)
        assert settings.issue_label == "scheme"
        assert settings.log_level == "DEBUG"
        assert settings.resolved_state_path == Path("~/.rimsdb-test/state.json").expanduser()
        assert settings.to_dict() == sample_config_dict
    finally:
        if path.exists():
            path.unlink()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
