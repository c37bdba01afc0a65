"""
Form state kept between sessions.

The state is the submission document in its JSON layout, written without
completeness checks so unfinished forms survive a restart. Fields missing
from older state files fall back to their defaults.
"""

from pathlib import Path
from typing import Union

from rimsdb.core.logging_config import get_logger
from rimsdb.io.document import from_json, to_json
from rimsdb.scheme.structures import SubmissionDocument

logger = get_logger("form.state")


def load_state(path: Union[str, Path]) -> SubmissionDocument:
    """
    Load the form state.

    Parameters
    ----------
    path : str or Path
        State file

    Returns
    -------
    SubmissionDocument
        Stored document, or an empty document if there is no usable state
    """
    path = Path(path).expanduser()
    if not path.exists():
        logger.info(f"No stored state at {path}, starting empty")
        return SubmissionDocument()

    try:
        doc = from_json(path.read_bytes(), strict=False)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unusable state file {path}: {e}")
        return SubmissionDocument()

    logger.info(f"Restored form state from {path}")
    return doc


def save_state(doc: SubmissionDocument, path: Union[str, Path]) -> None:
    """
    Store the form state.

    Parameters
    ----------
    doc : SubmissionDocument
        Current document, complete or not
    path : str or Path
        State file; parent directories are created
    """
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(doc, strict=False), encoding="utf-8")
    logger.info(f"Saved form state to {path}")
