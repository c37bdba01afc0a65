"""
Form controller for scheme submissions.

The controller owns the submission document that the form edits, the
transient editor fields of the saturation curve and reference sections, and
one error message per section. A failed action only sets the error of its
own section and leaves the document and the entered text untouched.

Example
-------
>>> form = FormController()
>>> form.document.scheme.transitions[0].level = "25000.0"
>>> form.document.submitted_by = "Jane Doe"
>>> form.saturation_editor.title = "Step 1"
>>> form.saturation_editor.xdat = "1, 2, 3"
>>> form.saturation_editor.ydat = "4, 5, 6"
>>> form.add_or_update_saturation_curve()
True
>>> url = form.github_issue_url()
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union
import threading

from rimsdb.core.config import SubmissionSettings
from rimsdb.core.logging_config import get_logger
from rimsdb.form.handoff import FileHandoff, run_in_background
from rimsdb.form.state import load_state, save_state
from rimsdb.io.document import from_json, suggested_filename, to_json
from rimsdb.scheme.structures import (
    ReferenceEntry,
    SaturationCurve,
    SaturationCurveUnit,
    Scheme,
    SubmissionDocument,
)
from rimsdb.submission.composer import composer_from_settings
from rimsdb.validation.fields import (
    is_doi,
    parse_year,
    validate_ground_state_level,
    validate_transition_level,
    validate_transition_strength,
)

logger = get_logger("form.controller")

NEGATIVE_VALUES_ERROR = (
    "This curve contains negative values, which cannot be edited through the "
    "text fields. The stored curve is kept unchanged."
)

FilePicker = Callable[[], Optional[bytes]]
FileSaver = Callable[[str, bytes], None]


@dataclass
class SaturationCurveEditor:
    """Text fields of the saturation curve editor."""

    title: str = ""
    notes: str = ""
    unit: SaturationCurveUnit = SaturationCurveUnit.IRRADIANCE
    fit: bool = True
    xdat: str = ""
    xdat_unc: str = ""
    ydat: str = ""
    ydat_unc: str = ""
    error: str = ""
    locked: bool = False

    def load(self, curve: SaturationCurve) -> None:
        """
        Fill the editor with an existing curve.

        Negative values do not survive the hyphen-delimited text, so such a
        curve is shown locked and cannot be committed from the editor.
        """
        self.title = curve.title
        self.notes = curve.notes
        self.unit = curve.unit
        self.fit = curve.fit
        self.xdat = curve.format_xdat()
        self.xdat_unc = curve.format_xdat_unc()
        self.ydat = curve.format_ydat()
        self.ydat_unc = curve.format_ydat_unc()
        self.locked = curve.has_negative_values
        self.error = NEGATIVE_VALUES_ERROR if self.locked else ""

    def build(self) -> SaturationCurve:
        if self.locked:
            raise ValueError(NEGATIVE_VALUES_ERROR)
        return SaturationCurve.from_parts(
            self.title,
            self.notes,
            self.unit,
            self.fit,
            self.xdat,
            self.xdat_unc,
            self.ydat,
            self.ydat_unc,
        )


@dataclass
class ReferenceEditor:
    """Text fields of the reference editor."""

    id: str = ""
    authors: str = ""
    year: str = ""
    error: str = ""

    def load(self, ref: ReferenceEntry) -> None:
        self.id = ref.id
        self.authors = ref.authors
        self.year = "" if ref.year == 0 else str(ref.year)

    def build(self) -> ReferenceEntry:
        """
        Create a reference from the entered text.

        Without authors or year the identifier must be a DOI; any author or
        year text is then dropped.
        """
        if not self.id:
            raise ValueError("Reference is empty")
        if not self.authors or not self.year:
            if not is_doi(self.id):
                raise ValueError(
                    "This does not look like a DOI. If that is intentional, "
                    "please fill in the Author and Year data."
                )
            return ReferenceEntry.from_doi(self.id)
        return ReferenceEntry.from_url(self.id, self.authors, parse_year(self.year))


@dataclass
class SchemeImport:
    """Raw text of the last imported configuration file."""

    text: str = ""
    error: str = ""


def _in_range(items: list, index: int) -> bool:
    return 0 <= index < len(items)


def _swap(items: list, index: int, other: int) -> bool:
    if not (_in_range(items, index) and _in_range(items, other)):
        return False
    items[index], items[other] = items[other], items[index]
    return True


class FormController:
    """
    Controller behind the submission form.

    Parameters
    ----------
    document : SubmissionDocument, optional
        Initial document (default: empty)
    settings : SubmissionSettings, optional
        Submission targets (default: built-in settings)
    """

    def __init__(
        self,
        document: Optional[SubmissionDocument] = None,
        settings: Optional[SubmissionSettings] = None,
    ):
        self.settings = settings or SubmissionSettings()
        self.document = document if document is not None else SubmissionDocument()
        self._reset_transient()

    def _reset_transient(self) -> None:
        self.saturation_editor = SaturationCurveEditor()
        self.reference_editor = ReferenceEditor()
        self.scheme_import = SchemeImport()
        self.scheme_error = ""
        self.submission_error = ""
        self.handoff: FileHandoff[bytes] = FileHandoff()

    @classmethod
    def from_state(
        cls, path: Optional[Union[str, Path]] = None, settings: Optional[SubmissionSettings] = None
    ) -> "FormController":
        """Create a controller from the stored form state."""
        settings = settings or SubmissionSettings()
        path = path if path is not None else settings.resolved_state_path
        return cls(document=load_state(path), settings=settings)

    def save_state(self, path: Optional[Union[str, Path]] = None) -> None:
        """Store the document; editor fields are not kept."""
        path = path if path is not None else self.settings.resolved_state_path
        save_state(self.document, path)

    @property
    def scheme(self) -> Scheme:
        return self.document.scheme

    @property
    def errors(self) -> Dict[str, str]:
        """Current error message per section (empty if none)."""
        return {
            "import": self.scheme_import.error,
            "scheme": self.scheme_error,
            "saturation": self.saturation_editor.error,
            "reference": self.reference_editor.error,
            "submission": self.submission_error,
        }

    def clear_all(self) -> None:
        """Reset the whole form to its defaults."""
        self.document = SubmissionDocument()
        self._reset_transient()
        logger.info("Cleared form")

    # --- Scheme ---

    def check_scheme(self) -> bool:
        """
        Validate the numeric scheme fields as entered so far.

        Returns
        -------
        bool
            True if valid; otherwise the message is in ``scheme_error``
        """
        self.scheme_error = ""
        try:
            validate_ground_state_level(self.scheme.ground_state.level)
            for trans in self.scheme.transitions:
                validate_transition_level(trans.level)
                validate_transition_strength(trans.transition_strength)
        except ValueError as e:
            self.scheme_error = str(e)
            return False
        return True

    def apply_config(self, text: Union[str, bytes]) -> bool:
        """
        Replace the document with an imported configuration.

        Parameters
        ----------
        text : str or bytes
            JSON text in the current or the RIMSSchemeDrawer layout

        Returns
        -------
        bool
            True if the document was replaced
        """
        if isinstance(text, bytes):
            text = text.decode("utf-8", errors="replace")
        self.scheme_import.error = ""
        self.scheme_import.text = text
        try:
            document = from_json(text)
        except ValueError as e:
            self.scheme_import.error = str(e)
            logger.warning(f"Import failed: {e}")
            return False

        self.document = document
        logger.info(f"Imported {document.scheme.element.symbol} scheme")
        return True

    def request_config_file(self, picker: FilePicker) -> threading.Thread:
        """
        Open a file picker without blocking the form.

        The file content is applied by the next call to :meth:`poll`.
        """
        return self.handoff.submit(picker)

    def poll(self) -> bool:
        """
        Apply a file delivered by a picker, if any.

        Returns
        -------
        bool
            True if a file arrived (whether or not it could be applied)
        """
        payload = self.handoff.poll()
        if payload is None:
            return False
        self.apply_config(payload)
        return True

    # --- Saturation curves ---

    def add_or_update_saturation_curve(self) -> bool:
        """
        Commit the saturation curve editor.

        A curve with the same title is replaced in place, otherwise the
        curve is appended. On success the editor is cleared.
        """
        editor = self.saturation_editor
        editor.error = ""
        try:
            curve = editor.build()
        except ValueError as e:
            editor.error = str(e)
            return False

        curves = self.document.saturation_curves
        for it, entry in enumerate(curves):
            if entry.title == curve.title:
                curves[it] = curve
                logger.info(f"Updated saturation curve '{curve.title}'")
                break
        else:
            curves.append(curve)
            logger.info(f"Added saturation curve '{curve.title}'")

        self.saturation_editor = SaturationCurveEditor()
        return True

    def edit_saturation_curve(self, index: int) -> bool:
        """Load a curve into the editor; False if there is no such curve."""
        curves = self.document.saturation_curves
        if not _in_range(curves, index):
            logger.warning(f"No saturation curve at position {index}")
            return False
        self.saturation_editor.load(curves[index])
        return True

    def clear_saturation_editor(self) -> None:
        self.saturation_editor = SaturationCurveEditor()

    def delete_saturation_curve(self, index: int) -> Optional[SaturationCurve]:
        curves = self.document.saturation_curves
        if not _in_range(curves, index):
            logger.warning(f"No saturation curve at position {index}")
            return None
        return curves.pop(index)

    def move_saturation_curve_up(self, index: int) -> bool:
        return _swap(self.document.saturation_curves, index, index - 1)

    def move_saturation_curve_down(self, index: int) -> bool:
        return _swap(self.document.saturation_curves, index, index + 1)

    # --- References ---

    def add_or_update_reference(self) -> bool:
        """
        Commit the reference editor.

        A reference with the same identifier is replaced in place, otherwise
        it is appended. On success the editor is cleared.
        """
        editor = self.reference_editor
        try:
            entry = editor.build()
        except ValueError as e:
            editor.error = str(e)
            return False

        references = self.document.references
        for it, ref in enumerate(references):
            if ref.id == entry.id:
                references[it] = entry
                break
        else:
            references.append(entry)
        logger.info(f"Stored reference {entry.id}")

        self.reference_editor = ReferenceEditor()
        return True

    def edit_reference(self, index: int) -> bool:
        """Load a reference into the editor; False if there is no such entry."""
        references = self.document.references
        if not _in_range(references, index):
            logger.warning(f"No reference at position {index}")
            return False
        self.reference_editor.load(references[index])
        return True

    def delete_reference(self, index: int) -> Optional[ReferenceEntry]:
        references = self.document.references
        if not _in_range(references, index):
            logger.warning(f"No reference at position {index}")
            return None
        return references.pop(index)

    def move_reference_up(self, index: int) -> bool:
        return _swap(self.document.references, index, index - 1)

    def move_reference_down(self, index: int) -> bool:
        return _swap(self.document.references, index, index + 1)

    def reference_urls(self) -> List[str]:
        return [ref.url for ref in self.document.references]

    # --- Submission ---

    def create_json_output(self) -> str:
        """
        Serialize the document.

        Raises
        ------
        ValueError
            If the document is incomplete or a field is invalid
        """
        return to_json(self.document)

    def _export(self) -> Optional[str]:
        self.submission_error = ""
        try:
            return self.create_json_output()
        except ValueError as e:
            self.submission_error = f"Error creating JSON output: {e}"
            logger.warning(self.submission_error)
            return None

    def github_issue_url(self) -> Optional[str]:
        """Link to a pre-filled GitHub issue, or None if export failed."""
        body = self._export()
        if body is None:
            return None
        composer = composer_from_settings("github", self.settings)
        return composer.compose(body, self.document.scheme.element)

    def email_link(self) -> Optional[str]:
        """mailto: link with the document, or None if export failed."""
        body = self._export()
        if body is None:
            return None
        composer = composer_from_settings("email", self.settings)
        return composer.compose(body, self.document.scheme.element)

    def download(self, saver: FileSaver) -> Optional[threading.Thread]:
        """
        Hand the document to a save dialog without blocking the form.

        Parameters
        ----------
        saver : callable
            Called on a worker thread with the suggested file name and the
            UTF-8 encoded document

        Returns
        -------
        threading.Thread or None
            The worker thread, or None if export failed
        """
        body = self._export()
        if body is None:
            return None
        filename = suggested_filename(self.document)
        contents = body.encode("utf-8")
        return run_in_background(lambda: saver(filename, contents))
