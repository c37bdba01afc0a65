"""
Example usage of the submission form controller.

This walks through the steps a user takes in the form: importing a
RIMSSchemeDrawer file, entering a saturation curve and references, and
creating the submission links.
"""

from pathlib import Path

from rimsdb.core.config import SubmissionSettings
from rimsdb.core.logging_config import setup_logging
from rimsdb.form import FormController
from rimsdb.scheme.structures import Lasers, SaturationCurveUnit

# Setup logging
setup_logging()

SCHEME_DRAWER_FILE = """
{
    "scheme": {
        "element": "Ti",
        "lasers": "Ti:Sa",
        "unit": "nm",
        "gs_level": "0",
        "gs_term": "3F2",
        "step_level0": "319.99",
        "step_term0": "3G3",
        "trans_strength0": "1.2e7",
        "step_level1": "453.48",
        "ip_term": ""
    },
    "settings": {"fig_width": 5.0}
}
"""


def example_import():
    """Example: Importing a scheme file."""
    print("\n=== Import Example ===")

    form = FormController()
    if not form.apply_config(SCHEME_DRAWER_FILE):
        print(f"Import failed: {form.errors['import']}")
        return form

    scheme = form.scheme
    print(f"Element: {scheme.element} (IP: {scheme.ip:.3f} cm^-1)")
    print(f"Lasers: {scheme.lasers.value}")
    for it, trans in enumerate(scheme.transitions):
        if trans.level:
            print(f"{scheme.transition_label(it)} {trans.level}")

    return form


def example_entries(form):
    """Example: Adding a saturation curve and references."""
    print("\n=== Entries Example ===")

    editor = form.saturation_editor
    editor.title = "Step 1"
    editor.unit = SaturationCurveUnit.POWER
    editor.xdat = "0.1, 0.2, 0.4, 0.8"
    editor.ydat = "10, 18, 25, 29"
    if not form.add_or_update_saturation_curve():
        print(f"Curve rejected: {form.errors['saturation']}")

    # A DOI alone is enough
    form.reference_editor.id = "10.1016/j.sab.2020.105870"
    form.add_or_update_reference()

    # Anything else needs authors and year
    form.reference_editor.id = "https://example.org/thesis"
    form.add_or_update_reference()
    print(f"Rejected reference: {form.errors['reference']}")
    form.reference_editor.authors = "Doe"
    form.reference_editor.year = "2021"
    form.add_or_update_reference()

    for url in form.reference_urls():
        print(f"Reference: {url}")


def example_submission(form):
    """Example: Creating the submission links."""
    print("\n=== Submission Example ===")

    if form.github_issue_url() is None:
        print(form.errors["submission"])

    form.document.submitted_by = "Jane Doe"
    form.document.scheme.lasers = Lasers.BOTH
    url = form.github_issue_url()
    print(f"GitHub issue link: {url[:80]}...")

    settings_file = Path(__file__).parent / "settings.yaml"
    if settings_file.exists():
        form.settings = SubmissionSettings.from_file(settings_file)
    print(f"E-mail link: {form.email_link()[:80]}...")


if __name__ == "__main__":
    form = example_import()
    example_entries(form)
    example_submission(form)
