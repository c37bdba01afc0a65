"""
Main CLI entry point for rimsdb.
"""

import argparse
import sys

from rimsdb import __version__
from rimsdb.core.logging_config import setup_logging, get_logger

logger = get_logger("cli.main")


def elements_cmd(args):
    """List elements with their ionization potentials."""
    from rimsdb.scheme.elements import Element

    if args.symbol:
        element = Element.from_symbol(args.symbol)
        print(f"{element.symbol}: {element.ip:.3f} cm^-1")
        return

    print("# Element, IP (cm^-1)")
    for element in Element:
        print(f"{element.symbol},{element.ip:.3f}")


def validate_cmd(args):
    """Check that a file can be read and submitted."""
    from rimsdb.io.document import encode_document, load_document

    doc = load_document(args.file)
    if args.submitted_by:
        doc.submitted_by = args.submitted_by

    encode_document(doc)
    steps = sum(1 for trans in doc.scheme.transitions if trans.level)
    print(f"{args.file}: OK ({doc.scheme.element.symbol}, {steps} steps)")


def convert_cmd(args):
    """Convert a RIMSSchemeDrawer or submission file to the submission layout."""
    from rimsdb.io.document import load_document, save_document, to_json

    doc = load_document(args.file)
    if args.submitted_by:
        doc.submitted_by = args.submitted_by
    if args.notes:
        doc.notes = args.notes

    if args.output:
        path = save_document(doc, args.output)
        print(f"Submission saved to {path}")
    else:
        print(to_json(doc))

    logger.info("Conversion complete")


def submit_cmd(args):
    """Print a submission link for a file."""
    from rimsdb.core.config import SubmissionSettings
    from rimsdb.io.document import load_document, to_json
    from rimsdb.submission.composer import composer_from_settings

    settings = SubmissionSettings.from_file(args.settings) if args.settings else SubmissionSettings()

    doc = load_document(args.file)
    if args.submitted_by:
        doc.submitted_by = args.submitted_by

    composer = composer_from_settings(args.via, settings)
    print(composer.compose(to_json(doc), doc.scheme.element))


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="rimsdb: Resonance ionization scheme submission",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Elements command
    elements_parser = subparsers.add_parser(
        "elements", help="List elements and their ionization potentials"
    )
    elements_parser.add_argument(
        "symbol", type=str, nargs="?", default=None, help="Show a single element"
    )
    elements_parser.set_defaults(func=elements_cmd)

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Check a scheme file for completeness and valid numbers"
    )
    validate_parser.add_argument("file", type=str, help="Path to scheme file (JSON)")
    validate_parser.add_argument(
        "--submitted-by", type=str, default=None, help="Submitter name to use for the check"
    )
    validate_parser.set_defaults(func=validate_cmd)

    # Convert command
    convert_parser = subparsers.add_parser(
        "convert", help="Convert a RIMSSchemeDrawer file to a submission document"
    )
    convert_parser.add_argument("file", type=str, help="Path to scheme file (JSON)")
    convert_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file or directory (default: print to stdout)",
    )
    convert_parser.add_argument(
        "--submitted-by", type=str, default=None, help="Name of the submitter"
    )
    convert_parser.add_argument("--notes", type=str, default=None, help="Notes for the scheme")
    convert_parser.set_defaults(func=convert_cmd)

    # Submit command
    submit_parser = subparsers.add_parser("submit", help="Print a submission link")
    submit_parser.add_argument("file", type=str, help="Path to scheme file (JSON)")
    submit_parser.add_argument(
        "--via",
        choices=["github", "email"],
        default="github",
        help="Submission channel (default: github)",
    )
    submit_parser.add_argument(
        "--settings", type=str, default=None, help="Path to settings file (YAML or JSON)"
    )
    submit_parser.add_argument(
        "--submitted-by", type=str, default=None, help="Name of the submitter"
    )
    submit_parser.set_defaults(func=submit_cmd)

    args = parser.parse_args()

    # Setup logging
    setup_logging(level=args.log_level)

    # Execute command
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Error executing command: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
