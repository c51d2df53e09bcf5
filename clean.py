#!/usr/bin/env python3
"""Standalone script to trim the segments of a GPX file."""
import argparse
import sys

from gpx_cleaner.document import ParseError
from gpx_cleaner.exporting import export_coordinates
from gpx_cleaner.files import clean_file
from gpx_cleaner.logging_utils import setup_logging
from gpx_cleaner.plotting import plot_comparison


def main(argv=None):
    parser = argparse.ArgumentParser(description="Trim a GPX file and strip point extensions")
    parser.add_argument("input", help="Path to input GPX")
    parser.add_argument("output", nargs="?", default=None,
                        help="Path or directory for the cleaned GPX "
                             "(default: <name>_cleaned.gpx next to the input)")
    parser.add_argument("-s", "--start", default=0,
                        help="Points to remove from the start of each segment")
    parser.add_argument("-e", "--end", default=0,
                        help="Points to remove from the end of each segment")
    parser.add_argument("--summary", default=None, help="Summary file for removed points")
    parser.add_argument("--plot", default=None, help="Save a before/after image here")
    parser.add_argument("--export-coords", default=None,
                        help="Directory for original/cleaned coordinate CSVs")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logger = setup_logging(level=args.log_level)
    try:
        session = clean_file(args.input, args.output, args.start, args.end, args.summary)
    except ParseError as exc:
        logger.error("Error parsing GPX file: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Could not process %s: %s", args.input, exc)
        return 1

    if args.plot:
        plot_comparison(session.original_coords, session.cleaned_coords, args.plot)
    if args.export_coords:
        export_coordinates(
            {"original": session.original_coords, "cleaned": session.cleaned_coords},
            out_dir=args.export_coords,
        )
    print(session.summary().message())
    return 0


if __name__ == "__main__":
    sys.exit(main())
