"""Command-line interface for static-listing."""

import argparse
import sys
import time

from static_listing import __version__
from static_listing.build import build_site
from static_listing.config import (
    DEFAULT_BASE_URL,
    DEFAULT_OUTPUT,
    DEFAULT_TITLE,
    BuildConfig,
)
from static_listing.errors import BuildError
from static_listing.util import log


def split_ignored(values):
    """Flatten repeated, comma-delimited --ignored values"""
    ignored = []
    for value in values or ():
        ignored.extend(part.strip() for part in value.split(",") if part.strip())
    return ignored


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="static-listing",
        description="Mirror a directory tree into a static site of HTML index pages.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "input_dir",
        nargs="?",
        default=".",
        help="Which directory to generate the listing of.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help="Directory to write the generated site to. It is deleted and rebuilt.",
    )
    parser.add_argument(
        "-t",
        "--title",
        default=DEFAULT_TITLE,
        help="Which <title> to give the generated pages.",
    )
    parser.add_argument(
        "-i",
        "--ignored",
        action="append",
        default=[],
        help="Comma-separated paths, relative to the input directory, to leave out. Repeatable.",
    )
    parser.add_argument(
        "--hidden",
        action="store_true",
        help="Include entries whose name starts with a dot.",
    )
    parser.add_argument(
        "-b",
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="URL path the site is served under; prefixes every generated link.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show skipped entries and file placement.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point for the static-listing CLI. Returns the exit status."""
    args = parse_args(argv)
    config = BuildConfig.create(
        input_dir=args.input_dir,
        output_dir=args.output,
        title=args.title,
        ignored=split_ignored(args.ignored),
        include_hidden=args.hidden,
        base_url=args.base_url,
        verbose=args.verbose,
    )

    started = time.perf_counter()
    try:
        stats = build_site(config)
    except BuildError as e:
        log(str(e), "ERROR")
        return 1
    elapsed = time.perf_counter() - started

    print(
        f"Built {config.input_dir} -> {config.output_dir} in {elapsed:.2f}s "
        f"({stats.directories} directories, {stats.files} files)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
