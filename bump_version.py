#!/usr/bin/env python3
"""
Version bumping utility for Android and iOS app projects.

Usage:
    mobile-version-bump            # choose the platform interactively
    mobile-version-bump --android  # android/app/build.gradle
    mobile-version-bump --ios      # ios/*.xcodeproj/project.pbxproj
    mobile-version-bump --both     # Android first, then iOS
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config import settings
from prompts import ask_choice, error
from updaters import AndroidVersionUpdater, IOSVersionUpdater, VersionBumpError

PROG = "mobile-version-bump"
__version__ = "1.0.0"

PLATFORM_CHOICES = ["🤖 Android", "🍎 iOS", "Both"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Bump the version name and code of Android and iOS app projects.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-a", "--android", action="store_true", help="Update 🤖 Android app version")
    parser.add_argument("-i", "--ios", action="store_true", help="Update 🍎 iOS app version")
    parser.add_argument(
        "-b", "--both", action="store_true",
        help="Update both 🤖 Android and 🍎 iOS apps versions",
    )
    parser.add_argument(
        "-C", "--root", type=Path, default=None,
        help="Project root containing the android/ and ios/ folders",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log what is read and replaced")
    return parser


def select_platform(args: argparse.Namespace) -> None:
    """Ask which platform to update when no platform flag was given."""
    if args.android or args.ios or args.both:
        return

    platform = ask_choice("Which platform version do you want to update?", PLATFORM_CHOICES)
    if platform == PLATFORM_CHOICES[0]:
        args.android = True
    elif platform == PLATFORM_CHOICES[1]:
        args.ios = True
    else:
        args.both = True


def bump_versions(args: argparse.Namespace) -> None:
    """Run the selected updaters, Android first."""
    config = settings
    if args.root is not None:
        config = settings.model_copy(update={"project_root": args.root})

    run_android = args.both or args.android
    if run_android:
        AndroidVersionUpdater(config).run()

    if args.both or args.ios:
        if run_android:
            print()
        IOSVersionUpdater(config).run()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point returning the process exit status.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]

    Returns:
        0 on success, 1 when a version file or field could not be found
        or stdin ran out, 130 when interrupted
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        select_platform(args)
        bump_versions(args)
    except VersionBumpError as e:
        logger.debug(f"Aborting: {e!r}")
        error(str(e))
        return 1
    except KeyboardInterrupt:
        print()
        error("Cancelled, no further files were changed")
        return 130
    except EOFError:
        print()
        error("No more input on stdin, no further files were changed")
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
