#!/usr/bin/env python3
"""Print the image references a committed build image would be tagged with.

Reads a tagging config YAML file and prints one ``repository:tag`` line per tag.
Every reference is validated; the exit status is 1 if any of them is invalid.

Usage:
    plan-image-tags tagging.yaml --job-name "Nightly Build" --build-number "#42"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ..lib.config import load_tagging_config
from ..lib.errors import ImageNameError
from ..lib.image_name import ImageName
from ..lib.tagging import plan_commit_tags


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Print the image references a committed build image is tagged with")
    parser.add_argument(
        "config",
        type=Path,
        help="Path to the tagging config YAML file",
    )
    parser.add_argument(
        "--job-name",
        required=True,
        help="Job display name, used as the repository when none is configured",
    )
    parser.add_argument(
        "--build-number",
        required=True,
        help="Build display name (e.g. '#42')",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    try:
        config = load_tagging_config(args.config)
    except FileNotFoundError as exc:
        print(f"Error: File not found: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: Invalid value: {exc}", file=sys.stderr)
        return 1

    plan = plan_commit_tags(config, args.job_name, args.build_number)

    all_valid = True
    for reference in plan.references():
        try:
            ImageName(reference).validate()
        except ImageNameError as exc:
            all_valid = False
            print(f"❌ {reference}: {exc}")
            continue
        print(reference)

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
