#!/usr/bin/env python3
"""Check that image names follow the registry naming rules.

Prints the first broken rule for each invalid name. With --fix, also prints the
closest valid name.

Usage:
    check-image-name docker.io/library/ubuntu:trusty "My Org/Web App:1.0" --fix
"""

import argparse
import logging
import sys
from typing import Optional

from ..lib.errors import ImageNameError, MalformedImageNameError
from ..lib.image_name import ImageName


def check_image_names(image_names: list[str], fix: bool = False) -> tuple[bool, list[dict]]:
    """Validate (and optionally repair) each image name.

    Args:
        image_names: Raw image names.
        fix: Repair each name and judge the repaired form.

    Returns:
        Tuple of (all_valid, results). Each result has 'name' and 'status'
        ('valid' or 'invalid'), plus 'error' when the original name is invalid
        and 'fixed' when fix is set.
    """
    results: list[dict] = []
    for raw in image_names:
        result: dict = {"name": raw}
        try:
            image_name = ImageName(raw)
        except MalformedImageNameError as e:
            result.update(status="invalid", error=str(e))
            results.append(result)
            continue

        try:
            image_name.validate()
            result["status"] = "valid"
        except ImageNameError as e:
            result.update(status="invalid", error=str(e))

        if fix:
            image_name.make_valid()
            result["fixed"] = str(image_name)
            result["status"] = "valid" if image_name.is_valid() else "invalid"
        results.append(result)

    all_valid = all(r["status"] == "valid" for r in results)
    return all_valid, results


def _print_results(results: list[dict], all_valid: bool, fix: bool) -> None:
    """Print the check results to stdout."""
    print("🔍 Checking image names...")

    for r in results:
        if "error" not in r:
            print(f"  ✅ {r['name']}")
            continue
        print(f"  ❌ {r['name']}: {r['error']}")
        if "fixed" in r:
            status = "" if r["status"] == "valid" else " (still invalid)"
            print(f"    Fixed: {r['fixed']}{status}")

    print()
    if all_valid:
        suffix = " (after fixing)" if fix else ""
        print(f"✅ All image names are valid{suffix}")
    else:
        print("❌ Some image names are invalid")


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Check that image names follow the registry naming rules")
    parser.add_argument(
        "image_names",
        nargs="+",
        help="Image names to check (e.g., docker.io/library/ubuntu:trusty)",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Print the closest valid name for each invalid one",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    all_valid, results = check_image_names(args.image_names, fix=args.fix)
    _print_results(results, all_valid, args.fix)
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
