#!/usr/bin/env python3
"""Find config.yaml above a directory and print the merged result.

Usage:
    python scripts/locate_config.py
    python scripts/locate_config.py --base-path tests/fixtures/deep/dir --max-steps 3
    python scripts/locate_config.py --name app.yaml --overrides app.local.yaml --verbose
"""

import argparse
import logging

import yaml

from src.locator.loader import Loader
from src.locator.settings import LocatorSettings


def main(argv=None):
    parser = argparse.ArgumentParser(description="Locate and load a YAML config file")
    parser.add_argument("--name", help="Primary config file name (default: config.yaml)")
    parser.add_argument("--overrides", help="Overrides file name (default: overrides.yaml)")
    parser.add_argument("--base-path", help="Directory to start searching from (default: .)")
    parser.add_argument("--max-steps", type=int, help="Maximum parent directories to climb (default: 5)")
    parser.add_argument(
        "--skip-parent", action="store_true",
        help="Jump two levels on the first step up, like older releases",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every candidate path tried")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    overrides = {}
    if args.name:
        overrides["config_name"] = args.name
    if args.overrides:
        overrides["overrides_name"] = args.overrides
    if args.base_path:
        overrides["base_path"] = args.base_path
    if args.max_steps is not None:
        overrides["max_steps"] = args.max_steps
    if args.skip_parent:
        overrides["skip_parent"] = True

    try:
        settings = LocatorSettings.from_env(**overrides)
    except ValueError as e:
        parser.error(str(e))

    config = {}
    result = Loader(settings).must_load(config)

    print(f"# config: {result.config_path}")
    if result.has_overrides:
        print(f"# overrides: {result.overrides_path}")
    print(yaml.safe_dump(config, sort_keys=False), end="")


if __name__ == "__main__":
    main()
