#!/usr/bin/env python3
"""
Fixture Seeding Utility
Seeds a home directory with the deterministic fixture item used by end-to-end tests.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from observer.core.errors import FixtureError
from observer.testing.fixture import seed_fixture_db


def main(argv=None):
    """Seed the fixture database under --home."""
    parser = argparse.ArgumentParser(description="Seed an observer home directory with fixture data")
    parser.add_argument("--home", required=True, help="Home directory to seed (creates .observer/observer.db)")
    args = parser.parse_args(argv)

    try:
        path = seed_fixture_db(args.home)
    except FixtureError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"✓ Seeded fixture database at {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
