"""Main entry point for parsing external results files."""

from external_results.parse_results import main

if __name__ == "__main__":
    raise SystemExit(main())
