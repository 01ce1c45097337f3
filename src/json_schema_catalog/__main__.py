"""Module entry point for `python -m json_schema_catalog`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
