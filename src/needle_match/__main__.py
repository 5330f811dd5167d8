"""Allow ``python -m needle_match``."""

from needle_match.cli import main

raise SystemExit(main())
