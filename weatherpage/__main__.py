"""Allow ``python -m weatherpage``."""

from weatherpage.cli import main

raise SystemExit(main())
