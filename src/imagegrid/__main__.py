"""Allow ``python -m imagegrid``."""

from imagegrid.cli import main

raise SystemExit(main())
