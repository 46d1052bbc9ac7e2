"""Allow ``python -m predsets``."""

from predsets.main import main

raise SystemExit(main())
