"""Allow ``python -m zesty_dispatcher``."""

from __future__ import annotations

from zesty_dispatcher.cli.main import main

raise SystemExit(main())
