"""Allow ``python -m flipbook_packer``."""

from flipbook_packer.cli import main

raise SystemExit(main())
