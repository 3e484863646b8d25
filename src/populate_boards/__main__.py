"""Module entrypoint for ``python -m populate_boards``."""

from populate_boards.cli import main

raise SystemExit(main())
