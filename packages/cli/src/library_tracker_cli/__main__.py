"""Allow ``python -m library_tracker_cli``."""

from library_tracker_cli.main import main

main()
