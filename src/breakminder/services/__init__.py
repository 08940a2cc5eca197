"""Services backing the CLI and the scheduler ports."""
