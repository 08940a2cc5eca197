"""Allow ``python -m breakminder``."""

from breakminder.main import app

app(prog_name="breakminder")
