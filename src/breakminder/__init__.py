"""breakminder - work/break interval reminder."""

__version__ = "1.0.0"
