"""run-this — run a command, or explain how to install it."""

__version__ = "0.1.0"
