"""Command modules for the notesjson CLI."""

from notesjson.cli.commands import notes, transfer

__all__ = ["notes", "transfer"]
