"""Output formatting utilities."""

from reelai_cli.output.table import console, print_record, print_table

__all__ = ["console", "print_record", "print_table"]
