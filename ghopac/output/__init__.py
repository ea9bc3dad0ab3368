# ghopac Output Module
# Console output for sync runs

from ghopac.output.console import Console, create_console

__all__ = ["Console", "create_console"]
