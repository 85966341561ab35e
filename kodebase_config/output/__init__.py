# Kodebase Output Module
# Rich console output

from kodebase_config.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
