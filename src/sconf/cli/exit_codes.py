"""
Exit codes for the sconf CLI.

``sconf get`` prints nothing but the JSON value on stdout, so shell scripts
can tell a missing draft or unknown key (2) apart from a failed write (1).
"""

from typing import Optional

import typer


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


class CliExit(typer.Exit):
    """
    Ends a command with an sconf exit code, printing ``message`` first.

    Draft, key and value problems use ``config_error``; persistence
    failures use ``error``.
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            print(message)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        """Exit after a failed write."""
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Exit after a bad draft, config path, key or value."""
        return cls(EXIT_CONFIG_ERROR, message)
