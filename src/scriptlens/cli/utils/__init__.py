"""CLI helper utilities."""

from scriptlens.cli.utils.error_handler import handle_cli_error

__all__ = ["handle_cli_error"]
