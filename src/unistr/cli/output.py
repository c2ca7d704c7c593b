"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
import typer
from typing import Any, Optional
from rich.console import Console
from rich.table import Table

from unistr.cli.config import CLIConfig


# Console instance for human-mode rich output
_console = Console()


def echo(message: str = "", **kwargs) -> None:
    """
    Print a message respecting machine mode.
    In machine mode, prints plain text; in human mode goes through typer.
    """
    if CLIConfig.is_machine_mode():
        print(message, **kwargs)
    else:
        typer.echo(message, **kwargs)


def print_table(table: Table, rows: Optional[list] = None) -> None:
    """
    Print a rich table respecting machine mode.
    In machine mode, prints the raw rows as minified JSON instead.
    """
    if CLIConfig.is_machine_mode():
        print_json(rows if rows is not None else [])
    else:
        _console.print(table)


def print_json(data: Any, minified: Optional[bool] = None) -> None:
    """
    Print JSON data respecting machine mode.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        echo(json.dumps(data, separators=(',', ':'), ensure_ascii=False))
    else:
        echo(json.dumps(data, indent=2, ensure_ascii=False))


def print_error(message: str, code: Optional[str] = None, input_value: Optional[str] = None) -> None:
    """
    Print an error message to stderr respecting machine mode.
    In machine mode, outputs a structured JSON error.

    Args:
        message: Error message
        code: Error code (e.g., "FILE_NOT_FOUND")
        input_value: The input that caused the error
    """
    if CLIConfig.is_machine_mode():
        error_obj = {
            "status": "error",
            "message": message
        }
        if code:
            error_obj["code"] = code
        if input_value:
            error_obj["input"] = input_value
        typer.echo(json.dumps(error_obj, separators=(',', ':'), ensure_ascii=False), err=True)
    else:
        typer.echo(f"Error: {message}", err=True)


def get_console() -> Console:
    """
    Get the console instance for advanced usage.
    Note: Direct console usage should check machine mode.
    """
    return _console
