"""
Text commands for the unistr CLI.

Each command reads its input either from a TEXT argument or from --file,
wraps it in a StringValue and prints the result of one operation:
- length: codepoint and byte counts
- inspect: per-codepoint table
- convert: case, trim, html and checksum transforms
- digest: named hash
- replace: substring / regex replacement
- match: regex groups as JSON
- config show / config set
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from unistr.exceptions import ConfigError, InvalidArgumentError, NotFoundError, UnistrError
from unistr.logging_config import logger
from unistr.schemas import CodepointInfo, MatchReport
from unistr.text import StringValue
from unistr.user_config import get_text_settings, get_user_config
from .config import CLIConfig
from .output import echo, get_console, print_error, print_json, print_table

config_app = typer.Typer(help="Show or change unistr configuration.")

_ERROR_CODES = {
    NotFoundError: "FILE_NOT_FOUND",
    InvalidArgumentError: "INVALID_ARGUMENT",
    ConfigError: "CONFIG_ERROR",
}

TEXT_ARGUMENT = typer.Argument(None, help="Input text (omit when using --file).")
FILE_OPTION = typer.Option(None, "--file", "-f", help="Read the input from a file instead.", dir_okay=False)
ENCODING_OPTION = typer.Option(None, "--encoding", "-e", help="Input encoding (default from config).")


def _fail(error: UnistrError, input_value: Optional[str] = None) -> None:
    code = next((c for cls, c in _ERROR_CODES.items() if isinstance(error, cls)), "ERROR")
    logger.debug(f"Command failed with {code}: {error}")
    print_error(str(error), code=code, input_value=input_value)
    raise typer.Exit(code=1)


def load_value(text: Optional[str], file: Optional[Path], encoding: Optional[str]) -> StringValue:
    """
    Build the command input from TEXT or --file.

    Raises:
        InvalidArgumentError: If neither (or both) inputs are given.
    """
    if (text is None) == (file is None):
        raise InvalidArgumentError("Provide exactly one of TEXT or --file")
    encoding = encoding or get_text_settings().encoding
    if file is not None:
        return StringValue.from_file_contents(file, encoding)
    return StringValue.from_raw(text, encoding)


def length(
    text: Optional[str] = TEXT_ARGUMENT,
    file: Optional[Path] = FILE_OPTION,
    encoding: Optional[str] = ENCODING_OPTION,
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Counts codepoints and bytes of the input.
    """
    try:
        value = load_value(text, file, encoding)
    except UnistrError as e:
        _fail(e, text or (str(file) if file else None))

    counts = {"codepoints": value.length(), "bytes": value.byte_length(), "encoding": value.encoding}
    if json_output:
        print_json(counts)
    elif CLIConfig.is_machine_mode():
        echo(f"{counts['codepoints']} codepoints, {counts['bytes']} bytes")
    else:
        get_console().print(
            f"[bold]{counts['codepoints']}[/bold] codepoints, "
            f"[bold]{counts['bytes']}[/bold] bytes [dim]({counts['encoding']})[/dim]"
        )


def inspect(
    text: Optional[str] = TEXT_ARGUMENT,
    file: Optional[Path] = FILE_OPTION,
    encoding: Optional[str] = ENCODING_OPTION,
):
    """
    Lists every codepoint with its index, U+ notation and encoded size.
    """
    try:
        value = load_value(text, file, encoding)
    except UnistrError as e:
        _fail(e, text or (str(file) if file else None))

    rows = []
    value.reset()
    while value.has_current():
        char = value.current_value()
        rows.append(CodepointInfo(
            index=value.current_index(),
            char=char,
            codepoint=f"U+{ord(char):04X}",
            byte_length=StringValue(char, value.encoding).byte_length(),
        ))
        value.advance()

    table = Table(title=f"{value.length()} codepoints ({value.encoding})")
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Char")
    table.add_column("Codepoint", style="green")
    table.add_column("Bytes", justify="right")
    for row in rows:
        table.add_row(str(row.index), escape(row.char), row.codepoint, str(row.byte_length))

    print_table(table, [row.model_dump() for row in rows])


def convert(
    operation: str = typer.Argument(..., help=f"One of: {', '.join(CLIConfig.CONVERT_OPERATIONS)}"),
    text: Optional[str] = TEXT_ARGUMENT,
    file: Optional[Path] = FILE_OPTION,
    encoding: Optional[str] = ENCODING_OPTION,
    chars: Optional[str] = typer.Option(None, "--chars", help="Characters stripped by the trim operations."),
    quote_style: Optional[str] = typer.Option(None, "--quote-style", help="html: both, double or none."),
):
    """
    Applies one transform to the input and prints the result.
    """
    if operation not in CLIConfig.CONVERT_OPERATIONS:
        _fail(InvalidArgumentError(f"Unknown operation '{operation}'"), operation)

    try:
        value = load_value(text, file, encoding)
        method = getattr(value, operation.replace("-", "_"))
        if operation.startswith("trim"):
            result = method(chars)
        elif operation == "html":
            result = method(quote_style or get_text_settings().quote_style)
        else:
            result = method()
    except UnistrError as e:
        _fail(e, text)

    echo(result.text)


def digest(
    text: Optional[str] = TEXT_ARGUMENT,
    file: Optional[Path] = FILE_OPTION,
    encoding: Optional[str] = ENCODING_OPTION,
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="Hash algorithm (default from config)."),
):
    """
    Prints the lowercase hex digest of the input bytes.
    """
    try:
        value = load_value(text, file, encoding)
        result = value.hash(algorithm or get_text_settings().hash_algorithm)
    except UnistrError as e:
        _fail(e, algorithm)

    echo(result.text)


def replace(
    pattern: str = typer.Argument(..., help="Substring or delimited regex such as '/o+/i'."),
    replacement: str = typer.Argument(..., help="Replacement text; regex mode honors $1 and \\1."),
    text: Optional[str] = TEXT_ARGUMENT,
    file: Optional[Path] = FILE_OPTION,
    encoding: Optional[str] = ENCODING_OPTION,
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="auto, regular or substring (default from config)."),
):
    """
    Replaces every occurrence of PATTERN in the input.
    """
    try:
        value = load_value(text, file, encoding)
        result = value.replace(pattern, replacement, mode or get_text_settings().search_mode)
    except UnistrError as e:
        _fail(e, pattern)

    echo(result.text)


def match(
    pattern: str = typer.Argument(..., help="Delimited regex such as '/(\\w+)@(\\w+)/'."),
    text: Optional[str] = TEXT_ARGUMENT,
    file: Optional[Path] = FILE_OPTION,
    encoding: Optional[str] = ENCODING_OPTION,
    all_matches: bool = typer.Option(False, "--all", help="Report groups of every match, not just the first."),
):
    """
    Prints match count and captured groups as JSON.
    """
    try:
        value = load_value(text, file, encoding)
        if all_matches:
            groups = value.all_match_groups(pattern)
        else:
            first = value.first_match_groups(pattern)
            groups = [first] if first else []
        report = MatchReport(pattern=pattern, count=value.count_matches(pattern), groups=groups)
    except UnistrError as e:
        _fail(e, pattern)

    print_json(report.model_dump())


@config_app.command("show")
def config_show(
    key: Optional[str] = typer.Argument(None, help="Dot-separated key, e.g. text.encoding."),
):
    """
    Prints the merged configuration (or a single key).
    """
    config = get_user_config()
    if key is None:
        print_json(config.get_all())
        return
    print_json(config.get(key))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Dot-separated key, e.g. text.encoding."),
    value: str = typer.Argument(..., help="New value (parsed as JSON when possible)."),
    global_scope: bool = typer.Option(False, "--global", help="Write ~/.unistr/config.json instead of the project file."),
):
    """
    Stores a configuration value.
    """
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value

    config = get_user_config()
    saved = config.set_global(key, parsed) if global_scope else config.set_local(key, parsed)
    if not saved:
        _fail(ConfigError(f"Could not save {key}"), key)

    try:
        config.text_settings()
    except ConfigError as e:
        _fail(e, value)

    echo(f"{key} = {json.dumps(parsed, ensure_ascii=False)}")
