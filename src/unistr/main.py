import typer

from unistr.logging_config import setup_logging
from unistr.cli import commands
from unistr.cli.config import CLIConfig

app = typer.Typer(help="Inspect and transform text by codepoint.")


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: rich tables and colors (also via UNISTR_HUMAN_MODE env var)"
    ),
):
    """
    unistr: Unicode-aware string operations

    Machine mode is DEFAULT (plain text / JSON).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)
    else:
        CLIConfig.reset()
        if CLIConfig.is_machine_mode():
            # Machine mode - keep stderr free of log lines
            setup_logging(suppress_console=True, force=True)


app.command()(commands.length)
app.command()(commands.inspect)
app.command()(commands.convert)
app.command()(commands.digest)
app.command()(commands.replace)
app.command()(commands.match)
app.add_typer(commands.config_app, name="config")


if __name__ == "__main__":
    app()
