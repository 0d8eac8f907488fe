import typer

from cacheprobe.cli.commands import report

app = typer.Typer(
    name="cacheprobe",
    help="Report the host CPU's cache hierarchy.",
    add_completion=False,
)

# A single registered command runs without a subcommand name
app.command("report")(report.report)

if __name__ == "__main__":
    app()
