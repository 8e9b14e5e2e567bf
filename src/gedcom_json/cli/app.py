
from __future__ import annotations

import typer

from gedcom_json.cli.commands.export import export_command
from gedcom_json.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-json",
    help="Convert GEDCOM files into nested JSON record trees",
    add_completion=False,
)

app.command("export")(export_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
