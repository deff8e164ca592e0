import typer

import lockdiff.cmd.compare

app = typer.Typer()
app.command(name="compare")(lockdiff.cmd.compare.compare)


def main():
    app()
