"""nsync command line entry point."""

import cyclopts

from nsync.cli.commands import recipe

app = cyclopts.App(name="nsync", help="Desired LRP recipe builder")
app.command(recipe.app)

if __name__ == "__main__":
    app()
