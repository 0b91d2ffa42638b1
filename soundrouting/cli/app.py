"""CLI application definition for Sound Routing."""

import typer

from soundrouting.cli.commands import main, validate_config, init_config, list_types, convert_config

app = typer.Typer(
    add_completion=False,
    help="Sound device routing - assign engine roles to hardware channels.",
    no_args_is_help=True,
)

app.callback()(main)

# Register commands
app.command(name="validate-config", help="Validate a routing configuration")(validate_config)
app.command(name="init-config", help="Generate an example routing configuration")(init_config)
app.command(name="list-types", help="List supported route types")(list_types)
app.command(name="convert-config", help="Convert between YAML and legacy XML configurations")(convert_config)
