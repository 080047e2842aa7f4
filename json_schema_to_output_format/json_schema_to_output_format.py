import json
import logging

import click

from .logging_config import configure_logging
from .pipeline import OutputFormatConfig, OutputFormatError, OutputFormatMode, PipelineGenerator


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Root record name (defaults to the schema title)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--mode",
    "-m",
    default=None,
    type=click.Choice([mode.value for mode in OutputFormatMode]),
    help="Presentation mode (overrides the config file)",
)
@click.option("--max-depth", default=None, type=click.IntRange(min=1), help="Maximum resolution depth")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution details to stderr")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def json_schema_to_output_format(name, config, mode, max_depth, verbose, path, output):
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        with open(path) as f:
            schema = json.load(f)

        if config is not None:
            with open(config) as f:
                config = OutputFormatConfig.from_dict(json.load(f))
        else:
            config = OutputFormatConfig()
    except (ValueError, TypeError) as e:
        # json.JSONDecodeError is a ValueError; bad config keys raise TypeError
        raise click.ClickException(str(e)) from e

    # CLI flags override the config file
    if mode is not None:
        config.render.mode = OutputFormatMode(mode)
    if max_depth is not None:
        config.resolver.max_depth = max_depth

    codegen = PipelineGenerator(name, schema, config)
    try:
        out = codegen.generate()
    except OutputFormatError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(out, nl=False)
    else:
        with open(output, "w") as f:
            f.write(out)
