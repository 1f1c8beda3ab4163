"""Click CLI for the procedural completion core."""

import click


def _setup_logging(verbose):
    import logging

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


def _build_provider(source, config_path):
    from pathlib import Path

    from procedural_completion.config import load_config
    from procedural_completion.errors import CompletionError
    from procedural_completion.provider import ProceduralCompletionProvider

    try:
        if config_path is not None:
            config = load_config(Path(config_path))
            return ProceduralCompletionProvider.from_config(config, source=source)
        return ProceduralCompletionProvider.from_source(source)
    except (CompletionError, RuntimeError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
def cli():
    """pcomp — procedural language completion tools."""


@cli.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False))
def init(directory):
    """Create a default pcomp.toml."""
    from pathlib import Path

    from procedural_completion.config import create_default_config

    try:
        config_path = create_default_config(Path(directory).resolve())
    except FileExistsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Created {config_path}")


@cli.command()
@click.argument("source")
@click.argument("prefix", default="")
@click.option("--config", "config_path", type=click.Path(exists=True), help="pcomp.toml to read.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
def complete(source, prefix, config_path, verbose):
    """List completions in SOURCE starting with PREFIX."""
    _setup_logging(verbose)
    provider = _build_provider(source, config_path)
    for record in provider.completions_for(prefix):
        click.echo(f"{record.name}\t{record.kind}\t{record.declared_type}")


@cli.command()
@click.argument("source")
@click.argument("name")
@click.option("--config", "config_path", type=click.Path(exists=True), help="pcomp.toml to read.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
def describe(source, name, config_path, verbose):
    """Print the description page of NAME from SOURCE."""
    _setup_logging(verbose)
    provider = _build_provider(source, config_path)
    record = provider.completion_by_name(name)
    if record is None:
        raise click.ClickException(f"No completion named {name!r} in {source}")
    click.echo(provider.summary_for(record))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("offset", type=int)
def prefix(path, offset):
    """Print the identifier prefix typed before OFFSET in the file at PATH."""
    from procedural_completion.errors import InvalidOffsetError
    from procedural_completion.scanner import prefix_at

    # Offsets count raw characters, so line endings are kept untranslated
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{path} is not valid UTF-8: {e.reason}") from e
    try:
        click.echo(prefix_at(text, offset))
    except InvalidOffsetError as e:
        raise click.ClickException(str(e)) from e
