"""Click CLI for tsmodules."""

import click

_SECTIONS = {
    "modules": "additionalModulePaths",
    "webpack": "webpackAliases",
    "jest": "jestAliases",
}


@click.group()
def cli():
    """tsmodules — bundler and test runner aliases from tsconfig/jsconfig."""


def _setup_logging(verbose):
    import logging

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)


def _compute_bundle(project_path):
    """Load tsmodules.toml and compute the bundle, mapping domain errors to click errors."""
    from pathlib import Path

    from tsmodules.config import build_project_paths, load_config
    from tsmodules.errors import ModulesConfigError
    from tsmodules.modules import get_modules

    project = Path(project_path).resolve()
    config = load_config(project)
    try:
        paths = build_project_paths(project, config)
    except ValueError as e:
        raise click.UsageError(str(e))
    try:
        return get_modules(paths)
    except ModulesConfigError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("project_path", default=".", type=click.Path(exists=True, file_okay=False))
def init(project_path):
    """Create a tsmodules.toml with the default project layout."""
    from pathlib import Path

    from tsmodules.config import create_default_config

    try:
        config_path = create_default_config(Path(project_path).resolve())
    except FileExistsError as e:
        raise click.ClickException(str(e))
    click.echo(f"Created {config_path}")


@cli.command()
@click.argument("project_path", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--only", type=click.Choice(sorted(_SECTIONS)), default=None,
              help="Print a single table instead of the whole bundle.")
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Write JSON to file.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
def resolve(project_path, only, output, verbose):
    """Print the module resolution bundle as JSON."""
    import json
    from pathlib import Path

    _setup_logging(verbose)
    bundle = _compute_bundle(project_path)

    data = bundle.to_dict()
    if only:
        data = data[_SECTIONS[only]]
    text = json.dumps(data, indent=2)

    if output:
        out_path = Path(output)
        out_path.write_text(text + "\n", encoding="utf-8")
        click.echo(f"Modules written to {out_path}")
    else:
        click.echo(text)


@cli.command()
@click.argument("project_path", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
def check(project_path, verbose):
    """Validate tsconfig/jsconfig module settings without printing tables."""
    _setup_logging(verbose)
    bundle = _compute_bundle(project_path)

    kind = "TypeScript" if bundle.has_ts_config else "JavaScript"
    click.echo(f"OK ({kind} project)")
    click.echo(f"  Module paths:    {bundle.additional_module_paths.kind}")
    click.echo(f"  Webpack aliases: {len(bundle.webpack_aliases)}")
    click.echo(f"  Jest aliases:    {len(bundle.jest_aliases)}")
