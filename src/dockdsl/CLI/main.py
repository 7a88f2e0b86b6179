# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command Line Interface for dockdsl.
"""
import logging
import click
from ..PARSERS.description_parser import DescriptionParser
from ..errors import DockdslError

logger = logging.getLogger(__name__)


def _load(description, env_file):
    try:
        return DescriptionParser(env_file=env_file).parse(description)
    except (DockdslError, OSError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """
    dockdsl - Dockerfile generator.

    Renders YAML build descriptions into Dockerfiles.
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')


@cli.command()
@click.argument('description', type=click.Path(dir_okay=False))
@click.option('--out', '-o', default=None, help='Write the Dockerfile here instead of stdout')
@click.option('--env-file', default=None, help='Variables for ${VAR} interpolation')
@click.option('--no-header', is_flag=True, help='Do not write the generator comment')
def render(description, out, env_file, no_header):
    """Render a build description to a Dockerfile."""
    desc = _load(description, env_file)
    builder = desc.to_builder()
    try:
        if out:
            builder.write(out, header=desc.header and not no_header)
            click.echo(f"Dockerfile written to {out}", err=True)
        else:
            click.echo(builder.render(), nl=False)
    except (DockdslError, OSError) as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument('description', type=click.Path(dir_okay=False))
@click.option('--env-file', default=None, help='Variables for ${VAR} interpolation')
def check(description, env_file):
    """Check that a build description renders."""
    desc = _load(description, env_file)
    try:
        desc.to_builder().render()
    except DockdslError as e:
        raise click.ClickException(str(e)) from e
    logger.debug("Rendered %s", description)
    click.echo(f"OK: {len(desc.instructions)} instructions")


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})


if __name__ == '__main__':
    main()
