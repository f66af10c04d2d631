# /hms/commands.py
import os

import click

from hms import create_app
from hms.exceptions import StorageError


def _get_app(ctx):
    app = ctx.obj.get('app')
    if app is None:
        app = ctx.obj['app'] = create_app(ctx.obj['config_name'])
    return app


def _seed_rights(app):
    """Creates the rights file if missing; storage failure here is fatal."""
    try:
        created = app.rights.initialize_if_absent()
    except StorageError as e:
        app.logger.critical(f"Cannot initialize access rights: {e}")
        raise click.ClickException(str(e))
    if created:
        click.echo(f"Access rights initialized at {app.rights.path}")
    return created


@click.group()
@click.option('--config', 'config_name', default=lambda: os.environ.get('HMS_CONFIG', 'default'),
              type=click.Choice(['default', 'development', 'testing', 'production']),
              help='Configuration profile to load.')
@click.pass_context
def cli(ctx, config_name):
    """Patient records console."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault('config_name', config_name)


@cli.command('console')
@click.pass_context
def console_command(ctx):
    """Start the interactive operator session."""
    from hms.console.io import ClickConsole
    from hms.console.routes import run_console

    app = _get_app(ctx)
    _seed_rights(app)
    run_console(app, ClickConsole())


@cli.command('init-rights')
@click.pass_context
def init_rights_command(ctx):
    """Create the access rights file with every flag enabled."""
    app = _get_app(ctx)
    if not _seed_rights(app):
        click.echo(f"Access rights already exist at {app.rights.path}")


def main():
    cli(obj={})
