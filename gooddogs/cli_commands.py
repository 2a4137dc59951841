import click
from flask.cli import with_appcontext

from .extensions import vote_log


@click.command('init-vote-log')
@with_appcontext
def init_vote_log():
    """Создать файл журнала голосов, если его ещё нет."""
    try:
        path = vote_log.touch()
    except OSError as e:
        raise click.ClickException(f'Не удалось создать журнал голосов: {e}')
    click.echo(f'Журнал голосов: {path}')


def register_commands(app):
    app.cli.add_command(init_vote_log)
