import os

from flask import current_app


class VoteLog:
    """Append-only журнал голосов: одна JSON-строка на голос.

    Подключается к приложению как обычное расширение Flask.
    Путь к файлу берётся из ``VOTES_LOG`` при каждой записи.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        path = app.config['VOTES_LOG']
        directory = os.path.dirname(os.path.abspath(path))
        if not os.path.exists(directory):
            os.makedirs(directory)
        app.extensions['vote_log'] = self
        app.logger.info('Votes are appended to %s', path)

    @property
    def path(self):
        return current_app.config['VOTES_LOG']

    def append(self, record):
        line = record.to_json_line()
        # Строка уходит одним write(); файл закрывается на любом выходе из блока
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(line)

    def touch(self):
        with open(self.path, 'a', encoding='utf-8'):
            pass
        return self.path
