import json
from dataclasses import dataclass, asdict
from typing import Optional

from ..extensions import vote_log

VOTE_CHOICES = ('good', 'bad')


@dataclass(frozen=True)
class VoteRecord:
    """Одна запись в журнале голосов. После записи не меняется."""
    vote: Optional[str]
    timestamp: Optional[str]
    ip: Optional[str]
    user_agent: Optional[str]

    def to_dict(self):
        data = asdict(self)
        # В журнале поле исторически называется userAgent
        data['userAgent'] = data.pop('user_agent')
        return data

    def to_json_line(self):
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(',', ':')) + '\n'


def record_vote(vote, timestamp, ip, user_agent):
    """Сохраняет голос в журнал.

    Значения не проверяются и пишутся как есть. Ошибка записи (OSError)
    пробрасывается вызывающему коду, повторных попыток нет.
    """
    record = VoteRecord(vote=vote, timestamp=timestamp, ip=ip, user_agent=user_agent)
    vote_log.append(record)
    return record
