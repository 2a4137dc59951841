from flask_wtf.csrf import CSRFProtect

from .votelog import VoteLog

csrf = CSRFProtect()
vote_log = VoteLog()
