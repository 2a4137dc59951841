from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, render_template

main_bp = Blueprint('main', __name__)


def utc_now_iso():
    """ISO-8601 в UTC с миллисекундами и суффиксом Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@main_bp.route('/')
def index():
    return render_template('index.html', popup_mode=current_app.config['VOTE_POPUP_MODE'])


@main_bp.route('/health')
def health():
    # Только liveness, зависимости не проверяем
    return jsonify(status='healthy', timestamp=utc_now_iso())
