from flask import Blueprint, current_app, jsonify, redirect, request

from ..extensions import csrf
from ..forms.vote_forms import VoteForm
from ..models import pick_random_image, record_vote
from ..models.vote import VOTE_CHOICES

api_bp = Blueprint('api', __name__, url_prefix='/api')


def client_ip():
    forwarded = request.headers.get('X-Forwarded-For', '')
    return forwarded.split(',')[0].strip() or request.remote_addr


@api_bp.route('/random-dog', methods=['GET'])
def random_dog():
    # Параметр ?t=... от клиента только сбивает кэш, здесь он не нужен
    try:
        image = pick_random_image(current_app.config['DOG_IMAGES'])
    except Exception:
        current_app.logger.exception('Failed to pick a random dog')
        return jsonify({'error': 'Failed to get random dog'}), 500

    current_app.logger.debug('[Random dog] redirect to %s', image)
    response = redirect(image)
    response.headers['Cache-Control'] = 'no-store'
    return response


@api_bp.route('/vote', methods=['POST'])
@csrf.exempt
def vote():
    form = VoteForm.from_json(request.get_json(silent=True))
    if not form.validate():
        current_app.logger.info('[Vote] rejected payload: %s', form.errors)
        return jsonify({'error': 'Invalid vote payload', 'fields': form.errors}), 400

    try:
        record = record_vote(
            vote=form.vote.data,
            timestamp=form.timestamp.data,
            ip=client_ip(),
            user_agent=request.headers.get('User-Agent'),
        )
    except Exception:
        current_app.logger.exception('Failed to record vote')
        return jsonify({'error': 'Failed to record vote'}), 500

    if record.vote not in VOTE_CHOICES:
        current_app.logger.warning('[Vote] unexpected vote value %r stored as is', record.vote)
    current_app.logger.info('[Vote] vote=%s timestamp=%s ip=%s', record.vote, record.timestamp, record.ip)
    return jsonify({'success': True, 'message': 'Vote recorded'})
