"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..errors import PersistenceError, WordleError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_body, parse_game_mode

game_bp = Blueprint('game', __name__)


def _error_response(action, error, **kwargs):
    """Log a failed action and build its JSON response."""
    if not isinstance(error, WordleError) or isinstance(error, PersistenceError):
        game_logger.log_error(request, error, action)
    body, status = error_body(error)
    game_logger.log_server_response(request, action, False, body, **kwargs)
    return jsonify(body), status


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
async def new_game(game_service):
    """Start a new normal or daily game."""
    data = request.get_json(silent=True) or {}
    game_mode = parse_game_mode(data.get('game_mode'))

    if game_mode is None:
        error_response = {
            'success': False,
            'error': 'Invalid game mode. Must be "normal" or "daily"'
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    game_logger.log_user_action(request, 'new_game', game_mode=game_mode.value)

    try:
        state = await game_service.new_game(game_mode)
    except Exception as e:
        return _error_response('new_game', e)

    response_data = {
        'success': True,
        'state': state.to_dict()
    }
    game_logger.log_server_response(
        request, 'new_game', True, response_data, max_rounds=state.max_rounds
    )
    game_logger.log_game_event('game_started', request, game_mode=game_mode.value)
    return jsonify(response_data)


@game_bp.route('/game/state', methods=['GET'])
@require_game_service
async def get_state(game_service):
    """Get the current game state."""
    game_logger.log_user_action(request, 'get_state')

    try:
        state = game_service.current_state()
    except Exception as e:
        return _error_response('get_state', e)

    response_data = {
        'success': True,
        'state': state.to_dict()
    }
    game_logger.log_server_response(
        request, 'get_state', True, response_data,
        attempts=state.attempts, game_over=state.game_over
    )
    return jsonify(response_data)


@game_bp.route('/game/guess', methods=['POST'])
@require_game_service
async def make_guess(game_service):
    """Submit a guess for validation and evaluation."""
    data = request.get_json(silent=True)
    if not data or 'guess' not in data:
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 400

    guess = data['guess']
    game_logger.log_user_action(request, 'submit_guess', guess_length=len(str(guess)))

    try:
        state = await game_service.submit_guess(guess)
    except Exception as e:
        return _error_response('submit_guess', e, attempted_guess=guess)

    response_data = {
        'success': True,
        'state': state.to_dict()
    }
    game_logger.log_server_response(
        request, 'submit_guess', True, response_data,
        round=state.attempts, game_over=state.game_over
    )

    if state.game_over:
        game_logger.log_game_event(
            'game_won' if state.won else 'game_lost', request,
            rounds_used=state.attempts, target_word=state.answer,
            game_mode=state.mode.value
        )

    return jsonify(response_data)


@game_bp.route('/game/save', methods=['POST'])
@require_game_service
async def save_result(game_service):
    """Retry saving the result of a finished game."""
    game_logger.log_user_action(request, 'save_result')

    try:
        state = await game_service.save_result()
    except Exception as e:
        return _error_response('save_result', e)

    response_data = {
        'success': True,
        'state': state.to_dict()
    }
    game_logger.log_server_response(request, 'save_result', True, response_data)
    return jsonify(response_data)


@game_bp.route('/daily', methods=['GET'])
@require_game_service
async def daily(game_service):
    """Today's daily challenge status, wins today and the days a daily game was played."""
    game_logger.log_user_action(request, 'daily_status')

    summary = await game_service.daily_summary()
    response_data = {
        'success': True,
        **summary
    }
    game_logger.log_server_response(request, 'daily_status', True, response_data)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
@require_game_service
async def health_check(game_service):
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'game_in_progress': game_service.session is not None and not game_service.session.game_over,
        'word_count': len(game_service.word_bank),
        'stats_backend': type(game_service.store).__name__,
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
