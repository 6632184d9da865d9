"""
Statistics Controller

Serves the player statistics shown on the menu screen.
"""

from flask import Blueprint, request, jsonify
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

statistics_bp = Blueprint('statistics', __name__)


@statistics_bp.route('/statistics', methods=['GET'])
@require_game_service
async def get_statistics(game_service):
    """Player statistics plus today's daily challenge flag."""
    game_logger.log_user_action(request, 'get_statistics')

    stats = await game_service.player_statistics()
    today, daily_played = await game_service.daily_status()

    response_data = {
        'success': True,
        'statistics': stats.to_dict(),
        'daily_played': daily_played,
        'date': today.isoformat(),
        'degraded': stats.degraded or daily_played is None
    }
    game_logger.log_server_response(
        request, 'get_statistics', True, response_data, degraded=response_data['degraded']
    )
    return jsonify(response_data)
