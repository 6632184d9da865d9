"""
View Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import current_app, jsonify

GAME_SERVICE_EXTENSION = 'wordle_game_service'


def require_game_service(f):
    """
    Decorator that passes the application's game service to an async view.
    """
    @wraps(f)
    async def decorated_function(*args, **kwargs):
        game_service = current_app.extensions.get(GAME_SERVICE_EXTENSION)
        if game_service is None:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        return await f(game_service, *args, **kwargs)

    return decorated_function
