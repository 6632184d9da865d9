"""
Wordle Daily Application Package

Single-player word-guessing game: guess evaluation, the game session state
machine, the daily challenge and player statistics, exposed to the UI through
a small JSON API.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Ready-made GameService, built from config when omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    from .services.game_service import GameService
    from .services.statistics_store import create_statistics_store
    from .services.word_bank import WordBank
    from .utils.decorators import GAME_SERVICE_EXTENSION
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    CORS(app)

    if game_service is None:
        game_service = GameService(
            WordBank.from_file(app.config.get('WORD_LIST_PATH')),
            create_statistics_store(config_class),
            max_rounds=app.config.get('MAX_ROUNDS', 6),
        )
    app.extensions[GAME_SERVICE_EXTENSION] = game_service

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.statistics_controller import statistics_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(statistics_bp, url_prefix='/api')

    return app
