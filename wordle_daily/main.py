"""
Wordle Daily - Main Entry Point

Loads the word list, connects the statistics store and starts the Flask
application that the game UI talks to.
"""

import os

from . import create_app
from .config import config
from .errors import ConfigurationError, PersistenceError
from .utils.decorators import GAME_SERVICE_EXTENSION
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Initializing services...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")
        print(f"✓ Statistics backend: {config_class.STATS_BACKEND}")
    except (ConfigurationError, PersistenceError) as e:
        print(f"✗ Failed to start: {e.message}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise SystemExit(1)

    game_logger.logger.info("Wordle Daily server starting")

    print(f"\nStarting Wordle Daily on {config_class.HOST}:{config_class.PORT}")
    print(f"Debug mode: {config_class.DEBUG}")
    print("=" * 50)

    try:
        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Daily server shutting down (KeyboardInterrupt)")
    finally:
        app.extensions[GAME_SERVICE_EXTENSION].close()


if __name__ == '__main__':
    main()
