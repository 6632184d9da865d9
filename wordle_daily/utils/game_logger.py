"""
Game Logger Module

This module provides structured logging for player actions, server responses,
game events and statistics degradation.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the game.

    Features:
    - Player action tracking with client identification
    - Server response logging
    - Game event logging (games started, won, lost, results saved)
    - Warnings when statistics are served from defaults
    - JSON structured logs for easy parsing
    """

    LOGGER_NAME = 'wordle_game'

    def __init__(self):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger(self.LOGGER_NAME)

    def configure(self, log_dir: Optional[str] = "logs", level: str = "INFO") -> logging.Logger:
        """
        Attach the file and console handlers.

        Args:
            log_dir: Directory for daily log files, None for console only
            level: Level name for the file handler
        """
        logger = self.logger
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
            file_handler.setLevel(logger.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)
        else:
            self.log_dir = None

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Extract client identity information from request."""
        if request is None:
            return {'user_ip': 'system'}
        return {'user_ip': getattr(request, 'remote_addr', None) or 'unknown'}

    def _create_log_entry(self,
                         event_type: str,
                         action: str,
                         user_info: Dict[str, Optional[str]],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log player actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'get_state')
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry(
            'USER_ACTION', action, self._get_user_identity(request), details
        )
        self.logger.info(log_message)

    def log_server_response(self,
                           request,
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(
            event_type, action, self._get_user_identity(request), details
        )

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self, event: str, request=None, **kwargs):
        """
        Log game-specific events (wins, losses, saved results).

        Args:
            event: Type of game event (e.g., 'game_won', 'game_lost', 'result_saved')
            request: Request that triggered the event, None for internal events
            **kwargs: Additional game details
        """
        log_message = self._create_log_entry(
            'GAME_EVENT', event, self._get_user_identity(request), kwargs
        )
        if event.endswith('_failed'):
            self.logger.error(log_message)
        else:
            self.logger.info(log_message)

    def log_degradation(self, action: str, error: Exception, **kwargs):
        """Log that default values are being served in place of stored data."""
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        log_message = self._create_log_entry('STATS_DEGRADED', action, {'user_ip': 'system'}, details)
        self.logger.warning(log_message)

    def log_error(self, request, error: Exception, action: str):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry(
            'ERROR', action, self._get_user_identity(request), details
        )
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Trim large structures and hide the answer of a running game."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'attempts': state.get('attempts'),
                'max_rounds': state.get('max_rounds'),
                'status': state.get('status'),
                'game_mode': state.get('game_mode'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        if self.log_dir is None:
            return {'error': 'File logging is disabled'}

        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'degraded': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'STATS_DEGRADED' in line:
                            stats['degraded'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}

        return stats


# Global logger instance, configured by the application factory
game_logger = GameLogger()
