"""
Game Logger Module

Structured logging for user actions, server responses and game events. Every
entry is a single JSON document so the log file can be parsed line by line.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for the Wordle game server.

    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging (wins, losses, restarts)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger('wordle_game')
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO') -> None:
        """
        (Re)build the handlers.

        Console only receives warnings and errors. A dated log file is written
        under ``log_dir`` when one is given.
        """
        logger = self.logger
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Any],
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

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'key_press')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: str = 'system',
                       **kwargs):
        """
        Log game-specific events.

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'game_restarted')
            user_ip: Originating address, 'system' for server-side events
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip}
        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """Log unexpected errors with full context."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }

        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep response logs short and never include a running game's answer."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_round': state.get('current_round'),
                'max_guesses': state.get('max_guesses'),
                'outcome': state.get('outcome'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by event type (used by the health endpoint)."""
        if self.log_dir is None:
            return {'error': 'File logging disabled'}

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
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if not line.strip():
                    continue
                stats['total_entries'] += 1
                if 'USER_ACTION' in line:
                    stats['user_actions'] += 1
                elif 'SERVER_RESPONSE' in line:
                    stats['server_responses'] += 1
                elif 'GAME_EVENT' in line:
                    stats['game_events'] += 1
                elif '"ERROR"' in line:
                    stats['errors'] += 1

        return stats


# Global logger instance, handlers are rebuilt by the app factory
game_logger = GameLogger()
