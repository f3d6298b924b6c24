"""
WebSocket Event Handlers

Real-time keyboard input: every key press is sent as an event and answered
with the updated game state.
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit

from ..models.game import GameStatus
from ..services.reveal import build_reveal_schedule, schedule_to_dicts
from ..utils.decorators import websocket_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_word_length


def _require_payload(data):
    if data is None:
        return {}
    if not isinstance(data, dict):
        emit('error', {'error': 'Payload must be an object'})
        return None
    return data


def _require_game_id(data):
    payload = _require_payload(data)
    if payload is None:
        return None
    game_id = payload.get('game_id')
    if not game_id:
        emit('error', {'error': 'Game ID is required'})
    return game_id


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket client connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.info(f"WebSocket client disconnected: {request.sid}")

    @socketio.on('new_game')
    @websocket_game_service
    def handle_new_game(data=None, game_service=None):
        """Start a new game; a previous game id in the payload is discarded."""
        data = _require_payload(data)
        if data is None:
            return

        try:
            language = data.get('language', current_app.config['DEFAULT_LANGUAGE'])
            word_length = parse_word_length(data.get('word_length'), current_app.config['DEFAULT_WORD_LENGTH'])
            game_id = game_service.create_new_game(language, word_length)
        except ValueError as e:
            emit('error', {'error': str(e)})
            return

        previous_game_id = data.get('previous_game_id')
        if previous_game_id:
            game_service.delete_game(previous_game_id)

        game_logger.log_user_action(request, 'new_game', game_id, language=language, word_length=word_length)
        emit('game_state', {'game_id': game_id, 'state': asdict(game_service.get_game_state(game_id))})

    @socketio.on('add_letter')
    @websocket_game_service
    def handle_add_letter(data=None, game_service=None):
        game_id = _require_game_id(data)
        if not game_id:
            return

        result = game_service.add_letter(game_id, data.get('letter'))
        if result is None:
            emit('error', {'error': 'Game not found'})
            return

        accepted, state = result
        emit('game_state', {'game_id': game_id, 'accepted': accepted, 'state': asdict(state)})

    @socketio.on('delete_letter')
    @websocket_game_service
    def handle_delete_letter(data=None, game_service=None):
        game_id = _require_game_id(data)
        if not game_id:
            return

        result = game_service.delete_letter(game_id)
        if result is None:
            emit('error', {'error': 'Game not found'})
            return

        accepted, state = result
        emit('game_state', {'game_id': game_id, 'accepted': accepted, 'state': asdict(state)})

    @socketio.on('submit_guess')
    @websocket_game_service
    def handle_submit_guess(data=None, game_service=None):
        """Score the current row and send the result with its reveal schedule."""
        game_id = _require_game_id(data)
        if not game_id:
            return

        result = game_service.submit_guess(game_id)
        if result is None:
            emit('error', {'error': 'Game not found'})
            return

        outcome, state = result
        if outcome is None:
            emit('game_state', {'game_id': game_id, 'accepted': False, 'state': asdict(state)})
            return

        final_status = GameStatus(state.status)
        emit('status_changed', {'game_id': game_id, 'status': GameStatus.EVALUATING.value})
        emit('guess_result', {
            'game_id': game_id,
            'result': outcome.to_dict(),
            'reveal': schedule_to_dicts(build_reveal_schedule(outcome, final_status)),
            'state': asdict(state)
        })

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                rows_used=state.current_row + 1, target_word=state.answer,
                final_guess=outcome.guess, language=state.language
            )
