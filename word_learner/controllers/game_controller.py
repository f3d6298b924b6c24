"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, request, jsonify

from ..config.game_settings import KEYBOARD_LAYOUTS, SUPPORTED_LANGUAGES, WORD_LENGTHS, get_message
from ..models.game import GameStatus
from ..services.reveal import build_reveal_schedule, schedule_to_dicts
from ..utils.decorators import with_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_word_length

game_bp = Blueprint('game', __name__)


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _internal_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


def _log_game_end(game_id, state, guess):
    if not state.game_over:
        return
    event = 'game_won' if state.won else 'game_lost'
    game_logger.log_game_event(
        game_id, event, request.remote_addr,
        rows_used=state.current_row + 1, target_word=state.answer,
        final_guess=guess, language=state.language
    )


def _guess_response(game_id, action, outcome, state):
    response_data = {
        'success': True,
        'accepted': outcome is not None,
        'state': asdict(state)
    }
    if outcome is not None:
        response_data['result'] = outcome.to_dict()
        response_data['reveal'] = schedule_to_dicts(
            build_reveal_schedule(outcome, GameStatus(state.status))
        )

    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        accepted=outcome is not None, row=state.current_row, game_over=state.game_over
    )
    if outcome is not None:
        _log_game_end(game_id, state, outcome.guess)
    return jsonify(response_data)


@game_bp.route('/new_game', methods=['POST'])
@with_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        language = data.get('language', current_app.config['DEFAULT_LANGUAGE'])
        word_length = parse_word_length(data.get('word_length'), current_app.config['DEFAULT_WORD_LENGTH'])

        game_logger.log_user_action(request, 'new_game', language=language, word_length=word_length)

        game_id = game_service.create_new_game(language, word_length)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=word_length, max_rows=state.max_rows
        )

        return jsonify(response_data)

    except ValueError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400
    except Exception as e:
        return _internal_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@with_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state.current_row, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@with_game_service
def add_letter(game_id, game_service):
    """Type one letter into the current row."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'letter' not in data:
            error_response = {
                'success': False,
                'error': 'Letter is required'
            }
            game_logger.log_server_response(request, 'add_letter', False, error_response, game_id)
            return jsonify(error_response), 400

        letter = data['letter']
        game_logger.log_user_action(request, 'add_letter', game_id)

        result = game_service.add_letter(game_id, letter)
        if result is None:
            return _game_not_found('add_letter', game_id)

        accepted, state = result
        response_data = {
            'success': True,
            'accepted': accepted,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'add_letter', True, response_data, game_id, accepted=accepted)
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('add_letter', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['DELETE'])
@with_game_service
def delete_letter(game_id, game_service):
    """Remove the last letter of the current row."""
    try:
        game_logger.log_user_action(request, 'delete_letter', game_id)

        result = game_service.delete_letter(game_id)
        if result is None:
            return _game_not_found('delete_letter', game_id)

        accepted, state = result
        response_data = {
            'success': True,
            'accepted': accepted,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'delete_letter', True, response_data, game_id, accepted=accepted)
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('delete_letter', e, game_id)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@with_game_service
def submit_guess(game_id, game_service):
    """Submit the current row for evaluation."""
    try:
        game_logger.log_user_action(request, 'submit_guess', game_id)

        result = game_service.submit_guess(game_id)
        if result is None:
            return _game_not_found('submit_guess', game_id)

        outcome, state = result
        return _guess_response(game_id, 'submit_guess', outcome, state)

    except Exception as e:
        return _internal_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@with_game_service
def make_guess(game_id, game_service):
    """Type a whole word into the current row and submit it."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'make_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = str(data['guess'])
        game_logger.log_user_action(request, 'make_guess', game_id, guess_length=len(guess))

        result = game_service.make_guess(game_id, guess)
        if result is None:
            return _game_not_found('make_guess', game_id)

        outcome, state = result
        return _guess_response(game_id, 'make_guess', outcome, state)

    except Exception as e:
        return _internal_error('make_guess', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@with_game_service
def delete_game(game_id, game_service):
    """Discard a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)
        return jsonify(response_data), 404

    except Exception as e:
        return _internal_error('delete_game', e, game_id)


@game_bp.route('/languages', methods=['GET'])
def get_languages():
    """List supported languages, word lengths, keyboard layouts and button labels."""
    labels = {
        language: {key: get_message(language, key) for key in ('new_game', 'enter', 'delete')}
        for language in SUPPORTED_LANGUAGES
    }
    return jsonify({
        'success': True,
        'languages': SUPPORTED_LANGUAGES,
        'word_lengths': WORD_LENGTHS,
        'keyboard_layouts': KEYBOARD_LAYOUTS,
        'labels': labels,
        'max_rows': current_app.config['MAX_ROWS'],
        'default_language': current_app.config['DEFAULT_LANGUAGE'],
        'default_word_length': current_app.config['DEFAULT_WORD_LENGTH']
    })


@game_bp.route('/health', methods=['GET'])
@with_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_games(),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
