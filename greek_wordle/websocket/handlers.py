"""
WebSocket Event Handlers

Handles WebSocket events for key-by-key play.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room

from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def _game_id(data):
    """Game id from an event payload, None unless it is a non-empty string."""
    game_id = data.get('game_id') if isinstance(data, dict) else None
    return game_id if isinstance(game_id, str) and game_id else None


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.debug(f"WebSocket disconnected: {request.sid}")

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Start a new game and join its room."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = game_service.create_new_game()
            join_room(_room(game_id))

            game_logger.log_game_event(game_id, 'game_created', request.remote_addr, transport='websocket')

            emit('game_created', {
                'success': True,
                'game_id': game_id,
                'state': asdict(game_service.get_game_state(game_id))
            })

        except Exception as e:
            game_logger.logger.error(f"Error creating game over WebSocket: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join an existing game room to receive its updates."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = _game_id(data)
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            state = game_service.get_game_state(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            join_room(_room(game_id))
            emit('game_state_update', {
                'success': True,
                'state': asdict(state)
            })

        except Exception as e:
            game_logger.logger.error(f"Error joining game over WebSocket: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        try:
            game_id = _game_id(data)
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            leave_room(_room(game_id))
            emit('left_game', {'game_id': game_id})

        except Exception as e:
            game_logger.logger.error(f"Error leaving game over WebSocket: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('key_press')
    def handle_key_press(data):
        """Apply one key press and broadcast the new state."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = _game_id(data)
            key = data.get('key') if isinstance(data, dict) else None
            if not game_id or not isinstance(key, str):
                emit('error', {'error': 'Game ID and key required'})
                return

            result = game_service.press_key(game_id, key)
            if result is None:
                emit('error', {'error': 'Game not found'})
                return

            payload = {
                'game_id': game_id,
                'action': result.action,
                'accepted': result.accepted,
                'shake': result.shake
            }
            if result.submit is not None:
                payload['tiles'] = [tile.to_dict() for tile in result.submit.tiles]
            if result.error:
                payload['error'] = result.error
            emit('key_result', payload)

            if result.shake:
                emit('invalid_guess', {'game_id': game_id, 'error': result.error})

            state = game_service.get_game_state(game_id)
            if result.accepted:
                broadcast_game_state_update(game_id, socketio)

            if result.submit is not None and result.submit.game_over:
                event = 'game_won' if result.submit.won else 'game_lost'
                game_logger.log_game_event(
                    game_id, event, request.remote_addr,
                    attempts=state.current_row + 1, target_word=state.answer, transport='websocket'
                )
                socketio.emit('game_ended', {
                    'game_id': game_id,
                    'won': state.won,
                    'answer': state.answer
                }, room=_room(game_id))

        except Exception as e:
            game_logger.logger.error(f"Error handling key press: {e}")
            emit('error', {'error': str(e)})


def broadcast_game_state_update(game_id, socketio):
    """Broadcast game state update to every client watching a game."""
    game_service = get_game_service()
    if not game_service:
        return

    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('game_state_update', {
        'success': True,
        'state': asdict(state)
    }, room=_room(game_id))
