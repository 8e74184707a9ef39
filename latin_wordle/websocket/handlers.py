"""
WebSocket Event Handlers

Lets a browser play a round over Socket.IO. Events for one game are
applied in arrival order, each against the latest round state.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def broadcast_game_state_update(game_id, socketio):
    """Send the current state of a game to everyone in its room."""
    game_service = get_game_service()
    if not game_service:
        return

    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('game_state_update', {
        'game_id': game_id,
        'state': asdict(state)
    }, room=_room(game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room and receive its current state."""
        join_room(_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id, transport='websocket')

        emit('game_state_update', {
            'game_id': game_id,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        """Leave a game room."""
        leave_room(_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id, transport='websocket')

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, game_id=None):
        """Submit a guess and broadcast the updated state."""
        guess = data.get('guess')
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            emit('error', {'error': error, 'game_id': game_id})
            return

        state = game_service.make_guess(game_id, guess)
        if state is None:
            emit('error', {'error': 'Failed to process guess', 'game_id': game_id})
            return

        if state.game_over:
            event = 'game_won' if state.won else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                rounds_used=state.current_round, target_word=state.answer,
                final_guess=guess
            )

        join_room(_room(game_id))
        broadcast_game_state_update(game_id, socketio)

    @socketio.on('reset_game')
    @websocket_game_required
    def handle_reset_game(data, game_service=None, game_id=None):
        """Start a new round in place of the current one."""
        game_logger.log_user_action(request, 'reset_game', game_id, transport='websocket')

        game_service.reset_game(game_id)
        game_logger.log_game_event(game_id, 'round_reset', request.remote_addr)

        join_room(_room(game_id))
        broadcast_game_state_update(game_id, socketio)
