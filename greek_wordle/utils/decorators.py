"""
Route Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import jsonify

from ..services.game_service import get_game_service


def require_game(f):
    """
    Decorator for endpoints that act on an existing game.

    Resolves the game service and checks ``game_id`` exists. The wrapped
    view receives the service as the ``game_service`` keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_id = kwargs.get('game_id')
        if game_id not in game_service.games:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
