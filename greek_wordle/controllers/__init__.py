"""
Controllers Package

HTTP endpoints exposed to the browser client.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
