"""
WebSocket Package

Contains the Socket.IO event handlers for real-time keyboard input.
"""

from .handlers import register_websocket_handlers

__all__ = ['register_websocket_handlers']
