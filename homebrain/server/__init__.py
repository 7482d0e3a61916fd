"""
HTTP server for the HomeBrain command surface.
"""

from homebrain.server.app import create_app, run_server

__all__ = ["create_app", "run_server"]
