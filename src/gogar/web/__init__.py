"""
Web module serving the game over HTTP.
"""

from gogar.web.server import create_app

__all__ = ["create_app"]
