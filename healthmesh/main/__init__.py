"""
Main module - Main/Composition Root Layer

Loads settings, wires the dependency container and builds the FastAPI
application hosting the health query surface.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
