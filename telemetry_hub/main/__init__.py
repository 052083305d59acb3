"""
Main module - Main/Composition Root Layer

Builds the settings, the dependency container and the FastAPI
application, and hosts the process entry point.
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
