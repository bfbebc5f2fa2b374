"""Configuration handling for the bootstrap validator."""

from .models import BootstrapSettings, PodmanSettings
from .loader import ConfigLoader

__all__ = [
    "BootstrapSettings",
    "PodmanSettings",
    "ConfigLoader",
]
