"""
Utility modules for the hand gesture classifier.
"""

from .config import ConfigManager, ClassifierConfig
from .logger import Logger

__all__ = [
    "ConfigManager",
    "ClassifierConfig",
    "Logger",
]
