"""
Utility modules for the chart generator
"""

from .validators import (
    InputValidator,
    ValidationError,
    ServiceUnavailableError,
    setup_logging
)
from .prompts import InputCollector, SessionConfig, Cancelled, CANCELLED

__all__ = [
    'InputValidator',
    'ValidationError',
    'ServiceUnavailableError',
    'setup_logging',
    'InputCollector',
    'SessionConfig',
    'Cancelled',
    'CANCELLED'
]
