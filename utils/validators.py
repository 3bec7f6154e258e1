"""
Validation utilities and error types for the chart generator
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union


TRACK_FILENAME = "track.mp3"
MISSING_TRACK_MESSAGE = f"Directory is missing the file {TRACK_FILENAME}"


class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass


class ServiceUnavailableError(ValidationError):
    """The generation service could not be reached or rejected the credential"""

    def __init__(self, message: str = "Google API is unavailable, check your proxy and API key"):
        super().__init__(message)


class InputValidator:
    """Utility class for validating operator input"""

    @staticmethod
    def track_path(chart_dir: Union[str, Path]) -> Path:
        return Path(chart_dir).expanduser().resolve() / TRACK_FILENAME

    @staticmethod
    def validate_chart_directory(chart_dir: Union[str, Path]) -> Path:
        """Validate that the chart directory holds a regular track.mp3 file"""
        try:
            track = InputValidator.track_path(chart_dir)
            is_file = track.is_file() and os.access(track, os.R_OK)
        except (OSError, ValueError, RuntimeError):
            is_file = False

        if not is_file:
            raise ValidationError(MISSING_TRACK_MESSAGE)

        return track.parent

    @staticmethod
    def validate_api_key(api_key: Optional[str], env_api_key: Optional[str] = None) -> str:
        """Resolve the credential, falling back to the environment value for empty input"""
        if api_key:
            return api_key

        if env_api_key:
            return env_api_key

        raise ValidationError("Google API key is required")


def setup_logging(
    log_file: Optional[Path] = None,
    level: Union[str, int] = logging.INFO,
    console: bool = False,
) -> logging.Logger:
    """Setup logging for the chart generator"""
    handlers: List[logging.Handler] = []

    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    if console:
        handlers.append(logging.StreamHandler())

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    return logging.getLogger()
