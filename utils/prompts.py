"""
Interactive input collection for the chart generator

Prompts return either the collected value or the CANCELLED outcome when the
operator aborts (Ctrl+C / end of input), so callers never see the terminal's
interrupt exceptions.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.prompt import Prompt

from .validators import InputValidator, ValidationError


class Cancelled:
    """Outcome returned when the operator aborts a prompt"""

    _instance: Optional["Cancelled"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCELLED"

    def __bool__(self) -> bool:
        return False


CANCELLED = Cancelled()

# ask(message, default=..., password=...) -> str
AskFunction = Callable[..., str]


class SessionConfig(BaseModel):
    """Operator input for one run"""
    model_config = ConfigDict(frozen=True)

    chart_dir: Path
    api_key: str


def rich_ask(console: Console) -> AskFunction:
    """Build a prompt function backed by rich's Prompt"""

    def ask(message: str, default: Optional[str] = None, password: bool = False) -> str:
        if default is None:
            return Prompt.ask(message, console=console, password=password, default="", show_default=False)
        return Prompt.ask(message, console=console, password=password, default=default)

    return ask


class InputCollector:
    """Collects and validates the chart directory and API credential"""

    def __init__(
        self,
        ask: Optional[AskFunction] = None,
        console: Optional[Console] = None,
        env_api_key: Optional[str] = None,
        default_directory: str = "./chart",
    ):
        self.console = console or Console()
        self.ask = ask or rich_ask(self.console)
        self.env_api_key = env_api_key
        self.default_directory = default_directory
        self.logger = logging.getLogger(self.__class__.__name__)

    def execute(self) -> Union[SessionConfig, Cancelled]:
        """Run both prompts in order"""
        chart_dir = self.ask_chart_directory()
        if chart_dir is CANCELLED:
            return CANCELLED

        api_key = self.ask_api_key()
        if api_key is CANCELLED:
            return CANCELLED

        return SessionConfig(chart_dir=chart_dir, api_key=api_key)

    def ask_chart_directory(self) -> Union[Path, Cancelled]:
        while True:
            answer = self._ask("Chart directory", default=self.default_directory)
            if answer is CANCELLED:
                return CANCELLED

            try:
                chart_dir = InputValidator.validate_chart_directory(answer or self.default_directory)
            except ValidationError as e:
                self._reject(str(e))
                continue

            self.logger.info(f"Chart directory: {chart_dir}")
            return chart_dir

    def ask_api_key(self) -> Union[str, Cancelled]:
        message = "Google API Key (ENV configured)" if self.env_api_key else "Google API Key"

        while True:
            answer = self._ask(message, password=True)
            if answer is CANCELLED:
                return CANCELLED

            try:
                api_key = InputValidator.validate_api_key(answer, self.env_api_key)
            except ValidationError as e:
                self._reject(str(e))
                continue

            if not answer:
                self.logger.info("Using API key from environment")
            return api_key

    def _ask(self, message: str, **kwargs) -> Union[str, Cancelled]:
        try:
            return self.ask(message, **kwargs)
        except (KeyboardInterrupt, EOFError):
            self.logger.info(f"Prompt cancelled: {message}")
            return CANCELLED

    def _reject(self, reason: str):
        self.console.print(f"[prompt.invalid]{reason}")
