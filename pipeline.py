import logging
import time
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel
from rich.console import Console

from config import Settings, settings
from generation.chart_generator import ChartGenerator, ChartResult, CharacterProgress, ProgressSink
from generation.content_assembler import ContentAssembler
from generation.session_guard import SessionGuard
from utils.prompts import CANCELLED, AskFunction, InputCollector
from utils.validators import ValidationError


class SessionStatus(str, Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"
    FAILED = "failed"    # validated, user-facing error
    ERROR = "error"      # unexpected error


EXIT_CODES = {
    SessionStatus.SUCCESS: 0,
    SessionStatus.CANCELLED: 130,
    SessionStatus.FAILED: 1,
    SessionStatus.ERROR: 1,
}


class SessionOutcome(BaseModel):
    """Final classification of a run"""
    status: SessionStatus
    message: str
    chart_result: Optional[ChartResult] = None
    total_duration: Optional[float] = None

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.status]


class ChartPipeline:
    """
    Main orchestration pipeline for chart generation:
    input collection -> service check -> request assembly -> streaming generation

    Every failure is caught here exactly once and classified into a SessionOutcome.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        console: Optional[Console] = None,
        ask: Optional[AskFunction] = None,
        client_factory: Optional[Callable[..., Any]] = None,
        progress_factory: Optional[Callable[[], ProgressSink]] = None,
    ):
        self.config = config or settings
        self.console = console or Console()
        self.logger = logging.getLogger("Pipeline")

        self.input_collector = InputCollector(
            ask=ask,
            console=self.console,
            env_api_key=self.config.env_api_key,
            default_directory=self.config.chart_default_directory,
        )
        self.session_guard = SessionGuard(client_factory=client_factory)
        self.content_assembler = ContentAssembler(
            prompt_path=self.config.chart_prompt_path,
            reference_audio_path=self.config.chart_reference_audio_path,
            model=self.config.chart_model,
        )
        self.progress_factory = progress_factory or (lambda: CharacterProgress(console=self.console))

        if not self.config.chart_reference_audio_path.is_file():
            self.logger.warning(
                f"Reference audio example not found at {self.config.chart_reference_audio_path}; "
                "place example.mp3 there or set CHART_REFERENCE_AUDIO_PATH"
            )

    def run(self) -> SessionOutcome:
        """
        Execute one chart generation session

        Returns:
            SessionOutcome with status, operator message and chart result
        """
        start_time = time.time()
        self.logger.info("Starting chart generation session")

        try:
            session = self.input_collector.execute()
            if session is CANCELLED:
                self.logger.info("Session cancelled by operator")
                return SessionOutcome(
                    status=SessionStatus.CANCELLED,
                    message="Operation cancelled",
                    total_duration=time.time() - start_time,
                )

            client = self.session_guard.execute(session.api_key)
            request = self.content_assembler.execute(session.chart_dir)
            chart_result = ChartGenerator(client).execute(
                request, session.chart_dir, self.progress_factory()
            )

            duration = time.time() - start_time
            self.logger.info(f"Pipeline completed successfully in {duration:.2f}s")
            self.logger.info(f"Chart result: {chart_result.model_dump()}")

            return SessionOutcome(
                status=SessionStatus.SUCCESS,
                message=f"Chart generated: {chart_result.output_path}",
                chart_result=chart_result,
                total_duration=duration,
            )

        except ValidationError as e:
            self.logger.error(f"Pipeline failed: {e}")
            return SessionOutcome(
                status=SessionStatus.FAILED,
                message=str(e),
                total_duration=time.time() - start_time,
            )

        except Exception as e:
            self.logger.exception(f"Pipeline failed with unexpected error: {e!r}")
            return SessionOutcome(
                status=SessionStatus.ERROR,
                message=f"Unexpected error, see {self.config.log_file} for details",
                total_duration=time.time() - start_time,
            )

        except KeyboardInterrupt:
            self.logger.warning("Session interrupted by operator after input collection")
            return SessionOutcome(
                status=SessionStatus.CANCELLED,
                message="Interrupted, the chart may be incomplete",
                total_duration=time.time() - start_time,
            )
