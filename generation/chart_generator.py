import logging
import time
from pathlib import Path
from typing import Iterable, Optional, Protocol

from pydantic import BaseModel
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn

from .content_assembler import GenerationRequest


OUTPUT_FILENAME = "maidata.txt"


class ChartResult(BaseModel):
    """Result of chart generation"""
    output_path: str
    chars_written: int
    fragment_count: int
    generation_time: float
    model_used: str


class ProgressSink(Protocol):
    def start(self) -> None: ...

    def advance(self, amount: int) -> None: ...

    def stop(self) -> None: ...


class CharacterProgress:
    """Indeterminate progress indicator counting characters written"""

    def __init__(self, console: Optional[Console] = None, description: str = "Generating chart..."):
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("(+{task.completed:.0f} chars)"),
            TimeElapsedColumn(),
            console=console,
        )
        self.description = description
        self.task_id: Optional[TaskID] = None

    def start(self) -> None:
        self.progress.start()
        self.task_id = self.progress.add_task(self.description, total=None)

    def advance(self, amount: int) -> None:
        self.progress.advance(self.task_id, amount)

    def stop(self) -> None:
        self.progress.stop()


class ChartGenerator:
    """
    Chart Generator: submits the request as a streaming call and writes each
    text fragment to maidata.txt as it arrives, reporting the running
    character count to the progress sink.

    Fragments are written in receipt order without batching. There are no
    retries; on a mid-stream failure the partial file is left on disk and the
    exception propagates.
    """

    def __init__(self, client):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    def execute(self, request: GenerationRequest, chart_dir: Path, progress: ProgressSink) -> ChartResult:
        """
        Generate the chart for a directory

        Args:
            request: assembled generation request
            chart_dir: directory receiving maidata.txt
            progress: sink for the cumulative character count

        Returns:
            ChartResult describing the written file
        """
        start_time = time.time()
        output_path = Path(chart_dir) / OUTPUT_FILENAME

        self.logger.info(f"Generating chart with {request.model}")
        stream = self.client.models.generate_content_stream(
            model=request.model,
            contents=request.contents,
            config=request.config,
        )

        chars_written = 0
        fragment_count = 0

        progress.start()
        try:
            with open(output_path, "w", encoding="utf-8") as out:
                try:
                    for text in self._fragments(stream):
                        out.write(text)
                        chars_written += len(text)
                        fragment_count += 1
                        progress.advance(len(text))
                except BaseException:
                    self.logger.warning(
                        f"Stream aborted after {chars_written} chars; partial chart left at {output_path}"
                    )
                    raise
        finally:
            progress.stop()

        generation_time = time.time() - start_time
        self.logger.info(
            f"Chart written to {output_path}: {chars_written} chars "
            f"in {fragment_count} fragments ({generation_time:.2f}s)"
        )

        return ChartResult(
            output_path=str(output_path),
            chars_written=chars_written,
            fragment_count=fragment_count,
            generation_time=generation_time,
            model_used=request.model,
        )

    def _fragments(self, stream: Iterable) -> Iterable[str]:
        """Yield the text of each chunk, skipping chunks that carry none"""
        for chunk in stream:
            text = chunk.text
            if not text:
                self.logger.debug("Skipping chunk without text")
                continue
            yield text
