import logging
from pathlib import Path
from typing import List

from google.genai import types
from pydantic import BaseModel, ConfigDict

from utils.validators import TRACK_FILENAME, ValidationError


AUDIO_MIME_TYPE = "audio/mp3"
THINKING_BUDGET = 128


class GenerationRequest(BaseModel):
    """A single streaming generation request: prompt, reference audio, target audio"""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model: str
    contents: List[types.Content]
    config: types.GenerateContentConfig


class ContentAssembler:
    """
    Content Assembler: builds the multimodal request from the bundled
    instructional prompt, the bundled reference audio and the operator's track.

    Audio parts are passed as inline bytes; the SDK base64-encodes inline data
    on the wire.
    """

    def __init__(self, prompt_path: Path, reference_audio_path: Path, model: str):
        self.prompt_path = Path(prompt_path)
        self.reference_audio_path = Path(reference_audio_path)
        self.model = model
        self.logger = logging.getLogger(self.__class__.__name__)

    def execute(self, chart_dir: Path) -> GenerationRequest:
        prompt = self._read(self.prompt_path, "instructional prompt").decode("utf-8")
        reference_audio = self._read(self.reference_audio_path, "reference audio example")
        target_audio = self._read(Path(chart_dir) / TRACK_FILENAME, TRACK_FILENAME)

        self.logger.info(
            f"Assembled request: prompt {len(prompt)} chars, "
            f"reference {len(reference_audio)} bytes, track {len(target_audio)} bytes"
        )

        return GenerationRequest(
            model=self.model,
            contents=[
                types.Content(
                    role="user",
                    parts=[
                        types.Part.from_text(text=prompt),
                        types.Part.from_bytes(data=reference_audio, mime_type=AUDIO_MIME_TYPE),
                        types.Part.from_bytes(data=target_audio, mime_type=AUDIO_MIME_TYPE),
                    ],
                )
            ],
            config=types.GenerateContentConfig(
                thinking_config=types.ThinkingConfig(thinking_budget=THINKING_BUDGET),
            ),
        )

    def _read(self, path: Path, label: str) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            self.logger.exception(f"Could not read {label} at {path}: {e}")
            raise ValidationError(f"Could not read {label}: {path}") from e
