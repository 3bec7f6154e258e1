from pathlib import Path
from typing import List, Optional

import pytest

from config import Settings


class FakeChunk:
    def __init__(self, text: Optional[str]):
        self.text = text


class FakeModels:
    """Stands in for client.models: a model listing probe and a streaming call"""

    def __init__(self, fragments=None, probe_error=None, stream_error=None, fail_after=None):
        self.fragments = list(fragments or [])
        self.probe_error = probe_error
        self.stream_error = stream_error
        self.fail_after = fail_after
        self.list_calls = []
        self.stream_calls = []

    def list(self, config=None):
        self.list_calls.append(config)
        if self.probe_error is not None:
            raise self.probe_error
        return iter(["models/gemini-2.5-pro"])

    def generate_content_stream(self, model, contents, config=None):
        self.stream_calls.append({"model": model, "contents": contents, "config": config})
        return self._stream()

    def _stream(self):
        for i, fragment in enumerate(self.fragments):
            if self.fail_after is not None and i == self.fail_after:
                raise self.stream_error
            yield FakeChunk(fragment)
        if self.stream_error is not None and self.fail_after is None:
            raise self.stream_error


class FakeClient:
    def __init__(self, models: FakeModels, api_key: Optional[str] = None):
        self.models = models
        self.api_key = api_key


class FakeClientFactory:
    """Records the credentials it was called with and hands out one FakeClient"""

    def __init__(self, models: FakeModels):
        self.models = models
        self.api_keys: List[str] = []

    def __call__(self, api_key=None):
        self.api_keys.append(api_key)
        return FakeClient(self.models, api_key=api_key)


class ScriptedAsk:
    """Prompt function replaying scripted answers; exception types are raised"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls = []

    def __call__(self, message, default=None, password=False):
        self.calls.append({"message": message, "default": default, "password": password})
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        answer = self.answers.pop(0)
        if isinstance(answer, type) and issubclass(answer, BaseException):
            raise answer()
        return answer


class RecordingProgress:
    def __init__(self):
        self.started = False
        self.stopped = False
        self.values = []
        self.completed = 0

    def start(self):
        self.started = True

    def advance(self, amount):
        self.completed += amount
        self.values.append(self.completed)

    def stop(self):
        self.stopped = True


@pytest.fixture
def chart_dir(tmp_path) -> Path:
    directory = tmp_path / "chart"
    directory.mkdir()
    (directory / "track.mp3").write_bytes(b"ID3 target track")
    return directory


@pytest.fixture
def assets(tmp_path):
    prompt = tmp_path / "chart_prompt.md"
    prompt.write_text("Write a chart.", encoding="utf-8")
    reference = tmp_path / "example.mp3"
    reference.write_bytes(b"ID3 reference track")
    return prompt, reference


@pytest.fixture
def test_settings(tmp_path, assets) -> Settings:
    prompt, reference = assets
    return Settings(
        _env_file=None,
        google_api_key=None,
        chart_prompt_path=prompt,
        chart_reference_audio_path=reference,
        log_file=tmp_path / "maichart.log",
    )
