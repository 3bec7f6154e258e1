import pytest

from generation.content_assembler import AUDIO_MIME_TYPE, THINKING_BUDGET, ContentAssembler
from utils.validators import ValidationError


def make_assembler(assets, model="gemini-2.5-pro"):
    prompt, reference = assets
    return ContentAssembler(prompt_path=prompt, reference_audio_path=reference, model=model)


def test_request_parts_are_prompt_reference_then_track(assets, chart_dir):
    request = make_assembler(assets).execute(chart_dir)

    assert request.model == "gemini-2.5-pro"
    assert len(request.contents) == 1
    content = request.contents[0]
    assert content.role == "user"

    text, reference, target = content.parts
    assert text.text == "Write a chart."
    assert reference.inline_data.data == b"ID3 reference track"
    assert target.inline_data.data == b"ID3 target track"
    assert reference.inline_data.mime_type == AUDIO_MIME_TYPE
    assert target.inline_data.mime_type == AUDIO_MIME_TYPE


def test_request_carries_fixed_thinking_budget(assets, chart_dir):
    request = make_assembler(assets).execute(chart_dir)

    assert request.config.thinking_config.thinking_budget == THINKING_BUDGET == 128


def test_unreadable_track_raises_validation_error(assets, tmp_path):
    with pytest.raises(ValidationError) as excinfo:
        make_assembler(assets).execute(tmp_path)

    assert "track.mp3" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_missing_reference_audio_raises_validation_error(assets, chart_dir):
    prompt, reference = assets
    reference.unlink()

    with pytest.raises(ValidationError) as excinfo:
        make_assembler(assets).execute(chart_dir)

    assert "reference audio" in str(excinfo.value)
