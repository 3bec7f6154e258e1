"""
Generation module: chart generation through Gemini

This module contains components for:
- Service availability checks (Session Guard)
- Multimodal request assembly (prompt + reference audio + track)
- Streaming the generated chart to maidata.txt
"""

from .session_guard import SessionGuard
from .content_assembler import ContentAssembler, GenerationRequest
from .chart_generator import ChartGenerator, ChartResult, CharacterProgress

__all__ = [
    'SessionGuard',
    'ContentAssembler',
    'GenerationRequest',
    'ChartGenerator',
    'ChartResult',
    'CharacterProgress'
]
