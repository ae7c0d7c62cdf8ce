"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .deepgram_transcriber import DeepgramTranscriber

__all__ = ["AssemblyAITranscriber", "DeepgramTranscriber"]
