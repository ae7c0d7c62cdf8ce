from .speech import router as speech_router
from .transcribe import router as transcribe_router
from .transcriptions import router as transcriptions_router

__all__ = ["speech_router", "transcribe_router", "transcriptions_router"]
