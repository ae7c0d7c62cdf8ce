from transcription_api.app import create_app
from transcription_api.config import AppConfig, load_config

__all__ = ["AppConfig", "create_app", "load_config"]
