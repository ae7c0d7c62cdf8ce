"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field

from transcription_api.domain.models import PollPolicy

DEFAULT_ALLOWED_EXTENSIONS = ("wav", "mp3", "m4a", "flac", "ogg", "webm")


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str
    url: str | None = None
    create_tables: bool = True

    @computed_field
    @property
    def connection_url(self) -> str:
        """Returns the explicit URL if given, else the PostgreSQL connection URL."""
        if self.url:
            return self.url
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class DeepgramConfig(BaseModel, frozen=True):
    """Deepgram API configuration."""

    api_key: str = ""
    project_id: str | None = None
    base_url: str = "https://api.deepgram.com/v1"
    model: str = "nova-2"
    language: str = "en-US"
    timeout_seconds: float = 300.0


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str = ""
    base_url: str = "https://api.assemblyai.com/v2"
    language: str = "en"
    speaker_labels: bool = False
    timeout_seconds: float = 60.0
    poll: PollPolicy = PollPolicy()


class UploadConfig(BaseModel, frozen=True):
    """Limits applied to uploaded audio files."""

    max_file_size_bytes: int = 1024 * 1024 * 1024
    allowed_extensions: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    deepgram: DeepgramConfig
    assemblyai: AssemblyAIConfig
    upload: UploadConfig = UploadConfig()
    default_provider: str = "deepgram"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_extensions(name: str) -> tuple[str, ...]:
    value = os.getenv(name)
    if not value:
        return DEFAULT_ALLOWED_EXTENSIONS
    return tuple(ext.strip().lower().lstrip(".") for ext in value.split(",") if ext.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "transcriptions"),
            url=os.getenv("DATABASE_URL") or None,
            create_tables=_env_bool("DATABASE_CREATE_TABLES", True),
        ),
        deepgram=DeepgramConfig(
            api_key=os.getenv("DEEPGRAM_API_KEY", ""),
            project_id=os.getenv("DEEPGRAM_PROJECT_ID") or None,
            model=os.getenv("DEEPGRAM_MODEL", "nova-2"),
            language=os.getenv("DEEPGRAM_LANGUAGE", "en-US"),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            poll=PollPolicy(
                interval_seconds=float(
                    os.getenv("ASSEMBLYAI_POLL_INTERVAL_SECONDS", "1.0")
                ),
                max_attempts=int(os.getenv("ASSEMBLYAI_MAX_POLL_ATTEMPTS", "600")),
            ),
        ),
        upload=UploadConfig(
            max_file_size_bytes=int(
                os.getenv("MAX_UPLOAD_SIZE_BYTES", str(1024 * 1024 * 1024))
            ),
            allowed_extensions=_env_extensions("ALLOWED_AUDIO_EXTENSIONS"),
        ),
        default_provider=os.getenv("TRANSCRIPTION_PROVIDER", "deepgram").lower(),
    )
