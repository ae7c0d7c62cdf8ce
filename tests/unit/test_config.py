import pytest

from transcription_api.config import DEFAULT_ALLOWED_EXTENSIONS, load_config

CONFIG_ENV_VARS = [
    "DATABASE_URL",
    "DATABASE_CREATE_TABLES",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_DB",
    "DEEPGRAM_API_KEY",
    "DEEPGRAM_PROJECT_ID",
    "DEEPGRAM_MODEL",
    "DEEPGRAM_LANGUAGE",
    "ASSEMBLYAI_API_KEY",
    "ASSEMBLYAI_POLL_INTERVAL_SECONDS",
    "ASSEMBLYAI_MAX_POLL_ATTEMPTS",
    "MAX_UPLOAD_SIZE_BYTES",
    "ALLOWED_AUDIO_EXTENSIONS",
    "TRANSCRIPTION_PROVIDER",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
class TestLoadConfig:
    def test_defaults(self):
        config = load_config()

        assert config.deepgram.api_key == ""
        assert config.deepgram.project_id is None
        assert config.assemblyai.poll.interval_seconds == 1.0
        assert config.assemblyai.poll.max_attempts == 600
        assert config.upload.max_file_size_bytes == 1024**3
        assert config.upload.allowed_extensions == DEFAULT_ALLOWED_EXTENSIONS
        assert config.default_provider == "deepgram"
        assert config.database.connection_url == (
            "postgresql+psycopg://:@postgres:5432/transcriptions"
        )

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEEPGRAM_API_KEY", "dg")
        monkeypatch.setenv("DEEPGRAM_PROJECT_ID", "proj")
        monkeypatch.setenv("ASSEMBLYAI_POLL_INTERVAL_SECONDS", "2.5")
        monkeypatch.setenv("ASSEMBLYAI_MAX_POLL_ATTEMPTS", "40")
        monkeypatch.setenv("ALLOWED_AUDIO_EXTENSIONS", " .WAV, mp3 ,")
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "AssemblyAI")
        monkeypatch.setenv("DATABASE_CREATE_TABLES", "false")

        config = load_config()

        assert config.deepgram.api_key == "dg"
        assert config.deepgram.project_id == "proj"
        assert config.assemblyai.poll.interval_seconds == 2.5
        assert config.assemblyai.poll.max_attempts == 40
        assert config.upload.allowed_extensions == ("wav", "mp3")
        assert config.default_provider == "assemblyai"
        assert config.database.create_tables is False

    def test_database_url_overrides_postgres_settings(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///local.db")
        monkeypatch.setenv("POSTGRES_HOST", "db.internal")

        assert load_config().database.connection_url == "sqlite:///local.db"
