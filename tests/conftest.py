"""
Shared pytest fixtures for transcription API tests.

Test categories:
    - Unit tests: mocked collaborators, no database, no network
    - Integration tests: the FastAPI app over an in-memory SQLite engine,
      with speech providers replaced by mocks

Provider adapters are exercised against a mocked requests.Session that
returns real requests.Response objects, so no test reaches the network.
"""

import os
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

os.environ.setdefault("LOG_LEVEL", "WARNING")

from tests.factories import TEST_MAX_UPLOAD_BYTES  # noqa: E402
from transcription_api.app import create_app  # noqa: E402
from transcription_api.config import (  # noqa: E402
    AppConfig,
    AssemblyAIConfig,
    DatabaseConfig,
    DeepgramConfig,
    UploadConfig,
)
from transcription_api.dependencies import ServiceContainer  # noqa: E402
from transcription_api.domain import (  # noqa: E402
    CanonicalTranscriptionResult,
    PollPolicy,
    TranscriptNormalizer,
)
from transcription_api.infrastructure import (  # noqa: E402
    AssemblyAITranscriber,
    DeepgramTranscriber,
)
from transcription_api.repositories import TranscriptionRepository  # noqa: E402


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def app_config() -> AppConfig:
    """Configuration with fake credentials, a small upload limit and no poll delay."""
    return AppConfig(
        database=DatabaseConfig(
            host="localhost",
            port="5432",
            user="test",
            password="test",
            database="test",
            url="sqlite://",
        ),
        deepgram=DeepgramConfig(api_key="dg-test-key"),
        assemblyai=AssemblyAIConfig(
            api_key="aai-test-key",
            poll=PollPolicy(interval_seconds=0.0, max_attempts=5),
        ),
        upload=UploadConfig(max_file_size_bytes=TEST_MAX_UPLOAD_BYTES),
    )


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine shared across threads, with tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> TranscriptionRepository:
    @contextmanager
    def session_factory() -> Iterator[Session]:
        with Session(engine) as session:
            yield session

    return TranscriptionRepository(session_factory)


# =============================================================================
# Provider adapters
# =============================================================================


@pytest.fixture
def http_session() -> MagicMock:
    """requests.Session stand-in; set request.return_value or side_effect."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def deepgram(app_config: AppConfig, http_session: MagicMock) -> DeepgramTranscriber:
    return DeepgramTranscriber(app_config.deepgram, http_session, TranscriptNormalizer())


@pytest.fixture
def assemblyai(app_config: AppConfig, http_session: MagicMock) -> AssemblyAITranscriber:
    return AssemblyAITranscriber(
        app_config.assemblyai, http_session, TranscriptNormalizer()
    )


def _mock_provider(spec: type, name: str, display_name: str) -> MagicMock:
    provider = MagicMock(spec=spec)
    provider.name = name
    provider.display_name = display_name
    provider.is_configured = True
    provider.transcribe.return_value = CanonicalTranscriptionResult(
        text="hello world", confidence=0.95
    )
    return provider


@pytest.fixture
def mock_deepgram() -> MagicMock:
    return _mock_provider(DeepgramTranscriber, "deepgram", "Deepgram")


@pytest.fixture
def mock_assemblyai() -> MagicMock:
    return _mock_provider(AssemblyAITranscriber, "assemblyai", "AssemblyAI")


# =============================================================================
# Application
# =============================================================================


@pytest.fixture
def container(
    app_config: AppConfig,
    repository: TranscriptionRepository,
    mock_deepgram: MagicMock,
    mock_assemblyai: MagicMock,
) -> ServiceContainer:
    return ServiceContainer(
        config=app_config,
        store=repository,
        providers={"deepgram": mock_deepgram, "assemblyai": mock_assemblyai},
    )


@pytest.fixture
def client(container: ServiceContainer) -> Generator[TestClient, None, None]:
    """Test client running the app lifespan with the test container."""
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


@pytest.fixture
def sample_wav() -> bytes:
    """10 KB of audio-like bytes."""
    return b"RIFF" + b"\x00" * (10 * 1024 - 4)
