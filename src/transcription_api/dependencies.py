"""Dependency injection configuration for the transcription API."""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Annotated

import requests
from fastapi import Depends, Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from transcription_api.config import AppConfig
from transcription_api.domain import TranscriptNormalizer
from transcription_api.handlers import RecordHandler, TranscriptionHandler
from transcription_api.infrastructure import AssemblyAITranscriber, DeepgramTranscriber
from transcription_api.infrastructure.interfaces import (
    TranscriptionProvider,
    TranscriptionStore,
)
from transcription_api.logging import setup_logging
from transcription_api.repositories import TranscriptionRepository

logger = setup_logging()


class ServiceContainer:
    """Long-lived collaborators built once per process and shared by requests."""

    def __init__(
        self,
        config: AppConfig,
        store: TranscriptionStore,
        providers: Mapping[str, TranscriptionProvider],
        http_session: requests.Session | None = None,
        engine: Engine | None = None,
    ):
        self.config = config
        self.store = store
        self.providers = providers
        self._http_session = http_session
        self._engine = engine

    def close(self) -> None:
        """Releases the HTTP connection pool and database engine."""
        if self._http_session is not None:
            self._http_session.close()
        if self._engine is not None:
            self._engine.dispose()
        logger.info("Service container closed")


def build_container(config: AppConfig) -> ServiceContainer:
    """Creates the database engine, HTTP session and provider adapters."""
    engine = create_engine(config.database.connection_url, pool_pre_ping=True)
    if config.database.create_tables:
        SQLModel.metadata.create_all(engine)
        logger.info("Database initialized", extra={"host": config.database.host})

    @contextmanager
    def session_factory() -> Iterator[Session]:
        """Creates a database session context manager."""
        with Session(engine) as session:
            yield session

    http_session = requests.Session()
    normalizer = TranscriptNormalizer()
    providers: dict[str, TranscriptionProvider] = {
        DeepgramTranscriber.name: DeepgramTranscriber(
            config.deepgram, http_session, normalizer
        ),
        AssemblyAITranscriber.name: AssemblyAITranscriber(
            config.assemblyai, http_session, normalizer
        ),
    }

    logger.info(
        "Speech providers configured",
        extra={
            "default_provider": config.default_provider,
            "configured": [name for name, p in providers.items() if p.is_configured],
        },
    )

    return ServiceContainer(
        config=config,
        store=TranscriptionRepository(session_factory),
        providers=providers,
        http_session=http_session,
        engine=engine,
    )


def get_container(request: Request) -> ServiceContainer:
    """Returns the container attached to the running application."""
    return request.app.state.container


ContainerDep = Annotated[ServiceContainer, Depends(get_container)]


def get_deepgram(container: ContainerDep) -> DeepgramTranscriber:
    """Returns the Deepgram adapter used for credential checks."""
    return container.providers[DeepgramTranscriber.name]


def get_transcription_handler(container: ContainerDep) -> TranscriptionHandler:
    """Returns a transcription handler bound to the shared collaborators."""
    return TranscriptionHandler(
        container.providers,
        container.store,
        container.config.upload,
        container.config.default_provider,
    )


def get_record_handler(container: ContainerDep) -> RecordHandler:
    """Returns a record handler bound to the shared store."""
    return RecordHandler(container.store)
