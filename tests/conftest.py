# File: tests/conftest.py

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from expense_tracker.api.deps import get_db
from expense_tracker.db.init_db import init_db
from expense_tracker.main import create_application
from expense_tracker.repositories.user_repository import UserRepository
from expense_tracker.services.user_service import UserService


@pytest.fixture()
def engine():
    # One shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def repository(db: Session) -> UserRepository:
    return UserRepository(db)


@pytest.fixture()
def service(repository: UserRepository) -> UserService:
    return UserService(repository)


@pytest.fixture()
def client(session_factory) -> Generator[TestClient, None, None]:
    app = create_application(initialize_db=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
