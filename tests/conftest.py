"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SEED_TEMPLATES", "false")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes")

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from skillshare import models  # noqa: E402
from skillshare.application.planning.use_cases.templates import SeedTemplatesUseCase  # noqa: E402
from skillshare.database import Base, create_db_engine, get_db  # noqa: E402
from skillshare.domain.common.value_objects.ids import UserId  # noqa: E402
from skillshare.domain.identity.entities.user import User  # noqa: E402
from skillshare.domain.planning.entities.learning_plan import LearningPlan  # noqa: E402
from skillshare.domain.planning.services.plan_tree_builder import PlanTreeBuilder  # noqa: E402
from skillshare.infrastructure.identity.dependencies import get_current_user  # noqa: E402
from skillshare.infrastructure.identity.repositories.user_repository import (  # noqa: E402
    UserRepository,
)
from skillshare.infrastructure.planning.repositories.learning_plan_repository import (  # noqa: E402
    LearningPlanRepository,
)
from skillshare.infrastructure.planning.templates.catalogue import (  # noqa: E402
    PREDEFINED_TEMPLATES,
)
from skillshare.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Shared connection with foreign keys enforced, so cascades behave as in production
test_engine = create_db_engine(TEST_DATABASE_URL)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

SYSTEM_EMAIL = "system@skillshare.local"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def _make_user(db_session: Session, email: str, first_name: str, last_name: str) -> models.User:
    user = models.User(email=email, first_name=first_name, last_name=last_name)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the user the client acts as by default."""
    return _make_user(db_session, "ada@example.com", "Ada", "Lovelace")


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """Create a second user."""
    return _make_user(db_session, "alan@example.com", "Alan", "Turing")


@pytest.fixture
def current_user_id(test_user: models.User) -> dict[str, int]:
    """Mutable holder for the id of the user the client acts as."""
    return {"id": test_user.id}


@pytest.fixture
def act_as(current_user_id: dict[str, int]) -> Callable[[models.User], None]:
    """Switch the user the client acts as."""

    def switch(user: models.User) -> None:
        current_user_id["id"] = user.id

    return switch


@pytest.fixture
def client(
    db_session: Session, current_user_id: dict[str, int]
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and authenticated user."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    def override_get_current_user() -> User:
        user = UserRepository(db_session).find_by_id(UserId(current_user_id["id"]))
        assert user is not None
        return user

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = override_get_current_user

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def templates(db_session: Session) -> list[LearningPlan]:
    """Seed the predefined templates under the system user."""
    use_case = SeedTemplatesUseCase(
        learning_plan_repository=LearningPlanRepository(db_session),
        user_repository=UserRepository(db_session),
        plan_tree_builder=PlanTreeBuilder(uuid4),
        catalogue=PREDEFINED_TEMPLATES,
    )
    return use_case.seed(SYSTEM_EMAIL)


@pytest.fixture
def java_template(templates: list[LearningPlan]) -> LearningPlan:
    return next(t for t in templates if t.title == "Java Development Learning Path")
