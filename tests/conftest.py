"""
Shared test fixtures.

Environment variables are set before any leitner import so settings pick
them up.
"""
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LEITNER_STRICT"] = "false"
os.environ["LEITNER_TIMEZONE"] = "UTC"
os.environ["LEITNER_DEFAULT_BOX_COUNT"] = "5"
os.environ["LEITNER_DUE_LIMIT"] = "10"

from datetime import datetime, timezone
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from leitner.core.clock import FixedClock, get_clock
from leitner.core.database import get_session
from leitner.schemas.box import Box
from leitner.schemas.card import Card, Word
from leitner.services.leitner_system import LeitnerSystem

FIXED_UUID = UUID("2A8DDD36-50D3-458A-A2BF-B0A1E36C1759")
FIXED_NOW = datetime(2024, 9, 8, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_uuid() -> UUID:
    return FIXED_UUID


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at midday on a fixed date."""
    return FixedClock(FIXED_NOW)


def make_word(
    word: str = "defaultWord",
    language_code: str = "en",
    meaning: str = "defaultMeaning",
    example_sentence=None
) -> Word:
    return Word(
        word=word,
        language_code=language_code,
        meaning=meaning,
        example_sentence=example_sentence
    )


def make_card(card_id=None, last_reviewed: datetime = FIXED_NOW, **word_fields) -> Card:
    fields = {"word": make_word(**word_fields), "last_reviewed": last_reviewed}
    if card_id is not None:
        fields["id"] = card_id
    return Card(**fields)


def make_box(cards=None, review_interval: int = 1, last_reviewed_date=FIXED_NOW) -> Box:
    return Box(
        cards=cards or [],
        review_interval=review_interval,
        last_reviewed_date=last_reviewed_date
    )


@pytest.fixture
def system(clock) -> LeitnerSystem:
    """Default five-box system on the fixed clock."""
    return LeitnerSystem(clock=clock)


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    from leitner import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine, clock):
    """API client bound to the in-memory database and the fixed clock."""
    from leitner.main import app

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()
