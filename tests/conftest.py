import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from raceboard.app import create_app
from raceboard.models import Counter, RaceRecord

API = "/api"

BANNED_WORDS = {"darn", "heck"}


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def fake_profanity_check(text: str) -> bool:
    return any(word in text.lower() for word in BANNED_WORDS)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def make_app(engine, clock):
    def _make(**overrides):
        options = dict(
            engine=engine,
            profanity_check=fake_profanity_check,
            clock=clock,
            api_prefix=API,
            public_directory=None,
            session_secret="test-secret",
            seed=False,
            db_reset=False,
        )
        options.update(overrides)
        return create_app(**options)

    return _make


@pytest.fixture()
def client(make_app):
    with TestClient(make_app()) as test_client:
        yield test_client


@pytest.fixture()
def guest(client):
    """Client whose cookie already carries a guest identity."""
    res = client.post(f"{API}/session")
    assert res.status_code == 200
    return client


@pytest.fixture()
def add_counters(engine):
    def _add(**counts):
        with Session(engine) as session:
            for mode, count in counts.items():
                session.add(Counter(mode=mode, count=count))
            session.commit()

    return _add


@pytest.fixture()
def add_races(engine):
    def _add(races):
        with Session(engine) as session:
            for race in races:
                session.add(RaceRecord(**race))
            session.commit()

    return _add


def start_race(client) -> str:
    res = client.post(f"{API}/race")
    assert res.status_code == 200
    return res.json()["raceId"]
