import pytest

from raceboard.errors import AlreadyPaused, NotPaused, RaceNotFound
from raceboard.services import race_timer
from raceboard.services.guest_session import GuestSession
from raceboard.services.race_timer import Idle, Paused, Running

T0 = 1_000_000


def test_start_from_idle():
    state = race_timer.start_race(T0, race_id="r1")
    assert state == Running(race_id="r1", started_at=T0, paused_total=0)


def test_start_generates_unique_ids():
    assert race_timer.start_race(T0).race_id != race_timer.start_race(T0).race_id


def test_pause_resume_accumulates():
    state = race_timer.start_race(T0, race_id="r1")
    state = race_timer.pause_race(state, "r1", T0 + 100)
    assert state == Paused("r1", T0, 0, T0 + 100)

    state = race_timer.resume_race(state, "r1", T0 + 600)
    assert state == Running("r1", T0, 500)

    state = race_timer.pause_race(state, "r1", T0 + 700)
    state = race_timer.resume_race(state, "r1", T0 + 900)
    assert state.paused_total == 700


def test_transitions_check_race_id():
    running = race_timer.start_race(T0, race_id="r1")
    with pytest.raises(RaceNotFound):
        race_timer.pause_race(running, "other", T0)
    with pytest.raises(RaceNotFound):
        race_timer.finish_race(running, "other", 0, T0, 1000)
    with pytest.raises(RaceNotFound):
        race_timer.abandon_race(running, "other")


@pytest.mark.parametrize(
    "transition",
    [
        lambda s: race_timer.pause_race(s, "r1", T0),
        lambda s: race_timer.resume_race(s, "r1", T0),
        lambda s: race_timer.finish_race(s, "r1", 0, T0, 1000),
        lambda s: race_timer.abandon_race(s, "r1"),
    ],
)
def test_idle_has_no_race(transition):
    with pytest.raises(RaceNotFound):
        transition(Idle())


def test_pause_when_paused():
    state = race_timer.pause_race(race_timer.start_race(T0, race_id="r1"), "r1", T0)
    with pytest.raises(AlreadyPaused):
        race_timer.pause_race(state, "r1", T0 + 1)


def test_resume_when_running():
    with pytest.raises(NotPaused):
        race_timer.resume_race(race_timer.start_race(T0, race_id="r1"), "r1", T0)


def test_finish_measurement():
    state = Running("r1", T0, paused_total=2000)
    result = race_timer.finish_race(state, "r1", 3500, T0 + 6000, tolerance=1000)
    assert result.server_time == 4000
    assert result.difference == 500
    assert result.accepted
    assert result.ended_at == T0 + 6000


def test_finish_outside_tolerance():
    result = race_timer.finish_race(Running("r1", T0), "r1", 0, T0 + 1001, tolerance=1000)
    assert not result.accepted


def test_abandon_returns_idle():
    assert race_timer.abandon_race(Paused("r1", T0, 0, T0), "r1") == Idle()


def test_guest_session_round_trip_paused():
    bag = {}
    guest = GuestSession(user_id="u", user_name="Guest_abcde", race=Paused("r1", T0, 50, T0 + 90))
    guest.save(bag)
    assert bag["racePauseTimeStart"] == T0 + 90
    assert bag["racePauseTimeTotal"] == 50
    assert GuestSession.load(bag) == guest


def test_guest_session_idle_serialises_cleared_fields():
    bag = {"raceId": "r1", "raceStartTime": T0, "racePauseTimeStart": 5}
    GuestSession(user_id="u", user_name="n").save(bag)
    assert bag["raceId"] is None
    assert bag["raceStartTime"] == 0
    assert bag["racePauseTimeStart"] == 0
    assert bag["racePauseTimeTotal"] == 0


def test_guest_session_load_empty_bag():
    guest = GuestSession.load({})
    assert not guest.has_identity
    assert guest.race == Idle()
