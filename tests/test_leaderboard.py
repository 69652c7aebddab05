import random

import pytest
from sqlmodel import SQLModel

from conftest import API

from raceboard.services.leaderboard import LeaderboardParams, parse_int


@pytest.fixture()
def fifty_races(add_races):
    races = [{"name": f"Entry{i}", "mode": "normal", "time": i} for i in range(1, 51)]
    random.shuffle(races)
    add_races(races)


def _times(res):
    return [race["time"] for race in res.json()["results"]]


def test_leaderboard_is_public(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal"})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")


def test_default_call(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal"})
    body = res.json()
    assert len(body["results"]) == 10
    assert body["params"] == {
        "sort": "ASC",
        "mode": "normal",
        "offset": 0,
        "limit": 10,
        "sortBy": "id",
    }
    ids = [race["id"] for race in body["results"]]
    assert ids == sorted(ids)
    assert set(body["results"][0]) == {"id", "name", "mode", "time", "created_at"}


def test_unknown_mode_returns_nothing(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "mode-not-exist"})
    assert res.json()["results"] == []


def test_default_mode_matches_only_empty_mode(client, fifty_races, add_races):
    add_races([{"name": "blank", "mode": "", "time": 7}])
    res = client.get(f"{API}/race")
    assert [race["name"] for race in res.json()["results"]] == ["blank"]


def test_sorted_by_time_ascending(client, fifty_races):
    res = client.get(
        f"{API}/race", params={"mode": "normal", "sortBy": "time", "sort": "ASC", "limit": 10}
    )
    assert _times(res) == list(range(1, 11))


def test_sorted_by_time_descending(client, fifty_races):
    res = client.get(
        f"{API}/race", params={"mode": "normal", "sortBy": "time", "sort": "DESC", "limit": 10}
    )
    assert _times(res) == list(range(50, 40, -1))


def test_sort_is_case_insensitive(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal", "sortBy": "time", "sort": "dEsC"})
    assert res.json()["params"]["sort"] == "DESC"
    assert _times(res)[0] == 50


def test_limit(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal", "limit": 5})
    assert len(res.json()["results"]) == 5


def test_limit_larger_than_matches(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal", "limit": 500})
    assert len(res.json()["results"]) == 50


@pytest.mark.parametrize("offset", [0, 5, 49])
def test_offset_matches_full_listing(client, fifty_races, offset):
    query = {"mode": "normal", "sortBy": "time", "sort": "desc"}
    everything = client.get(f"{API}/race", params={**query, "limit": 100}).json()["results"]
    single = client.get(
        f"{API}/race", params={**query, "limit": 1, "offset": offset}
    ).json()["results"]
    assert single == [everything[offset]]


def test_repeated_queries_are_identical(client, fifty_races):
    query = {"mode": "normal", "sortBy": "time", "offset": 3, "limit": 7}
    first = client.get(f"{API}/race", params=query).json()
    second = client.get(f"{API}/race", params=query).json()
    assert first == second


@pytest.mark.parametrize(
    "sort_by", ["name", "time; DROP TABLE races", "id desc, (select 1)", "TIME"]
)
def test_sort_by_outside_allow_list_falls_back_to_id(client, fifty_races, sort_by):
    res = client.get(f"{API}/race", params={"mode": "normal", "sortBy": sort_by})
    assert res.status_code == 200
    assert res.json()["params"]["sortBy"] == "id"
    assert len(res.json()["results"]) == 10


def test_unknown_sort_keeps_ascending(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal", "sort": "sideways"})
    assert res.json()["params"]["sort"] == "ASC"


def test_ties_are_ordered_by_id(client, add_races):
    add_races([{"name": f"tie{i}", "mode": "m", "time": 100} for i in range(5)])
    res = client.get(f"{API}/race", params={"mode": "m", "sortBy": "time", "sort": "desc"})
    ids = [race["id"] for race in res.json()["results"]]
    assert ids == sorted(ids)


def test_finished_race_appears_on_leaderboard(guest, clock):
    race_id = guest.post(f"{API}/race").json()["raceId"]
    clock.advance(4321)
    guest.patch(f"{API}/race", json={"raceId": race_id, "raceTime": 4321, "raceMode": "sprint"})

    res = guest.get(f"{API}/race", params={"mode": "sprint"})
    assert _times(res) == [4321]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("10", 10),
        ("  7", 7),
        ("12abc", 12),
        ("-3", -3),
        ("1.9", 1),
        ("99999999999999999999", 2**63 - 1),
        ("-99999999999999999999", -(2**63)),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_int(raw, expected):
    assert parse_int(raw, None) == expected


def test_params_defaults():
    assert LeaderboardParams.from_query({}).to_dict() == {
        "sort": "ASC",
        "mode": "",
        "offset": 0,
        "limit": 10,
        "sortBy": "id",
    }


def test_params_malformed_numbers_keep_defaults():
    params = LeaderboardParams.from_query({"offset": "lots", "limit": "many"})
    assert params.offset == 0
    assert params.limit == 10


def test_params_negative_offset_is_clamped():
    assert LeaderboardParams.from_query({"offset": "-5"}).offset == 0


def test_negative_limit_is_unbounded(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal", "limit": -1})
    assert res.json()["params"]["limit"] == -1
    assert len(res.json()["results"]) == 50


@pytest.mark.parametrize("sort_by", ["id", "mode", "time", "created_at"])
def test_params_accept_allowed_columns(sort_by):
    assert LeaderboardParams.from_query({"sortBy": sort_by}).sort_by == sort_by


def test_huge_limit_is_clamped(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal", "limit": "99999999999999999999"})
    assert res.status_code == 200
    assert res.json()["params"]["limit"] == 2**63 - 1
    assert len(res.json()["results"]) == 50


def test_huge_offset_is_clamped(client, fifty_races):
    res = client.get(f"{API}/race", params={"mode": "normal", "offset": "99999999999999999999"})
    assert res.status_code == 200
    assert res.json()["params"]["offset"] == 2**63 - 1
    assert res.json()["results"] == []


def test_store_failure_is_internal_error(client, engine):
    SQLModel.metadata.drop_all(engine)

    res = client.get(f"{API}/race", params={"mode": "normal"})
    assert res.status_code == 500
    assert res.json() == {"result": "fail", "message": "server error. contact admin"}
