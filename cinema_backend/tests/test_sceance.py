import uuid
from datetime import datetime, timedelta, timezone

import pytest

from cinema_backend.models import Sceance


def future(days=1):
    return (datetime.now(timezone.utc) + timedelta(days=days)).replace(microsecond=0).isoformat()


@pytest.fixture
async def sceance(client, cinema, room, movie):
    response = await client.post(
        f"/cinema/{cinema['uid']}/rooms/{room['uid']}/sceances",
        json={"movie_id": movie["id"], "date": future()})
    assert response.status_code == 201
    return response.json()["sceance"]


async def test_create_then_get(client, room, sceance, movie):
    assert sceance["room_uid"] == room["uid"]
    assert sceance["movie_id"] == movie["id"]
    assert sceance["created_at"] is not None
    assert sceance["updated_at"] is not None

    response = await client.get(f"/room/{room['uid']}/sceances/{sceance['uid']}")
    assert response.status_code == 200
    assert response.json()["sceance"] == sceance


async def test_list_room_sceances(client, room, sceance):
    response = await client.get(f"/room/{room['uid']}/sceances")
    assert response.status_code == 200
    assert [item["uid"] for item in response.json()] == [sceance["uid"]]


async def test_list_unknown_room_is_404(client):
    response = await client.get(f"/room/{uuid.uuid4()}/sceances")
    assert response.status_code == 404
    assert response.json() == {"message": "Room not found"}


async def test_sceance_in_the_past_is_rejected(client, cinema, room, movie):
    past = (datetime.now(timezone.utc) - timedelta(hours=1)).isoformat()
    response = await client.post(
        f"/cinema/{cinema['uid']}/rooms/{room['uid']}/sceances",
        json={"movie_id": movie["id"], "date": past})
    assert response.status_code == 422
    assert "past" in response.json()["message"]

    listing = await client.get(f"/room/{room['uid']}/sceances")
    assert listing.json() == []


async def test_sceance_requires_movie_and_date(client, cinema, room):
    response = await client.post(f"/cinema/{cinema['uid']}/rooms/{room['uid']}/sceances", json={})
    assert response.status_code == 422
    fields = {violation["field"] for violation in response.json()["violations"]}
    assert fields == {"movie_id", "date"}


async def test_sceance_with_unknown_movie(client, cinema, room):
    response = await client.post(
        f"/cinema/{cinema['uid']}/rooms/{room['uid']}/sceances",
        json={"movie_id": 9999, "date": future()})
    assert response.status_code == 422
    assert "movie_id" in response.json()["message"]


async def test_create_in_room_of_another_cinema_is_404(client, room, movie):
    other = (await client.post("/cinema", json={"name": "Other"})).json()["cinema"]
    response = await client.post(
        f"/cinema/{other['uid']}/rooms/{room['uid']}/sceances",
        json={"movie_id": movie["id"], "date": future()})
    assert response.status_code == 404


async def test_get_sceance_from_another_room_is_404(client, cinema, sceance):
    other = (await client.post(f"/cinema/{cinema['uid']}/rooms", json={"name": "Room 2"})).json()["room"]
    response = await client.get(f"/room/{other['uid']}/sceances/{sceance['uid']}")
    assert response.status_code == 404


async def test_edit_sceance_date(client, room, sceance):
    new_date = future(days=3)
    response = await client.put(f"/room/{room['uid']}/sceances/{sceance['uid']}", json={"date": new_date})
    assert response.status_code == 200
    updated = response.json()["sceance"]
    assert updated["date"] == datetime.fromisoformat(new_date).strftime("%Y-%m-%dT%H:%M:%SZ")
    assert updated["movie_id"] == sceance["movie_id"]
    assert updated["created_at"] == sceance["created_at"]


async def test_edit_sceance_into_the_past_is_rejected(client, room, sceance):
    past = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()
    response = await client.put(f"/room/{room['uid']}/sceances/{sceance['uid']}", json={"date": past})
    assert response.status_code == 422

    fetched = await client.get(f"/room/{room['uid']}/sceances/{sceance['uid']}")
    assert fetched.json()["sceance"]["date"] == sceance["date"]


async def test_edit_of_started_sceance_keeps_its_date(client, db_session, room, movie):
    started = Sceance(movie_id=movie["id"], room_uid=uuid.UUID(room["uid"]),
                      date=datetime.now(timezone.utc) - timedelta(hours=1))
    db_session.add(started)
    await db_session.commit()

    other_movie = (await client.post("/movie", json={
        "name": "Other", "description": "Another one", "release_date": "2021-01-01T00:00:00Z"})).json()["movie"]
    response = await client.put(f"/room/{room['uid']}/sceances/{started.uid}", json={"movie_id": other_movie["id"]})
    assert response.status_code == 200
    assert response.json()["sceance"]["movie_id"] == other_movie["id"]


async def test_edit_unknown_sceance_is_404(client, room):
    response = await client.put(f"/room/{room['uid']}/sceances/{uuid.uuid4()}", json={"date": future()})
    assert response.status_code == 404
    assert response.json() == {"message": "Sceance not found"}


async def test_delete_removes_sceance_from_room(client, cinema, room, sceance):
    path = f"/cinema{cinema['uid']}/{room['uid']}/sceances/{sceance['uid']}"
    response = await client.delete(path)
    assert response.status_code == 200
    assert response.json() == {"message": "Sceance deleted successfully"}

    listing = await client.get(f"/room/{room['uid']}/sceances")
    assert listing.json() == []
    assert (await client.delete(path)).status_code == 404


async def test_delete_on_nested_path(client, cinema, room, sceance):
    path = f"/cinema/{cinema['uid']}/rooms/{room['uid']}/sceances/{sceance['uid']}"
    assert (await client.delete(path)).status_code == 200
    assert (await client.get(f"/room/{room['uid']}/sceances/{sceance['uid']}")).status_code == 404


async def test_delete_with_unknown_room_is_404(client, cinema, sceance):
    response = await client.delete(f"/cinema/{cinema['uid']}/rooms/{uuid.uuid4()}/sceances/{sceance['uid']}")
    assert response.status_code == 404


async def test_deleting_sceance_releases_reservations(client, cinema, room, sceance):
    reservation = (await client.post("/reservation", json={
        "name": "Jane", "sceance_uid": sceance["uid"]})).json()["reservation"]
    assert reservation["sceance_uid"] == sceance["uid"]

    await client.delete(f"/cinema/{cinema['uid']}/rooms/{room['uid']}/sceances/{sceance['uid']}")

    fetched = await client.get(f"/reservation/{reservation['uid']}")
    assert fetched.json()["reservation"]["sceance_uid"] is None


async def test_sceance_with_out_of_range_movie_id(client, cinema, room):
    response = await client.post(
        f"/cinema/{cinema['uid']}/rooms/{room['uid']}/sceances",
        json={"movie_id": 2**31, "date": future()})
    assert response.status_code == 422
    assert "movie_id" in response.json()["message"]


async def test_malformed_room_uid_wins_over_bad_query(client):
    response = await client.get("/room/not-a-uuid/sceances", params={"page": 0})
    assert response.status_code == 404
    assert response.json() == {"message": "Resource not found"}
