# tests/v1/test_users.py
"""Tests for user lookup endpoints."""

from datetime import datetime, timedelta

from fastapi import status

from messagely.core.security import create_access_token
from messagely.services import message_service

SUMMARY_KEYS = {"username", "first_name", "last_name", "phone"}


def test_list_users(client, alice, bob, alice_headers) -> None:
    response = client.get("/users", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    users = response.json()["users"]
    assert [user["username"] for user in users] == ["alice", "bob"]
    for user in users:
        assert set(user) == SUMMARY_KEYS


def test_list_users_requires_token(client, alice) -> None:
    response = client.get("/users")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_get_own_user(client, alice, alice_headers) -> None:
    response = client.get("/users/alice", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    user = response.json()["user"]
    assert user["username"] == "alice"
    assert user["first_name"] == "Alice"
    assert user["last_name"] == "Liddell"
    assert user["phone"] == "555-0001"
    assert user["join_at"] is not None
    assert datetime.fromisoformat(user["join_at"]).utcoffset() == timedelta(0)
    assert "last_login_at" in user
    assert "password" not in user


def test_get_other_user_denied(client, alice, bob, alice_headers) -> None:
    response = client.get("/users/bob", headers=alice_headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_get_user_missing_record(client) -> None:
    headers = {"Authorization": f"Bearer {create_access_token('ghost')}"}
    response = client.get("/users/ghost", headers=headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "ghost" in response.json()["detail"]


def test_messages_from_and_to(client, db_session, alice, bob, carol, alice_headers, bob_headers) -> None:
    first = message_service.create(db_session, "alice", "bob", "one")
    second = message_service.create(db_session, "alice", "carol", "two")
    third = message_service.create(db_session, "bob", "alice", "three")

    response = client.get("/users/alice/from", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    sent = response.json()["messages"]
    assert [m["id"] for m in sent] == [first.id, second.id]
    assert sent[0]["to_user"] == {
        "username": "bob",
        "first_name": "Bob",
        "last_name": "Builder",
        "phone": "555-0002",
    }
    assert sent[1]["to_user"]["username"] == "carol"
    assert sent[0]["body"] == "one"
    assert sent[0]["read_at"] is None
    assert "from_user" not in sent[0]

    response = client.get("/users/alice/to", headers=alice_headers)
    assert response.status_code == status.HTTP_200_OK
    received = response.json()["messages"]
    assert [m["id"] for m in received] == [third.id]
    assert received[0]["from_user"]["username"] == "bob"
    assert "to_user" not in received[0]

    response = client.get("/users/bob/to", headers=bob_headers)
    assert [m["id"] for m in response.json()["messages"]] == [first.id]


def test_message_listings_are_self_only(client, alice, bob, alice_headers) -> None:
    assert client.get("/users/bob/to", headers=alice_headers).status_code == status.HTTP_401_UNAUTHORIZED
    assert client.get("/users/bob/from", headers=alice_headers).status_code == status.HTTP_401_UNAUTHORIZED


def test_empty_listings(client, alice, alice_headers) -> None:
    assert client.get("/users/alice/to", headers=alice_headers).json() == {"messages": []}
    assert client.get("/users/alice/from", headers=alice_headers).json() == {"messages": []}
