# tests/v1/test_profile_update.py
"""Tests for the profile update endpoint."""

from fastapi import status


def test_update_profile_with_camel_case_body(client, auth_token, test_user) -> None:
    """The camelCase body is stored and echoed back in snake_case."""
    response = client.post(
        "/api/profile",
        json={
            "firstName": "Minji",
            "lastName": "Kim",
            "gender": "female",
            "nationalities": ["KR", "CA"],
            "ethnicities": ["Korean"],
            "birthday": "1995-04-12",
            "countryHome": "Canada",
            "countryGrewUpIn": "Korea",
            "bio": "Tteokbokki enthusiast",
            "visibleToOthers": False,
        },
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "id": test_user.id,
        "username": "test_user",
        "first_name": "Minji",
        "last_name": "Kim",
        "gender": "female",
        "nationalities": ["KR", "CA"],
        "ethnicities": ["Korean"],
        "birthday": "1995-04-12",
        "country_home": "Canada",
        "country_grew_up_in": "Korea",
        "bio": "Tteokbokki enthusiast",
        "visible_to_others": False,
    }


def test_omitted_fields_are_cleared_and_visibility_defaults_true(client, auth_token) -> None:
    client.post("/api/profile", json={"firstName": "Minji", "visibleToOthers": False}, headers=auth_token)

    response = client.post("/api/profile", json={"bio": ""}, headers=auth_token)

    body = response.json()
    assert body["first_name"] is None
    assert body["bio"] is None
    assert body["nationalities"] == []
    assert body["visible_to_others"] is True


def test_hidden_profile_cannot_post(client, auth_token) -> None:
    client.post("/api/profile", json={"visibleToOthers": False}, headers=auth_token)

    response = client.post(
        "/api/community/posts",
        json={"title": "hi", "content": "there"},
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "You must be visible to others to create posts"


def test_profile_requires_authentication(client) -> None:
    response = client.post("/api/profile", json={"firstName": "Nobody"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
