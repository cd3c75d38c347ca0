# tests/v1/test_votes.py
"""Tests for the upvote, downvote and my-vote endpoints."""

from fastapi import status

from whycookin.models import PostVote


def _upvote(client, post_id, headers):
    return client.post(f"/api/community/posts/{post_id}/upvote", headers=headers)


def _downvote(client, post_id, headers):
    return client.post(f"/api/community/posts/{post_id}/downvote", headers=headers)


def test_first_upvote_returns_new_upvote_count(client, auth_token, test_post, ledger) -> None:
    """A first upvote succeeds and reports only the upvote counter."""
    response = _upvote(client, test_post.id, auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Upvoted!", "upvotes": 1}
    assert ledger(test_post.id) == (1, 0)


def test_first_downvote_returns_new_downvote_count(client, auth_token, test_post, ledger) -> None:
    response = _downvote(client, test_post.id, auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Downvoted!", "downvotes": 1}
    assert ledger(test_post.id) == (0, 1)


def test_repeat_upvote_is_rejected_without_changes(
    client, auth_token, test_post, db_session, ledger
) -> None:
    """Upvoting twice leaves the counters and ledger as they were."""
    _upvote(client, test_post.id, auth_token)
    response = _upvote(client, test_post.id, auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": False, "message": "Already upvoted this post."}
    db_session.refresh(test_post)
    assert (test_post.upvotes, test_post.downvotes) == (1, 0)
    assert ledger(test_post.id) == (1, 0)


def test_repeat_downvote_is_rejected(client, auth_token, test_post, db_session) -> None:
    _downvote(client, test_post.id, auth_token)
    response = _downvote(client, test_post.id, auth_token)

    assert response.json() == {"success": False, "message": "Already downvoted this post."}
    db_session.refresh(test_post)
    assert test_post.downvotes == 1


def test_upvote_then_downvote_flips_the_vote(
    client, auth_token, test_post, db_session, ledger
) -> None:
    """Switching direction moves one vote between counters; the total is unchanged."""
    _upvote(client, test_post.id, auth_token)
    response = _downvote(client, test_post.id, auth_token)

    assert response.json() == {
        "success": True,
        "message": "Changed vote to downvote.",
        "upvotes": 0,
        "downvotes": 1,
    }
    db_session.refresh(test_post)
    assert test_post.upvotes + test_post.downvotes == 1
    assert ledger(test_post.id) == (0, 1)
    assert db_session.query(PostVote).filter(PostVote.post_id == test_post.id).count() == 1


def test_downvote_then_upvote_flips_the_vote(client, auth_token, test_post) -> None:
    _downvote(client, test_post.id, auth_token)
    response = _upvote(client, test_post.id, auth_token)

    assert response.json() == {
        "success": True,
        "message": "Changed vote to upvote.",
        "upvotes": 1,
        "downvotes": 0,
    }


def test_vote_sequence_across_two_users(
    client, auth_token, other_token, test_post, db_session, ledger
) -> None:
    """A up, A down, B down on a fresh post."""
    first = _upvote(client, test_post.id, auth_token).json()
    second = _downvote(client, test_post.id, auth_token).json()
    third = _downvote(client, test_post.id, other_token).json()

    assert first == {"success": True, "message": "Upvoted!", "upvotes": 1}
    assert second == {
        "success": True,
        "message": "Changed vote to downvote.",
        "upvotes": 0,
        "downvotes": 1,
    }
    assert third == {"success": True, "message": "Downvoted!", "downvotes": 2}

    db_session.refresh(test_post)
    assert ledger(test_post.id) == (test_post.upvotes, test_post.downvotes) == (0, 2)


def test_two_users_upvoting_both_count(client, auth_token, other_token, test_post, db_session) -> None:
    assert _upvote(client, test_post.id, auth_token).json()["success"] is True
    assert _upvote(client, test_post.id, other_token).json()["success"] is True

    db_session.refresh(test_post)
    assert test_post.upvotes == 2


def test_counters_match_ledger_after_every_call(
    client, make_user, headers_for, test_post, db_session, ledger
) -> None:
    """Counters equal ledger counts after each call of a mixed sequence."""
    voters = [headers_for(make_user()) for _ in range(3)]
    sequence = [
        (0, _upvote), (1, _upvote), (2, _downvote), (0, _upvote),
        (1, _downvote), (2, _upvote), (0, _downvote), (2, _upvote),
    ]
    for voter, action in sequence:
        action(client, test_post.id, voters[voter])
        db_session.refresh(test_post)
        assert ledger(test_post.id) == (test_post.upvotes, test_post.downvotes)


def test_vote_on_missing_post_returns_404(client, auth_token, db_session) -> None:
    """Voting on an unknown post writes nothing to the ledger."""
    response = _upvote(client, 99999, auth_token)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Post not found"
    assert db_session.query(PostVote).count() == 0


def test_vote_requires_authentication(client, test_post) -> None:
    response = _upvote(client, test_post.id, {})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_vote_with_invalid_token_is_rejected(client, test_post) -> None:
    response = _upvote(client, test_post.id, {"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_get_my_vote(client, auth_token, test_post) -> None:
    """my-vote reports 0, then the current direction."""
    url = f"/api/community/posts/{test_post.id}/my-vote"

    assert client.get(url, headers=auth_token).json() == {"direction": 0}
    _upvote(client, test_post.id, auth_token)
    assert client.get(url, headers=auth_token).json() == {"direction": 1}
    _downvote(client, test_post.id, auth_token)
    assert client.get(url, headers=auth_token).json() == {"direction": -1}


def test_get_my_vote_missing_post(client, auth_token) -> None:
    response = client.get("/api/community/posts/424242/my-vote", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_deleting_post_removes_its_votes(client, auth_token, test_post, db_session) -> None:
    _upvote(client, test_post.id, auth_token)

    response = client.delete(f"/api/community/posts/{test_post.id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    db_session.expire_all()
    assert db_session.query(PostVote).count() == 0
