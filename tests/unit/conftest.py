"""Shared payload factories for unit tests.

Payloads mirror GitLab REST API v4 response bodies.
"""

from __future__ import annotations

from typing import Any

import pytest

AUTHOR = {
    "id": 1,
    "username": "root",
    "name": "Administrator",
    "state": "active",
    "avatar_url": None,
    "web_url": "https://gitlab.example.com/root",
}


def make_issue(iid: int = 1, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 1000 + iid,
        "iid": iid,
        "project_id": 5,
        "title": f"Issue {iid}",
        "description": "Description",
        "state": "opened",
        "created_at": "2024-01-02T03:04:05.000Z",
        "updated_at": "2024-01-03T03:04:05.000Z",
        "closed_at": None,
        "closed_by": None,
        "labels": ["Label1"],
        "milestone": None,
        "author": AUTHOR,
        "assignee": None,
        "assignees": [],
        "user_notes_count": 0,
        "upvotes": 0,
        "downvotes": 0,
        "due_date": None,
        "confidential": False,
        "discussion_locked": None,
        "weight": None,
        "web_url": f"https://gitlab.example.com/group/project/-/issues/{iid}",
        "time_stats": {
            "time_estimate": 0,
            "total_time_spent": 0,
            "human_time_estimate": None,
            "human_total_time_spent": None,
        },
        # fields the models do not declare are ignored
        "has_tasks": False,
        "_links": {"self": "https://gitlab.example.com/api/v4/projects/5/issues/1"},
    }
    payload.update(overrides)
    return payload


def make_note(note_id: int = 1, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": note_id,
        "body": "comment1",
        "author": AUTHOR,
        "created_at": "2024-01-02T03:04:05.000Z",
        "updated_at": "2024-01-02T03:04:05.000Z",
        "system": False,
        "noteable_id": 1001,
        "noteable_type": "Issue",
        "noteable_iid": 1,
        "resolvable": False,
        "confidential": False,
        "internal": False,
    }
    payload.update(overrides)
    return payload


def make_release(tag_name: str = "v1.0.0", **overrides: Any) -> dict[str, Any]:
    payload = {
        "tag_name": tag_name,
        "name": f"Release {tag_name}",
        "description": "Notes",
        "created_at": "2024-02-01T10:00:00.000Z",
        "released_at": "2024-02-01T10:00:00.000Z",
        "upcoming_release": False,
        "author": AUTHOR,
        "commit": {
            "id": "2695effb5807a22ff3d138d593fd856244e155e7",
            "short_id": "2695effb",
            "title": "Initial commit",
            "created_at": "2024-01-30T10:00:00.000Z",
        },
        "milestones": [],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def issue_payload():
    return make_issue


@pytest.fixture
def note_payload():
    return make_note


@pytest.fixture
def release_payload():
    return make_release
