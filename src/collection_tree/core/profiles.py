"""Request fixtures for the generated collections.

Each profile maps a base URL to the ordered folder list of a collection.
Assertions are Postman test scripts, stored line by line.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from collection_tree.models import Body, Event, Folder, Header, Request, RequestItem, Script

_JSON_HEADERS = [Header(key="Content-Type", value="application/json")]


def _status_test(code: int) -> list[str]:
    return [
        f'pm.test("Status code is {code}", function () {{',
        f"    pm.response.to.have.status({code});",
        "});",
    ]


def _json_test(title: str, assertion: str) -> list[str]:
    return [
        f'pm.test("{title}", function () {{',
        "    var jsonData = pm.response.json();",
        f"    {assertion}",
        "});",
    ]


def _response_time_test(title: str) -> list[str]:
    return [
        f'pm.test("{title}", function () {{',
        "    pm.expect(pm.response.responseTime).to.be.below(2000);",
        "});",
    ]


def _test_event(*blocks: list[str]) -> list[Event]:
    lines: list[str] = []
    for block in blocks:
        if lines:
            lines.append("")
        lines.extend(block)
    return [Event(listen="test", script=Script(exec=lines))]


def _raw_json(payload: dict[str, Any]) -> Body:
    return Body(raw=json.dumps(payload, indent=2))


# ---------------------------------------------------------------------------
# Request items
# ---------------------------------------------------------------------------


def _get_all_users(base_url: str) -> RequestItem:
    return RequestItem(
        name="Get All Users",
        event=_test_event(
            _status_test(200),
            _json_test("Response is an array", "pm.expect(jsonData).to.be.an('array');"),
            _response_time_test("Response time is less than 2000ms"),
        ),
        request=Request(method="GET", url=f"{base_url}/users", description="Retrieve a list of users"),
    )


def _get_single_user(base_url: str) -> RequestItem:
    return RequestItem(
        name="Get Single User",
        event=_test_event(
            _status_test(200),
            _json_test("User has email", "pm.expect(jsonData.email).to.exist;"),
            _json_test("User ID matches request", "pm.expect(jsonData.id).to.eql(1);"),
        ),
        request=Request(method="GET", url=f"{base_url}/users/1", description="Retrieve a single user by ID"),
    )


def _get_user_posts(base_url: str) -> RequestItem:
    return RequestItem(
        name="Get User Posts",
        event=_test_event(
            _status_test(200),
            _json_test("Response is an array", "pm.expect(jsonData).to.be.an('array');"),
            _json_test(
                "Every post belongs to the user",
                "jsonData.forEach(function (post) { pm.expect(post.userId).to.eql(1); });",
            ),
        ),
        request=Request(
            method="GET",
            url=f"{base_url}/users/1/posts",
            description="Retrieve all posts written by a single user",
        ),
    )


def _create_post(base_url: str) -> RequestItem:
    return RequestItem(
        name="Create Post",
        event=_test_event(
            _status_test(201),
            _json_test("Response contains title", "pm.expect(jsonData.title).to.exist;"),
            _json_test("Response contains ID", "pm.expect(jsonData.id).to.exist;"),
        ),
        request=Request(
            method="POST",
            header=list(_JSON_HEADERS),
            body=_raw_json({"title": "Test Post", "body": "This is a test post", "userId": 1}),
            url=f"{base_url}/posts",
            description="Create a new post",
        ),
    )


def _update_post(base_url: str) -> RequestItem:
    return RequestItem(
        name="Update Post",
        event=_test_event(
            _status_test(200),
            _json_test("Response contains title", "pm.expect(jsonData.title).to.exist;"),
            _json_test("Response contains ID", "pm.expect(jsonData.id).to.exist;"),
        ),
        request=Request(
            method="PUT",
            header=list(_JSON_HEADERS),
            body=_raw_json({"id": 1, "title": "Updated Post", "body": "This is an updated post", "userId": 1}),
            url=f"{base_url}/posts/1",
            description="Update an existing post",
        ),
    )


def _delete_post(base_url: str) -> RequestItem:
    return RequestItem(
        name="Delete Post",
        event=_test_event(
            _status_test(200),
            _response_time_test("Response time is acceptable"),
        ),
        request=Request(method="DELETE", url=f"{base_url}/posts/1", description="Delete a post by ID"),
    )


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Profile:
    name: str
    description: str
    folders: Callable[[str], list[Folder]]


def _standard_folders(base_url: str) -> list[Folder]:
    return [
        Folder(name="GET Requests", item=[_get_all_users(base_url), _get_single_user(base_url)]),
        Folder(name="POST Requests", item=[_create_post(base_url)]),
        Folder(name="PUT Requests", item=[_update_post(base_url)]),
        Folder(name="DELETE Requests", item=[_delete_post(base_url)]),
    ]


def _extended_folders(base_url: str) -> list[Folder]:
    return [
        Folder(
            name="GET Requests",
            item=[_get_all_users(base_url), _get_single_user(base_url), _get_user_posts(base_url)],
        ),
        Folder(name="POST Requests", item=[_create_post(base_url)]),
        Folder(name="PUT Requests", item=[_update_post(base_url)]),
        Folder(name="DELETE Requests", item=[_delete_post(base_url)]),
    ]


PROFILES: dict[str, Profile] = {
    "standard": Profile("standard", "CRUD smoke tests against users and posts", _standard_folders),
    "extended": Profile("extended", "Standard requests plus per-user post listing", _extended_folders),
}


def resolve_profile(name: str) -> Profile:
    normalized = name.strip().lower()
    if normalized not in PROFILES:
        raise ValueError(f"Unsupported profile '{name}'. Supported: {sorted(PROFILES)}")
    return PROFILES[normalized]
