# tests/conftest.py
"""
Shared fixtures: an in-memory fake of the institute API (served through
httpx.MockTransport) and a throwaway SQLite engine for client storage.
"""
from __future__ import annotations
import json
import re
from email.parser import BytesParser
from email.policy import default as email_policy

import httpx
import pytest

from core.api_client import ApiClient
from core.db import get_engine, init_db
from store.app_state import AppState


def is_multipart(request: httpx.Request) -> bool:
    return request.headers.get("content-type", "").startswith("multipart/form-data")


def parse_form(request: httpx.Request):
    """Returns (fields, files) from a multipart request body; files are (field, filename, bytes)."""
    ctype = request.headers.get("content-type", "")
    body = request.content
    msg = BytesParser(policy=email_policy).parsebytes(
        b"Content-Type: " + ctype.encode() + b"\r\n\r\n" + body
    )
    fields, files = {}, []
    for part in msg.iter_parts():
        name = part.get_param("name", header="content-disposition")
        payload = part.get_payload(decode=True)
        filename = part.get_filename()
        if filename:
            files.append((name, filename, payload))
        else:
            fields[name] = payload.decode()
    return fields, files


def branch_json(branch_id, name, **extra):
    data = {
        "_id": branch_id,
        "branchName": name,
        "officeType": "Regional",
        "address": "1 Main St",
        "mobile": "555-0100",
        "email": f"{branch_id}@inst.edu",
        "branchImage": f"uploads\\{branch_id}.png",
    }
    data.update(extra)
    return data


def course_json(course_id, name, **extra):
    data = {
        "_id": course_id,
        "courseName": name,
        "courseMode": "online",
        "courseDescription": f"{name} description",
        "batchStart": "2025-01-15T00:00:00.000Z",
        "duration": "8 weeks",
        "curriculum": "Basics",
        "programStructure": "Modules",
        "whatILearn": "Things",
        "isFeatured": False,
        "facultyDetails": [{"name": "Dr. Rao", "designation": "Professor", "feature": "AI", "educator": "Yes"}],
        "studentReviews": [{"name": "Asha", "review": "Great", "image": "uploads/asha.png"}],
        "courseImages": [f"uploads/{course_id}.png"],
    }
    data.update(extra)
    return data


class FakeInstituteApi:
    """
    Minimal stateful stand-in for the REST API. ``fail(method, path, ...)``
    makes the next matching request fail with an HTTP error or a transport error.
    """

    def __init__(self):
        self.branches = {}
        self.courses = {}
        self.featured_branch_ids = []
        self.featured_course_ids = []
        self.requests = []
        self.failures = {}
        self.users = {"admin@inst.edu": ("secret", {"name": "Admin", "emailAddress": "admin@inst.edu", "role": "admin"})}
        self._seq = 0

    # -- helpers -------------------------------------------------------
    def fail(self, method, path, status=500, body=None, network=False):
        self.failures[(method, path)] = (status, body, network)

    def calls(self, method=None, path=None):
        return [r for r in self.requests if (method is None or r.method == method) and (path is None or r.url.path == path)]

    def _next_id(self, prefix):
        self._seq += 1
        return f"{prefix}{self._seq}"

    def client(self, token=None) -> ApiClient:
        return ApiClient("http://api.test", token_provider=(lambda: token), transport=httpx.MockTransport(self.handler))

    # -- dispatch ------------------------------------------------------
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method, path = request.method, request.url.path

        failure = self.failures.pop((method, path), None)
        if failure:
            status, body, network = failure
            if network:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(status, json=body if body is not None else {})

        routes = [
            ("POST", r"^/api/users/login$", self._login),
            ("GET", r"^/api/branches$", lambda r: list(self.branches.values())),
            ("GET", r"^/api/branch/featured$", lambda r: [self.branches[i] for i in self.featured_branch_ids if i in self.branches]),
            ("POST", r"^/api/branch/set-featured$", self._set_featured_branches),
            ("POST", r"^/api/branch$", self._create_branch),
            ("GET", r"^/api/branch/(?P<id>[^/]+)$", lambda r, id: self._get(self.branches, id)),
            ("PUT", r"^/api/branch/(?P<id>[^/]+)$", self._update_branch),
            ("DELETE", r"^/api/branch/(?P<id>[^/]+)$", lambda r, id: self._delete(self.branches, id)),
            ("GET", r"^/api/courses$", lambda r: list(self.courses.values())),
            ("GET", r"^/api/featured$", lambda r: [self.courses[i] for i in self.featured_course_ids if i in self.courses]),
            ("POST", r"^/api/set-featured$", self._set_featured_courses),
            ("POST", r"^/api/courses$", self._create_course),
            ("GET", r"^/api/courses/(?P<id>[^/]+)$", lambda r, id: self._get(self.courses, id)),
            ("PUT", r"^/api/courses/(?P<id>[^/]+)$", self._update_course),
            ("DELETE", r"^/api/courses/(?P<id>[^/]+)$", lambda r, id: self._delete(self.courses, id)),
        ]
        for verb, pattern, fn in routes:
            m = re.match(pattern, path)
            if verb == method and m:
                result = fn(request, **m.groupdict())
                if isinstance(result, httpx.Response):
                    return result
                return httpx.Response(200, json=result)
        return httpx.Response(404, json={"error": "Not found"})

    # -- handlers ------------------------------------------------------
    def _login(self, request):
        body = json.loads(request.content)
        entry = self.users.get(body.get("emailAddress"))
        if not entry or entry[0] != body.get("password"):
            return httpx.Response(401, json={"message": "Invalid credentials"})
        return {"token": "tok-123", "user": entry[1]}

    def _get(self, table, id):
        if id not in table:
            return httpx.Response(404, json={"error": "Not found"})
        return table[id]

    def _delete(self, table, id):
        if id not in table:
            return httpx.Response(404, json={"error": "Not found"})
        del table[id]
        return {"message": "Deleted"}

    def _branch_from_form(self, request, branch_id, previous=None):
        fields, files = parse_form(request)
        data = dict(previous or {})
        data.update({
            "_id": branch_id,
            "branchName": fields.get("branchName", ""),
            "officeType": fields.get("officeType", ""),
            "address": fields.get("address", ""),
            "mobile": fields.get("mobile", ""),
            "email": fields.get("email", ""),
        })
        for field_name, filename, _content in files:
            if field_name == "branchImage":
                data["branchImage"] = f"uploads\\{filename}"
        return data

    def _require_multipart(self, request):
        if not is_multipart(request):
            return httpx.Response(400, json={"error": "Expected multipart/form-data"})
        return None

    def _create_branch(self, request):
        rejected = self._require_multipart(request)
        if rejected is not None:
            return rejected
        branch = self._branch_from_form(request, self._next_id("b"))
        self.branches[branch["_id"]] = branch
        return {"message": "Branch created", "branch": branch}

    def _update_branch(self, request, id):
        rejected = self._require_multipart(request)
        if rejected is not None:
            return rejected
        if id not in self.branches:
            return httpx.Response(404, json={"error": "Branch not found"})
        branch = self._branch_from_form(request, id, self.branches[id])
        self.branches[id] = branch
        return {"message": "Branch updated", "branch": branch}

    def _course_from_form(self, request, course_id, previous=None):
        fields, files = parse_form(request)
        data = dict(previous or {})
        data.update({
            "_id": course_id,
            "courseName": fields.get("courseName", ""),
            "courseMode": fields.get("courseMode", ""),
            "courseDescription": fields.get("courseDescription", ""),
            "batchStart": fields.get("batchStart", ""),
            "duration": fields.get("duration", ""),
            "curriculum": fields.get("curriculum", ""),
            "programStructure": fields.get("programStructure", ""),
            "whatILearn": fields.get("whatILearn", ""),
            "isFeatured": fields.get("isFeatured") == "true",
            "facultyDetails": json.loads(fields.get("facultyDetails") or "[]"),
            "studentReviews": json.loads(fields.get("studentReviews") or "[]"),
        })
        images = [f"uploads/{filename}" for name, filename, _ in files if name == "images"]
        if images:
            data["courseImages"] = images
        data.setdefault("courseImages", [])
        return data

    def _create_course(self, request):
        rejected = self._require_multipart(request)
        if rejected is not None:
            return rejected
        course = self._course_from_form(request, self._next_id("c"))
        self.courses[course["_id"]] = course
        return {"message": "Course created", "course": course}

    def _update_course(self, request, id):
        rejected = self._require_multipart(request)
        if rejected is not None:
            return rejected
        if id not in self.courses:
            return httpx.Response(404, json={"error": "Course not found"})
        course = self._course_from_form(request, id, self.courses[id])
        self.courses[id] = course
        return {"message": "Course updated", "course": course}

    def _set_featured_branches(self, request):
        ids = json.loads(request.content).get("branchIds") or []
        self.featured_branch_ids = [i for i in ids if i in self.branches]
        return [self.branches[i] for i in self.featured_branch_ids]

    def _set_featured_courses(self, request):
        ids = json.loads(request.content).get("courseIds") or []
        self.featured_course_ids = [i for i in ids if i in self.courses]
        return [self.courses[i] for i in self.featured_course_ids]


@pytest.fixture
def fake_api():
    return FakeInstituteApi()


@pytest.fixture
def api(fake_api):
    return fake_api.client()


@pytest.fixture
def app_state(api):
    return AppState.create(api, "http://api.test")


@pytest.fixture
def engine(tmp_path):
    eng = get_engine(f"sqlite:///{tmp_path / 'client.db'}")
    init_db(eng)
    return eng


class RecordingNavigator:
    def __init__(self):
        self.calls = []

    def __call__(self, path, replace=False):
        self.calls.append((path, replace))


@pytest.fixture
def navigate():
    return RecordingNavigator()
