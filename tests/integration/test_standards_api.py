"""
Integration tests for the standards HTTP router.

The router runs against an in-memory override store injected through
FastAPI dependency overrides.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.standards_api import get_store, router
from src.standards.errors import StoreUnavailableError
from src.store.memory import InMemoryOverrideStore


@pytest.fixture
def client(seeded_store):
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_store] = lambda: seeded_store
    return TestClient(app)


def test_resolve_example_scenario(client):
    resp = client.get("/api/standards/resolve", params={
        "jurisdiction": "CA", "subject": "Math", "grade": 4, "district_id": "d1", "school_id": "s1",
    })
    assert resp.status_code == 200
    standards = resp.json()["standards"]
    assert len(standards) == 17
    assert standards[0]["standard_id"] == "CA.MATH.4.OA.1"
    assert standards[0]["id"] == "CA.MATH.4.OA.1"
    assert standards[0]["resolved_from"] == "state"
    assert standards[-1]["resolved_from"] == "district"


def test_resolve_filters(client):
    resp = client.get("/api/standards/resolve", params={
        "jurisdiction": "CA", "subject": "Math", "grade": 4, "school_id": "s1", "resolved_from": "school",
    })
    assert [s["standard_id"] for s in resp.json()["standards"]] == ["CCSS.MATH.4.NBT.1"]


def test_resolve_rejects_negative_grade(client):
    resp = client.get("/api/standards/resolve", params={"jurisdiction": "CA", "subject": "Math", "grade": -1})
    assert resp.status_code == 422


def test_lesson_lines(client):
    resp = client.get("/api/standards/lesson", params={"jurisdiction": "DEFAULT", "subject": "Art", "grade": 3})
    assert resp.json()["standards"] == [
        "GEN.Art.3.1 — Aligned to Art 2nd Grade State Standards",
        "21C.3.CT — 21st Century Skills — Critical Thinking and Collaboration",
        "SEL.3.SM — SEL Competency — Self-Management and Responsible Decision-Making",
    ]


def test_reference_lists(client):
    assert "Computer Science" in client.get("/api/standards/subjects").json()["subjects"]
    jurisdictions = client.get("/api/standards/jurisdictions").json()["jurisdictions"]
    assert jurisdictions[0]["code"] == "DEFAULT"
    assert {"code": "FL", "name": "Florida", "frameworks": ["B.E.S.T."]} in jurisdictions


def test_district_standard_lifecycle(client):
    created = client.post("/api/standards/districts", json={
        "district_id": "d2", "subject": "Science", "grade": 6, "description": "Watershed field study",
    })
    assert created.status_code == 201
    record_id = created.json()["id"]

    listed = client.get("/api/standards/districts/d2").json()["standards"]
    assert [r["id"] for r in listed] == [record_id]

    resolved = client.get("/api/standards/resolve", params={
        "jurisdiction": "TX", "subject": "Science", "grade": 6, "district_id": "d2",
    }).json()["standards"]
    assert resolved[-1]["standard_id"] == record_id

    assert client.delete(f"/api/standards/districts/standards/{record_id}").json() == {"ok": True}
    assert client.get("/api/standards/districts/d2").json()["standards"] == []


def test_school_override_lifecycle(client):
    created = client.post("/api/standards/schools", json={
        "school_id": "s2", "standard_id": "SHAPE.3.S1", "custom_description": "Recess skills circuit",
    })
    assert created.status_code == 201
    record_id = created.json()["id"]

    resolved = client.get("/api/standards/resolve", params={
        "jurisdiction": "DEFAULT", "subject": "PE", "grade": 3, "school_id": "s2",
    }).json()["standards"]
    assert resolved[0]["description"] == "Recess skills circuit"

    assert client.delete(f"/api/standards/schools/overrides/{record_id}").status_code == 200
    assert client.get("/api/standards/schools/s2").json()["overrides"] == []


def test_validation_errors_are_400(client):
    resp = client.post("/api/standards/districts", json={
        "district_id": "d2", "subject": "Math", "grade": 4, "description": "  ",
    })
    assert resp.status_code == 400
    resp = client.post("/api/standards/schools", json={
        "school_id": "", "standard_id": "X", "custom_description": "y",
    })
    assert resp.status_code == 400


def test_store_failure_on_write_is_503():
    class BrokenStore(InMemoryOverrideStore):
        async def insert_district_standard(self, draft):
            raise StoreUnavailableError("district", "read-only replica")

    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_store] = lambda: BrokenStore()
    resp = TestClient(app).post("/api/standards/districts", json={
        "district_id": "d1", "subject": "Math", "grade": 4, "description": "x",
    })
    assert resp.status_code == 503
