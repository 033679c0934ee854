"""
Tests HTTP de las sublistas experience / education.
"""
import pytest

EXPERIENCE = {"title": "Dev", "company": "Acme", "from": "2020-01-01", "location": "Remote"}
EDUCATION = {"school": "UCR", "degree": "BSc", "from": "2015-02-01"}


def _add(client, headers, path, body):
    resp = client.put(f"/api/profile/{path}", json=body, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.mark.parametrize(
    "kind,body,title_key",
    [("experience", EXPERIENCE, "title"), ("education", EDUCATION, "school")],
)
class TestEntries:
    def test_insert_is_newest_first(self, client, with_profile, kind, body, title_key):
        _add(client, with_profile, kind, {**body, title_key: "E1"})
        data = _add(client, with_profile, kind, {**body, title_key: "E2"})
        entries = data[kind]
        assert [e[title_key] for e in entries] == ["E2", "E1"]
        assert entries[0]["id"] != entries[1]["id"]
        assert entries[0]["from"] == body["from"]

    def test_update_by_id(self, client, with_profile, kind, body, title_key):
        _add(client, with_profile, kind, {**body, title_key: "E1"})
        entries = _add(client, with_profile, kind, {**body, title_key: "E2"})[kind]
        target = entries[1]

        resp = client.put(
            f"/api/profile/{kind}/{target['id']}",
            json={**body, title_key: "E1 edited", "current": True},
            headers=with_profile,
        )
        assert resp.status_code == 200
        updated = resp.json()[kind]
        assert [e["id"] for e in updated] == [e["id"] for e in entries]
        assert updated[1][title_key] == "E1 edited"
        assert updated[1]["current"] is True
        assert updated[0] == entries[0]

    def test_update_unknown_id_is_noop(self, client, with_profile, kind, body, title_key):
        before = _add(client, with_profile, kind, body)[kind]
        resp = client.put(f"/api/profile/{kind}/does-not-exist", json=body, headers=with_profile)
        assert resp.status_code == 200
        assert resp.json()[kind] == before

    def test_remove(self, client, with_profile, kind, body, title_key):
        _add(client, with_profile, kind, body)
        entries = _add(client, with_profile, kind, body)[kind]

        resp = client.delete(f"/api/profile/{kind}/{entries[0]['id']}", headers=with_profile)
        assert resp.status_code == 200
        after = resp.json()[kind]
        assert len(after) == 1
        assert entries[0]["id"] not in [e["id"] for e in after]

        resp = client.delete(f"/api/profile/{kind}/unknown", headers=with_profile)
        assert resp.json()[kind] == after

    def test_required_fields(self, client, with_profile, kind, body, title_key):
        resp = client.put(f"/api/profile/{kind}", json={}, headers=with_profile)
        assert resp.status_code == 400
        fields = [e["field"] for e in resp.json()["errors"]]
        assert title_key in fields
        assert "from" in fields

    def test_needs_existing_profile(self, client, auth, kind, body, title_key):
        resp = client.put(f"/api/profile/{kind}", json=body, headers=auth)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "There is no profile for this user."
        assert client.get("/api/profile/me", headers=auth).status_code == 400

    def test_upsert_keeps_entries(self, client, with_profile, profile_payload, kind, body, title_key):
        entries = _add(client, with_profile, kind, body)[kind]
        data = client.post("/api/profile/", json=profile_payload, headers=with_profile).json()
        assert data[kind] == entries


def test_bad_date_is_validation_error(client, with_profile):
    resp = client.put(
        "/api/profile/experience",
        json={**EXPERIENCE, "from": "not-a-date"},
        headers=with_profile,
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "from"
