"""
Test suite for the /jobs endpoints.

Tests cover:
- Admin-only writes
- Listing with filters
- Fetch, update and delete by id
- Error handling
"""

NEW_JOB = {
    "title": "New Job",
    "salary": 50000,
    "equity": 0.05,
    "company_handle": "c1",
}


class TestCreateJob:
    """Tests for POST /jobs"""

    def test_ok_for_admin(self, client, admin_headers):
        response = client.post("/jobs", json=NEW_JOB, headers=admin_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert job == {"id": job["id"], **NEW_JOB}

    def test_unauthorized_for_non_admin(self, client, u1_headers):
        response = client.post("/jobs", json=NEW_JOB, headers=u1_headers)
        assert response.status_code == 401

    def test_unauthorized_for_anon(self, client):
        response = client.post("/jobs", json=NEW_JOB)
        assert response.status_code == 401

    def test_missing_data(self, client, admin_headers):
        response = client.post(
            "/jobs",
            json={"salary": 50000, "equity": 0.05, "company_handle": "c1"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_invalid_data(self, client, admin_headers):
        response = client.post("/jobs", json={**NEW_JOB, "salary": "not-a-number"}, headers=admin_headers)
        assert response.status_code == 400

    def test_equity_out_of_range(self, client, admin_headers):
        response = client.post("/jobs", json={**NEW_JOB, "equity": 1.5}, headers=admin_headers)
        assert response.status_code == 400

    def test_duplicate(self, client, admin_headers):
        first = client.post("/jobs", json=NEW_JOB, headers=admin_headers)
        second = client.post("/jobs", json=NEW_JOB, headers=admin_headers)

        assert first.status_code == 201
        assert second.status_code == 400
        assert "duplicate" in second.json()["error"]["message"].lower()

    def test_unknown_company(self, client, admin_headers):
        response = client.post("/jobs", json={**NEW_JOB, "company_handle": "nope"}, headers=admin_headers)
        assert response.status_code == 400


class TestListJobs:
    """Tests for GET /jobs"""

    def test_no_filter(self, client, job_ids):
        response = client.get("/jobs")

        assert response.status_code == 200
        assert response.json()["jobs"] == [
            {"id": job_ids["Job1"], "title": "Job1", "salary": 100000, "equity": 0.0, "company_handle": "c1"},
            {"id": job_ids["Job2"], "title": "Job2", "salary": 200000, "equity": 0.1, "company_handle": "c2"},
            {"id": job_ids["Job3"], "title": "Job3", "salary": None, "equity": None, "company_handle": "c3"},
        ]

    def test_title_filter(self, client):
        response = client.get("/jobs", params={"title": "job1"})

        assert [j["title"] for j in response.json()["jobs"]] == ["Job1"]

    def test_min_salary_filter(self, client):
        response = client.get("/jobs", params={"minSalary": 200000})

        assert [j["title"] for j in response.json()["jobs"]] == ["Job2"]

    def test_has_equity_filter(self, client):
        response = client.get("/jobs", params={"hasEquity": "true"})

        assert [j["title"] for j in response.json()["jobs"]] == ["Job2"]

    def test_company_handle_filter(self, client):
        response = client.get("/jobs", params={"companyHandle": "c1"})

        assert [j["title"] for j in response.json()["jobs"]] == ["Job1"]

    def test_bad_min_salary(self, client):
        response = client.get("/jobs", params={"minSalary": "lots"})
        assert response.status_code == 400


class TestGetJob:
    """Tests for GET /jobs/{id}"""

    def test_get(self, client, job_ids):
        response = client.get(f"/jobs/{job_ids['Job2']}")

        assert response.status_code == 200
        assert response.json() == {
            "job": {
                "id": job_ids["Job2"],
                "title": "Job2",
                "salary": 200000,
                "equity": 0.1,
                "company_handle": "c2",
            }
        }

    def test_not_found(self, client):
        response = client.get("/jobs/0")
        assert response.status_code == 404


class TestUpdateJob:
    """Tests for PATCH /jobs/{id}"""

    def test_ok_for_admin(self, client, job_ids, admin_headers):
        response = client.patch(
            f"/jobs/{job_ids['Job1']}",
            json={"title": "Updated Job", "salary": 70000},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["job"] == {
            "id": job_ids["Job1"],
            "title": "Updated Job",
            "salary": 70000,
            "equity": 0.0,
            "company_handle": "c1",
        }

    def test_unauthorized_for_non_admin(self, client, job_ids, u1_headers):
        response = client.patch(f"/jobs/{job_ids['Job1']}", json={"title": "Updated Job"}, headers=u1_headers)
        assert response.status_code == 401

    def test_not_found(self, client, admin_headers):
        response = client.patch("/jobs/0", json={"title": "No Job"}, headers=admin_headers)
        assert response.status_code == 404

    def test_id_change_rejected(self, client, job_ids, admin_headers):
        response = client.patch(f"/jobs/{job_ids['Job1']}", json={"id": "new-id"}, headers=admin_headers)
        assert response.status_code == 400

    def test_company_change_rejected(self, client, job_ids, admin_headers):
        response = client.patch(f"/jobs/{job_ids['Job1']}", json={"company_handle": "c2"}, headers=admin_headers)
        assert response.status_code == 400

    def test_invalid_data(self, client, job_ids, admin_headers):
        response = client.patch(f"/jobs/{job_ids['Job1']}", json={"salary": "not-a-number"}, headers=admin_headers)
        assert response.status_code == 400


class TestDeleteJob:
    """Tests for DELETE /jobs/{id}"""

    def test_ok_for_admin(self, client, job_ids, admin_headers):
        response = client.delete(f"/jobs/{job_ids['Job1']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": str(job_ids["Job1"])}

    def test_unauthorized_for_non_admin(self, client, job_ids, u1_headers):
        response = client.delete(f"/jobs/{job_ids['Job1']}", headers=u1_headers)
        assert response.status_code == 401

    def test_not_found(self, client, admin_headers):
        response = client.delete("/jobs/0", headers=admin_headers)
        assert response.status_code == 404
