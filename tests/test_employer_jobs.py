"""
Tests for employer job management.

Tests:
- Posting jobs (profile required, skill validation)
- Listing, reading, replacing and deleting own jobs
- Closing a job
- Applicant lists
"""

from app.models.application import Application
from app.models.job import JobSkill


class TestCreateJob:
    """POST /api/employer/jobs"""

    def test_create_job(self, client, employer_with_profile, sample_job_data, catalog):
        """A new job starts OPEN with its skills and company attached"""
        response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer_with_profile["headers"])

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["title"] == sample_job_data["title"]
        assert data["pay"] == 800
        assert data["employmentType"] == "PER_DAY"
        assert data["status"] == "OPEN"
        assert data["employerProfileId"] == employer_with_profile["profile"]["id"]
        assert [s["skillId"] for s in data["requiredSkills"]] == [catalog["Painting"]]
        assert data["employerProfile"]["companyName"] == "Deccan Constructions"

    def test_create_without_profile(self, client, employer, sample_job_data):
        """Posting requires an employer profile"""
        response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer["headers"])

        assert response.status_code == 400
        assert response.json()["message"] == "Create your employer profile first"

    def test_duplicate_skills_collapsed(self, client, employer_with_profile, sample_job_data, catalog):
        """Repeated required skills are stored once"""
        sample_job_data["requiredSkills"] = [catalog["Painting"], catalog["Painting"], catalog["Carpentry"]]

        response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer_with_profile["headers"])

        assert response.status_code == 201
        assert len(response.json()["data"]["requiredSkills"]) == 2

    def test_unknown_skill(self, client, employer_with_profile, sample_job_data):
        """Required skills must exist in the catalog"""
        sample_job_data["requiredSkills"] = ["8a6e0804-2bd0-4672-b79d-d97027f9071a"]

        response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer_with_profile["headers"])

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "requiredSkills[0]"

    def test_pay_must_be_positive(self, client, employer_with_profile, sample_job_data):
        """Zero pay is rejected"""
        sample_job_data["pay"] = 0

        response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer_with_profile["headers"])

        assert response.status_code == 400

    def test_invalid_employment_type(self, client, employer_with_profile, sample_job_data):
        """Employment type must be PER_DAY or PER_PROJECT"""
        sample_job_data["employmentType"] = "HOURLY"

        response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer_with_profile["headers"])

        assert response.status_code == 400

    def test_status_cannot_be_set_on_create(self, client, employer_with_profile, sample_job_data):
        """New jobs are always OPEN; status is not accepted on create"""
        sample_job_data["status"] = "CLOSED"

        response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer_with_profile["headers"])

        assert response.status_code == 400

    def test_seeker_cannot_post(self, client, seeker, sample_job_data):
        """Only employers may post jobs"""
        response = client.post("/api/employer/jobs", json=sample_job_data, headers=seeker["headers"])

        assert response.status_code == 403


class TestManageJobs:
    """List, read, replace and delete own jobs"""

    def test_list_own_jobs(self, client, employer_with_profile, open_job, other_employer, sample_employer_profile,
                           sample_job_data):
        """The list holds only the caller's jobs"""
        client.post("/api/employer/profile", json=sample_employer_profile, headers=other_employer["headers"])
        client.post("/api/employer/jobs", json=sample_job_data, headers=other_employer["headers"])

        response = client.get("/api/employer/jobs", headers=employer_with_profile["headers"])

        assert response.status_code == 200
        assert [j["id"] for j in response.json()["data"]] == [open_job["id"]]

    def test_list_without_profile(self, client, employer):
        """No profile means no jobs, not an error"""
        response = client.get("/api/employer/jobs", headers=employer["headers"])

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_get_own_job(self, client, employer_with_profile, open_job):
        """An employer can read one of their jobs"""
        response = client.get(f"/api/employer/jobs/{open_job['id']}", headers=employer_with_profile["headers"])

        assert response.status_code == 200
        assert response.json()["data"]["id"] == open_job["id"]

    def test_update_job(self, client, employer_with_profile, open_job, sample_job_data, catalog, db_session):
        """Update replaces fields and the required skill set"""
        payload = dict(sample_job_data, title="Painter and carpenter", pay=1200.5,
                       requiredSkills=[catalog["Carpentry"], catalog["Painting"]])

        response = client.put(
            f"/api/employer/jobs/{open_job['id']}", json=payload, headers=employer_with_profile["headers"]
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Painter and carpenter"
        assert data["pay"] == 1200.5
        assert data["status"] == "OPEN"
        assert {s["skill"]["skillName"] for s in data["requiredSkills"]} == {"Carpentry", "Painting"}
        assert db_session.query(JobSkill).count() == 2

    def test_update_clears_skills(self, client, employer_with_profile, open_job, sample_job_data, db_session):
        """An empty requiredSkills list removes every skill"""
        payload = dict(sample_job_data, requiredSkills=[])

        response = client.put(
            f"/api/employer/jobs/{open_job['id']}", json=payload, headers=employer_with_profile["headers"]
        )

        assert response.status_code == 200
        assert response.json()["data"]["requiredSkills"] == []
        assert db_session.query(JobSkill).count() == 0

    def test_close_job(self, client, employer_with_profile, open_job, sample_job_data):
        """A closed job drops out of the feed"""
        payload = dict(sample_job_data, status="CLOSED")

        response = client.put(
            f"/api/employer/jobs/{open_job['id']}", json=payload, headers=employer_with_profile["headers"]
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "CLOSED"

        feed = client.get("/api/jobs").json()["data"]
        assert open_job["id"] not in [j["id"] for j in feed]

    def test_reopen_job(self, client, employer_with_profile, open_job, sample_job_data):
        """A closed job can be opened again"""
        url = f"/api/employer/jobs/{open_job['id']}"
        headers = employer_with_profile["headers"]
        client.put(url, json=dict(sample_job_data, status="CLOSED"), headers=headers)

        response = client.put(url, json=dict(sample_job_data, status="OPEN"), headers=headers)

        assert response.json()["data"]["status"] == "OPEN"

    def test_update_without_status_keeps_status(self, client, employer_with_profile, open_job, sample_job_data):
        """Leaving status out keeps the current one"""
        url = f"/api/employer/jobs/{open_job['id']}"
        headers = employer_with_profile["headers"]
        client.put(url, json=dict(sample_job_data, status="CLOSED"), headers=headers)

        response = client.put(url, json=sample_job_data, headers=headers)

        assert response.json()["data"]["status"] == "CLOSED"

    def test_delete_job_removes_applications(self, client, employer_with_profile, open_job, seeker_with_profile,
                                             db_session):
        """Deleting a job deletes its applications"""
        client.post("/api/applications", json={"jobId": open_job["id"]}, headers=seeker_with_profile["headers"])

        response = client.delete(f"/api/employer/jobs/{open_job['id']}", headers=employer_with_profile["headers"])

        assert response.status_code == 200
        assert db_session.query(Application).count() == 0
        assert client.get(f"/api/jobs/{open_job['id']}").status_code == 404

    def test_missing_job(self, client, employer_with_profile):
        """Unknown job id is 404"""
        response = client.get(
            "/api/employer/jobs/2b0a51a3-5d3c-4a55-9d8e-3f1f6f0c9e11", headers=employer_with_profile["headers"]
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Job not found"


class TestOwnership:
    """Another employer's job is indistinguishable from a missing one"""

    def test_cannot_read_others_job(self, client, open_job, other_employer):
        """Another employer's job reads as missing"""
        response = client.get(f"/api/employer/jobs/{open_job['id']}", headers=other_employer["headers"])

        assert response.status_code == 404

    def test_cannot_update_others_job(self, client, open_job, other_employer, sample_job_data):
        """Another employer's job cannot be changed"""
        response = client.put(
            f"/api/employer/jobs/{open_job['id']}",
            json=dict(sample_job_data, title="Hijacked"),
            headers=other_employer["headers"]
        )

        assert response.status_code == 404
        assert client.get(f"/api/jobs/{open_job['id']}").json()["data"]["title"] == sample_job_data["title"]

    def test_cannot_delete_others_job(self, client, open_job, other_employer):
        """Another employer's job cannot be deleted"""
        response = client.delete(f"/api/employer/jobs/{open_job['id']}", headers=other_employer["headers"])

        assert response.status_code == 404
        assert client.get(f"/api/jobs/{open_job['id']}").status_code == 200

    def test_cannot_list_others_applicants(self, client, open_job, other_employer):
        """Another employer's applicants stay hidden"""
        response = client.get(f"/api/employer/jobs/{open_job['id']}/applicants", headers=other_employer["headers"])

        assert response.status_code == 404


class TestApplicants:
    """GET /api/employer/jobs/{job_id}/applicants"""

    def test_list_applicants(self, client, employer_with_profile, open_job, seeker_with_profile):
        """Applicants come with their full seeker profile"""
        applied = client.post(
            "/api/applications", json={"jobId": open_job["id"]}, headers=seeker_with_profile["headers"]
        )

        response = client.get(
            f"/api/employer/jobs/{open_job['id']}/applicants", headers=employer_with_profile["headers"]
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data) == 1
        assert data[0]["id"] == applied.json()["data"]["id"]
        profile = data[0]["seekerProfile"]
        assert profile["name"] == "Ramesh Patil"
        assert profile["skills"][0]["skill"]["skillName"] == "Painting"
        assert profile["employmentHistory"][0]["companyName"] == "Shree Builders"
        assert profile["references"][0]["name"] == "Suresh Kale"

    def test_no_applicants(self, client, employer_with_profile, open_job):
        """A job nobody applied to has an empty list"""
        response = client.get(
            f"/api/employer/jobs/{open_job['id']}/applicants", headers=employer_with_profile["headers"]
        )

        assert response.status_code == 200
        assert response.json()["data"] == []
