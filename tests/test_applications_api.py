import pytest
from portal.models.resume import Resume
from portal.services.mailer import Mailer

SKILLS = [
    "python", "django", "flask", "postgres", "docker", "kubernetes", "redis",
    "celery", "rabbitmq", "graphql", "terraform", "ansible", "linux", "nginx",
    "pytest", "asyncio", "pandas", "numpy", "airflow", "spark", "kafka",
]

@pytest.fixture
def strong_resume(db_session, student_user):
    resume = Resume(
        file_name="strong.pdf",
        file_url="/files/strong.pdf",
        text=" ".join(SKILLS),
        user_id=student_user.id,
    )
    db_session.add(resume)
    db_session.commit()
    return resume

@pytest.fixture
def platform_job(client, hr_user, auth_headers):
    response = client.post("/api/jobs/", json={
        "title": "Platform Engineer",
        "description": "Stack: " + ", ".join(SKILLS),
        "skills": ["Python"],
    }, headers=auth_headers(hr_user))
    return response.json()

def _apply(client, headers, job_id, resume_id):
    return client.post("/api/applications/", json={"job_id": job_id, "resume_id": resume_id}, headers=headers)

def test_weak_match_is_applied(client, student_user, job, resume, auth_headers):
    response = _apply(client, auth_headers(student_user), job.id, resume.id)
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "applied"
    assert data["similarity_score"] == pytest.approx(0.6125)

def test_strong_match_is_shortlisted(client, hr_user, student_user, strong_resume, platform_job, auth_headers):
    response = _apply(client, auth_headers(student_user), platform_job["id"], strong_resume.id)
    data = response.json()
    assert data["status"] == "shortlisted"
    assert data["similarity_score"] == pytest.approx(0.95)

    shortlisted = client.get(
        f"/api/jobs/{platform_job['id']}/shortlisted/", headers=auth_headers(hr_user)
    ).json()
    assert len(shortlisted) == 1
    assert shortlisted[0]["application_id"] == data["id"]
    assert shortlisted[0]["email"] == student_user.email
    assert shortlisted[0]["resume_url"] == strong_resume.file_url

def test_second_application_is_duplicate(client, student_user, job, resume, auth_headers):
    headers = auth_headers(student_user)
    _apply(client, headers, job.id, resume.id)
    response = _apply(client, headers, job.id, resume.id)
    assert response.status_code == 409
    assert response.json()["errors"][0]["msg"] == "You have already applied to this job"
    assert len(client.get("/api/applications/", headers=headers).json()) == 1

def test_apply_to_missing_job(client, student_user, resume, auth_headers):
    response = _apply(client, auth_headers(student_user), 9999, resume.id)
    assert response.status_code == 404
    assert response.json()["errors"][0]["code"] == "JOB_NOT_FOUND"

def test_apply_without_login(client, job, resume):
    response = _apply(client, {}, job.id, resume.id)
    assert response.status_code == 401

def test_hr_lists_job_applications(client, hr_user, student_user, job, resume, auth_headers):
    _apply(client, auth_headers(student_user), job.id, resume.id)
    response = client.get(f"/api/jobs/{job.id}/applications", headers=auth_headers(hr_user))
    assert response.status_code == 200
    assert [a["user_id"] for a in response.json()] == [student_user.id]

def test_email_template_and_send(client, hr_user, student_user, strong_resume, platform_job, auth_headers):
    hr_headers = auth_headers(hr_user)
    _apply(client, auth_headers(student_user), platform_job["id"], strong_resume.id)

    template = client.get(
        f"/api/jobs/{platform_job['id']}/shortlisted/email-template", headers=hr_headers
    ).json()["template"]
    assert "Platform Engineer" in template

    response = client.post(
        f"/api/jobs/{platform_job['id']}/shortlisted/emails",
        json={"template": template},
        headers=hr_headers,
    )
    assert response.status_code == 200
    assert response.json() == {"sent": 1, "recipients": [student_user.email], "failed": []}

def test_send_emails_with_blank_template(client, hr_user, job, auth_headers):
    response = client.post(
        f"/api/jobs/{job.id}/shortlisted/emails", json={"template": "   "}, headers=auth_headers(hr_user)
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "EMPTY_EMAIL_TEMPLATE"

def test_dashboards(client, hr_user, student_user, job, resume, strong_resume, platform_job, auth_headers):
    student_headers = auth_headers(student_user)
    _apply(client, student_headers, job.id, resume.id)
    _apply(client, student_headers, platform_job["id"], strong_resume.id)

    hr = client.get("/api/dashboard/hr", headers=auth_headers(hr_user)).json()
    assert hr["total_jobs"] == 2
    assert hr["total_applications"] == 2
    assert hr["total_shortlisted"] == 1

    student = client.get("/api/dashboard/student", headers=student_headers).json()
    assert len(student["resumes"]) == 2
    titles = {a["job_title"]: a["status"] for a in student["applications"]}
    assert titles == {job.title: "applied", "Platform Engineer": "shortlisted"}
    assert student["available_jobs"] == []

def test_student_dashboard_lists_jobs_not_applied_to(client, student_user, job, resume, platform_job, auth_headers):
    headers = auth_headers(student_user)
    before = client.get("/api/dashboard/student", headers=headers).json()
    assert [j["id"] for j in before["available_jobs"]] == [job.id, platform_job["id"]]

    _apply(client, headers, job.id, resume.id)

    after = client.get("/api/dashboard/student", headers=headers).json()
    assert [j["id"] for j in after["available_jobs"]] == [platform_job["id"]]

def test_student_sees_shortlist_notification(client, student_user, strong_resume, platform_job, auth_headers):
    headers = auth_headers(student_user)
    _apply(client, headers, platform_job["id"], strong_resume.id)

    notes = client.get("/api/notifications/?unread_only=true", headers=headers).json()
    assert len(notes) == 1
    assert "Platform Engineer" in notes[0]["message"]

    client.post("/api/notifications/mark-all-read", headers=headers)
    assert client.get("/api/notifications/?unread_only=true", headers=headers).json() == []

def test_send_emails_reports_failed_recipients(client, hr_user, student_user, strong_resume, platform_job, auth_headers, monkeypatch):
    def unreachable(self, to_email, subject, body):
        raise ConnectionRefusedError("smtp host down")

    monkeypatch.setattr(Mailer, "send", unreachable)
    _apply(client, auth_headers(student_user), platform_job["id"], strong_resume.id)

    response = client.post(
        f"/api/jobs/{platform_job['id']}/shortlisted/emails",
        json={"template": "Hello"},
        headers=auth_headers(hr_user),
    )
    assert response.status_code == 200
    assert response.json() == {"sent": 0, "recipients": [], "failed": [student_user.email]}
