import pytest
from portal.core.init_system import seed_default_data
from portal.models.application import Application, ApplicationStatus
from portal.models.job import Job
from portal.models.shortlisted_candidate import ShortlistedCandidate
from portal.models.user import User

def test_seed_populates_empty_store(db_session):
    assert seed_default_data(db_session) is True

    assert {u.email for u in db_session.query(User).all()} == {"hr@example.com", "student@example.com"}
    assert [j.title for j in db_session.query(Job).order_by(Job.id)] == ["Frontend Developer", "Backend Engineer"]

    # The sample resume shares nine qualifying words with the first job
    application = db_session.query(Application).one()
    assert application.status == ApplicationStatus.SHORTLISTED
    assert application.similarity_score == pytest.approx(0.7025)
    shortlisted = db_session.query(ShortlistedCandidate).all()
    assert [s.application_id for s in shortlisted] == [application.id]

def test_seed_skips_populated_store(db_session, hr_user):
    assert seed_default_data(db_session) is False
    assert db_session.query(Job).count() == 0
