"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown (in-memory SQLite, seeded skill catalog)
- FastAPI test client
- Signed-up seekers and employers with auth headers
- Sample request payloads
"""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.models.skill import Skill
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session, monkeypatch):
    """
    FastAPI test client with overridden database dependency.

    Startup seeding runs against the test database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    monkeypatch.setattr("app.core.database.SessionLocal", TestingSessionLocal)
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def catalog(client, db_session):
    """Seeded catalog skills keyed by name, as string ids."""
    return {skill.skill_name: str(skill.id) for skill in db_session.query(Skill).all()}


def signup(client, role: str, email: str = None, password: str = "secret123") -> dict:
    """Sign up through the API and return auth headers plus the user body."""
    email = email or f"{role}_{uuid.uuid4().hex[:8]}@example.com"
    response = client.post(
        "/api/auth/signup",
        json={"email": email, "password": password, "role": role}
    )
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    return {
        "headers": {"Authorization": f"Bearer {data['token']}"},
        "user": data["user"],
        "email": email,
        "password": password,
    }


@pytest.fixture
def seeker(client):
    return signup(client, "job_seeker")


@pytest.fixture
def other_seeker(client):
    return signup(client, "job_seeker")


@pytest.fixture
def employer(client):
    return signup(client, "job_provider")


@pytest.fixture
def other_employer(client):
    return signup(client, "job_provider")


@pytest.fixture
def sample_seeker_profile(catalog):
    """Seeker profile payload with one uncertified skill"""
    return {
        "name": "Ramesh Patil",
        "address": "Kothrud, Pune",
        "phone": "+91 98765 43210",
        "education": "10th pass",
        "skills": [{"skillId": catalog["Painting"]}],
        "employmentHistory": [
            {"companyName": "Shree Builders", "duration": "2 years", "description": "Wall painting"}
        ],
        "references": [
            {"name": "Suresh Kale", "contact": "+91 90000 11111"}
        ],
    }


@pytest.fixture
def sample_employer_profile():
    return {
        "companyName": "Deccan Constructions",
        "companyDescription": "Residential construction in Pune",
        "companyWebsite": "https://deccan.example.com",
        "contactInfo": "hr@deccan.example.com",
    }


@pytest.fixture
def sample_job_data(catalog):
    """Sample job payload requiring Painting"""
    return {
        "title": "Wall painter for 3BHK flat",
        "description": "Interior painting, materials provided.",
        "pay": 800,
        "employmentType": "PER_DAY",
        "location": "Pune",
        "duration": "5 days",
        "requiredSkills": [catalog["Painting"]],
    }


@pytest.fixture
def seeker_with_profile(client, seeker, sample_seeker_profile):
    response = client.post("/api/applicant/profile", json=sample_seeker_profile, headers=seeker["headers"])
    assert response.status_code == 201, response.text
    seeker["profile"] = response.json()["data"]
    return seeker


@pytest.fixture
def employer_with_profile(client, employer, sample_employer_profile):
    response = client.post("/api/employer/profile", json=sample_employer_profile, headers=employer["headers"])
    assert response.status_code == 201, response.text
    employer["profile"] = response.json()["data"]
    return employer


@pytest.fixture
def open_job(client, employer_with_profile, sample_job_data):
    """An OPEN job posted by `employer_with_profile`"""
    response = client.post("/api/employer/jobs", json=sample_job_data, headers=employer_with_profile["headers"])
    assert response.status_code == 201, response.text
    return response.json()["data"]
