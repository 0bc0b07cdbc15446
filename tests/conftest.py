import os

# Must be set before the application modules build their engine
os.environ.setdefault("TESTING", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from employee_management.db import Base, get_db
from employee_management.main import app

# Force the use of SQLite for testing
TEST_DB_URL = "sqlite:///./test.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fresh schema for every test
@pytest.fixture(autouse=True)
def setup_test_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

# Fixture to override the get_db dependency in FastAPI
@pytest.fixture(autouse=True)
def override_get_db():
    def _get_test_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()
    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def create_department(client):
    counter = {"n": 0}

    def _create(name=None, **extra):
        counter["n"] += 1
        body = {"name": name or f"Department {counter['n']}", "creationDate": "2020-01-15", **extra}
        response = client.post("/api/departments", json=body)
        assert response.status_code == 201, response.json()
        return response.json()
    return _create

@pytest.fixture
def create_employee(client):
    counter = {"n": 0}

    def _create(**overrides):
        counter["n"] += 1
        body = {
            "name": f"Employee {counter['n']}",
            "dateOfBirth": "1990-04-12",
            "salary": 50000,
            "address": "12 Elm St",
            "role": "Analyst",
            "joiningDate": "2021-06-01",
            "yearlyBonusPercentage": 5.0,
        }
        body.update(overrides)
        response = client.post("/api/employees", json=body)
        assert response.status_code == 201, response.json()
        return response.json()
    return _create
