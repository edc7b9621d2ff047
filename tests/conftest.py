"""
Pytest configuration and shared fixtures.
"""

import asyncio
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from db.session import build_engine, get_db, init_db
from models.applications.model import Application
from models.candidate.model import JobSeekerProfile, Experience, Education
from models.jobs.model import JobPosting
from models.skills.model import Skill


@pytest.fixture
def engine(tmp_path):
    """Async engine on a throwaway SQLite file with all tables created."""
    db_path = tmp_path / "test.db"
    # NullPool: every asyncio.run() and the TestClient loop get their own connections
    engine = build_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    asyncio.run(init_db(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def run(session_factory):
    """Run a coroutine function that takes a session, return its result."""
    def _run(fn):
        async def _wrapped():
            async with session_factory() as db:
                return await fn(db)
        return asyncio.run(_wrapped())
    return _run


async def _seed(db: AsyncSession) -> None:
    python = Skill(name="Python")
    sql = Skill(name="SQL")
    docker = Skill(name="Docker")
    react = Skill(name="React")

    alice = JobSeekerProfile(
        id="alice",
        name="Alice Doe",
        email="alice@example.com",
        title="Backend Developer",
        skills=[python, sql, docker],
        experiences=[
            Experience(
                company="Acme",
                position="Developer",
                start_date=datetime(2015, 1, 1),
                end_date=datetime(2020, 1, 1),
            )
        ],
        educations=[
            Education(
                institution="State University",
                degree="BS",
                field="Computer Science",
                start_date=datetime(2010, 9, 1),
                end_date=datetime(2014, 6, 1),
            )
        ],
    )
    bob = JobSeekerProfile(
        id="bob",
        name="Bob Roe",
        email="bob@example.com",
        skills=[react],
    )

    backend = JobPosting(
        id="backend",
        title="Backend Engineer",
        company="Initech",
        description="Build APIs",
        required_skills=[python, sql, docker],
    )
    frontend = JobPosting(
        id="frontend",
        title="Frontend Engineer",
        company="Initech",
        description="Build UIs",
        required_skills=[react, python],
    )
    closed = JobPosting(
        id="closed",
        title="Legacy Engineer",
        company="Globex",
        description="Maintain things",
        is_active=False,
        required_skills=[python],
    )

    db.add_all([alice, bob, backend, frontend, closed])
    await db.commit()


@pytest.fixture
def seeded(run):
    """
    Two candidates and three postings:
      alice: Python, SQL, Docker; 5 years of experience; one degree
      bob:   React; no experience or education
      backend (Python, SQL, Docker), frontend (React, Python), closed (inactive)
    """
    run(_seed)
    return run


@pytest.fixture
def client(session_factory):
    from main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def applications_count(run):
    from sqlalchemy import select, func

    async def _count(db):
        result = await db.execute(select(func.count()).select_from(Application))
        return result.scalar_one()

    return lambda: run(_count)
