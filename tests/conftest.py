import os

TEST_DB_FILE = "test_diploma_registry.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"

# must be set before the app (and its engine) is imported
os.environ["DIPLOMA_DATABASE_URL"] = TEST_DB_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from diploma_registry.core.deps import get_db  # noqa: E402
from diploma_registry.db.base import Base  # noqa: E402
from diploma_registry.db.session import enable_sqlite_foreign_keys  # noqa: E402
from diploma_registry.main import app  # noqa: E402
from diploma_registry.models.certificate import Certificate, CertificateMark  # noqa: E402
from diploma_registry.models.grade import Grade  # noqa: E402
from diploma_registry.models.module import Module  # noqa: E402
from diploma_registry.models.program import Program  # noqa: E402
from diploma_registry.models.student import Student  # noqa: E402
from diploma_registry.models.student_record import StudentRecord  # noqa: E402
from diploma_registry.models.university import University  # noqa: E402
from diploma_registry.models.verification import Verification  # noqa: E402

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed(setup_test_db):
    """
    Seed a clean minimal dataset for each test:
    one university, a 30-credit program with modules CS101 (20) and CS102 (10),
    and one student enrolled on that program with no grades yet.
    """
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        for model in (
            Verification,
            CertificateMark,
            Certificate,
            StudentRecord,
            Grade,
            Student,
            Module,
            Program,
            University,
        ):
            db.query(model).delete()
        db.commit()

        university = University(
            name="University of Example",
            address="1 College Road",
            contact_email="registry@example.com",
            phone="+44 20 0000 0000",
        )
        db.add(university)
        db.commit()
        db.refresh(university)

        program = Program(
            university_id=university.id,
            title="Computer Science",
            level="BSc",
            total_credits_required=30,
        )
        db.add(program)
        db.commit()
        db.refresh(program)

        m1 = Module(program_id=program.id, code="CS101", name="Programming", credits=20)
        m2 = Module(program_id=program.id, code="CS102", name="Databases", credits=10)
        db.add_all([m1, m2])
        db.commit()
        db.refresh(m1)
        db.refresh(m2)

        student = Student(
            university_id=university.id,
            program_id=program.id,
            matricule="UOE-0001",
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            major="Computer Science",
        )
        db.add(student)
        db.commit()
        db.refresh(student)

        yield {
            "university_id": university.id,
            "program_id": program.id,
            "module_ids": [m1.id, m2.id],
            "student_id": student.id,
        }
    finally:
        db.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
