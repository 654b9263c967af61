# Import all models here so Base.metadata sees every table
# (used by init_db, alembic and the test suite).
from diploma_registry.db.base_class import Base  # noqa: F401
from diploma_registry.models.certificate import Certificate, CertificateMark  # noqa: F401
from diploma_registry.models.grade import Grade  # noqa: F401
from diploma_registry.models.module import Module  # noqa: F401
from diploma_registry.models.program import Program  # noqa: F401
from diploma_registry.models.student import Student  # noqa: F401
from diploma_registry.models.student_record import StudentRecord  # noqa: F401
from diploma_registry.models.university import University  # noqa: F401
from diploma_registry.models.verification import Verification  # noqa: F401
