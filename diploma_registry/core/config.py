import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Override with e.g. DIPLOMA_DATABASE_URL=postgresql+psycopg://... in deployments.
DATABASE_URL = os.getenv("DIPLOMA_DATABASE_URL", f"sqlite:///{BASE_DIR}/diploma_registry.db")

# Issuance policy
ENFORCE_CREDIT_TOTAL = os.getenv("DIPLOMA_ENFORCE_CREDIT_TOTAL", "false").lower() in ("1", "true", "yes")
DEFAULT_DEGREE_TITLE = "Bachelor of Science"
DEFAULT_SPECIALIZATION = "Computer Science"

# Marks are percentages
MARK_MIN = 0
MARK_MAX = 100
