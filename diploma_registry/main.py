import logging

from fastapi import FastAPI

from diploma_registry.core.logging_middleware import LoggingMiddleware
from diploma_registry.db.init_db import init_db
from diploma_registry.routers.certificates import router as certificates_router
from diploma_registry.routers.grades import router as grades_router
from diploma_registry.routers.modules import router as modules_router
from diploma_registry.routers.programs import router as programs_router
from diploma_registry.routers.student_records import router as student_records_router
from diploma_registry.routers.students import router as students_router
from diploma_registry.routers.universities import router as universities_router
from diploma_registry.routers.verifications import router as verifications_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Diploma Registry")

# Middleware
app.add_middleware(LoggingMiddleware)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event
@app.on_event("startup")
def on_startup():
    init_db()


# Include routers
app.include_router(universities_router, prefix="/universities", tags=["universities"])
app.include_router(programs_router, prefix="/programs", tags=["programs"])
app.include_router(modules_router, prefix="/modules", tags=["modules"])
app.include_router(students_router, prefix="/students", tags=["students"])
app.include_router(student_records_router, prefix="/student-records", tags=["student-records"])
app.include_router(grades_router, prefix="/grades", tags=["grades"])
app.include_router(certificates_router, prefix="/certificates", tags=["certificates"])
app.include_router(verifications_router, prefix="/verifications", tags=["verifications"])
