import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from telemedicine.certifications.router import router as certifications_router
from telemedicine.config import settings
from telemedicine.database import ensure_schema
from telemedicine.doctors.router import router as doctors_router
from telemedicine.drug_types.router import router as drug_types_router
from telemedicine.exceptions import unhandled_exception_handler
from telemedicine.hospitals.router import router as hospitals_router
from telemedicine.logging_config import configure_logging
from telemedicine.majors.router import router as majors_router
from telemedicine.middleware import CorrelationIDMiddleware
from telemedicine.patients.router import router as patients_router
from telemedicine.roles.router import router as roles_router
from telemedicine.slots.router import router as slots_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    await ensure_schema()
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(CorrelationIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(Exception, unhandled_exception_handler)

# Routers
app.include_router(roles_router, prefix="/api/v1/roles", tags=["Roles"])
app.include_router(drug_types_router, prefix="/api/v1/drug-types", tags=["Drug Types"])
app.include_router(hospitals_router, prefix="/api/v1/hospitals", tags=["Hospitals"])
app.include_router(majors_router, prefix="/api/v1/majors", tags=["Majors"])
app.include_router(certifications_router, prefix="/api/v1/certifications", tags=["Certifications"])
app.include_router(doctors_router, prefix="/api/v1/doctors", tags=["Doctors"])
app.include_router(patients_router, prefix="/api/v1/patients", tags=["Patients"])
app.include_router(slots_router, prefix="/api/v1/slots", tags=["Slots"])


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "version": settings.app_version}
