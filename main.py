import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from core.config import settings
from core.database import init_db, close_db, ping_db
from services.error_monitoring import log_error_with_context

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.ENVIRONMENT == "production" else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from routers import users, doctors, appointments, medicines, orders

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 Starting Doctor Portal API Server...")
    init_db()
    if ping_db():
        logger.info("✔ MongoDB Connected Successfully!")
    else:
        logger.warning("⚠️ MongoDB not reachable yet; requests will fail until it is.")
    yield
    # Shutdown
    logger.info("🛑 Shutting down Server...")
    close_db()

app = FastAPI(
    title="Doctor Portal API",
    description="Users, doctor onboarding, appointments, medicine catalog and orders",
    version="1.0.0",
    lifespan=lifespan
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list({settings.FRONTEND_URL, *settings.CORS_ORIGINS}),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(users.router)
app.include_router(doctors.router)
app.include_router(appointments.router)
app.include_router(medicines.router)
app.include_router(orders.router)

# Every client-facing failure uses the portal envelope
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None)
    )

# Validation exception handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    error_details = [{"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"]} for e in errors]
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation error", "detail": error_details}
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    log_error_with_context(exc, request)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": str(exc)}
    )

@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Doctor Portal Backend Running!"

@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "api", "version": "1.0.0", "database": "connected" if ping_db() else "unavailable"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT, reload=(settings.ENVIRONMENT=="development"))
