import logging

from fastapi import FastAPI
from .routers import departments, employees
from .utils.errors import register_error_handlers
from .utils.settings import API_PREFIX, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# Initialize FastAPI application
app = FastAPI(title="Employee Management API", version="1.0.0")

# Map domain errors to 404 / 400 responses
register_error_handlers(app)

# Register routers
app.include_router(departments.router, prefix=API_PREFIX)
app.include_router(employees.router, prefix=API_PREFIX)

# Health check endpoint
@app.get("/health")
def health():
    return {"status": "ok"}
