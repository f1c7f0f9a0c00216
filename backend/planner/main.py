"""
# `backend/planner/main.py` - Application entry point

## Overview
Creates the FastAPI app, configures logging and CORS from settings and mounts
the routers.

## Routers
**Public:**
- `/login`, `/logout`

**Token protected:**
- `/courses`
- `/programs`
- `/branches`
- `/events`
- `/users`

Firebase is initialised lazily on the first request that needs Firestore
(`config.get_db`), so importing the app does not touch the network.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.planner.config import get_settings
from backend.planner.core.errors import PlannerError
from backend.planner.routers import auth, branches, courses, events, programs, users
from backend.planner.routers.common import http_error

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Initialize FastAPI app
app = FastAPI(
    title="University Planner API",
    description="Faculties, programs, courses, branches, timetable events and user profiles.",
    version="1.0.0",
    debug=settings.debug,
)

# Configure CORS (allow front-end domain or all origins as specified)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(courses.router)
app.include_router(programs.router)
app.include_router(branches.router)
app.include_router(events.router)
app.include_router(users.router)


# Dependency içinde kalan hatalar (örn. Firestore başlatılamadı) aynı sözlükle döner
@app.exception_handler(PlannerError)
async def planner_error_handler(request: Request, exc: PlannerError):
    mapped = http_error(exc, "Failed to reach document store")
    return JSONResponse(status_code=mapped.status_code, content={"detail": mapped.detail})


# Run the app directly with uvicorn (for development)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("backend.planner.main:app", host="0.0.0.0", port=8000, reload=True)
