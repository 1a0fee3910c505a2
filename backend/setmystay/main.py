from __future__ import annotations

from collections.abc import AsyncGenerator  # noqa: TC003
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from setmystay.config import settings
from setmystay.database import SessionLocal, create_tables
from setmystay.routers import (
    admin,
    entitlements,
    health,
    inquiries,
    listings,
    smart_sort,
    submissions,
)
from setmystay.services.catalog_service import seed_catalog


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Import models so Base.metadata knows about them
    import setmystay.models  # noqa: F401

    create_tables()
    if settings.seed_catalog:
        db = SessionLocal()
        try:
            seed_catalog(db)
        finally:
            db.close()
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(listings.router, prefix=settings.api_prefix, tags=["listings"])
app.include_router(
    entitlements.router, prefix=settings.api_prefix, tags=["entitlements"]
)
app.include_router(smart_sort.router, prefix=settings.api_prefix, tags=["smart-sort"])
app.include_router(submissions.router, prefix=settings.api_prefix, tags=["submissions"])
app.include_router(inquiries.router, prefix=settings.api_prefix, tags=["inquiries"])
app.include_router(admin.router, prefix=settings.api_prefix, tags=["admin"])
