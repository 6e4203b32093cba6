"""
JAN Product Spec Proxy - FastAPI Main Entry

✅ LOCAL:
    cd backend
    python -m uvicorn janproxy.main:app --reload --host 0.0.0.0 --port 8000

✅ TEST:
    curl -i http://127.0.0.1:8000/health
    curl -i "http://127.0.0.1:8000/api/bihinkanri-proxy?jan_code=4901234567890"
    curl -i "http://127.0.0.1:8000/api/bihinkanri-proxy?jan_code=4901234567890&debug=true"

✅ REQUIRED ENV:
    BIHINKANRI_API_KEY, BIHINKANRI_ACCOUNT_ID
    (without them every lookup answers with fallback data)
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from janproxy.core.config import settings

# ✅ Routers
from janproxy.api.routes_meta import router as meta_router
from janproxy.api.routes_product import router as product_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="JAN Product Spec Proxy",
        version=settings.APP_VERSION,
        description="Proxies the bihinkanri spec-form API with normalized and fallback product data",
    )

    # ✅ CORS
    # Browser clients call this directly; preflight is answered by the middleware.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Account-ID"],
    )

    # ✅ Root (GET /)
    @app.get("/")
    def root():
        return {
            "name": "JAN Product Spec Proxy",
            "status": "ok",
            "docs": "/docs",
            "health": "/health",
            "version": "/version",
            "lookup": "/api/bihinkanri-proxy?jan_code=4901234567890",
        }

    # ✅ Mount routers
    app.include_router(meta_router)
    app.include_router(product_router)

    return app


app = create_app()
