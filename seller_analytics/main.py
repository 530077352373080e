import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from seller_analytics.config import settings
from seller_analytics.engine import analyze
from seller_analytics.exceptions import AnalysisError
from seller_analytics.models import SalesData
from seller_analytics.policies import DEFAULT_OPTIONS
from seller_analytics.store import store

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Auto-seed on startup so the service is immediately usable
    if settings.SEED_ON_STARTUP:
        from scripts.seed_data import seed
        store.clear()
        seed(store, settings.SEED)
        logger.info(
            "Seeded %d sellers, %d products, %d purchase records",
            len(store.sellers), len(store.products), len(store.purchase_records),
        )
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Seller revenue, profit and bonus reporting",
    lifespan=lifespan,
)


def _build_report(data: SalesData) -> dict:
    try:
        reports = analyze(data, DEFAULT_OPTIONS)
    except AnalysisError as exc:
        raise HTTPException(400, str(exc))
    return {"sellers": [r.model_dump() for r in reports]}


# ── Catalog ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


@app.get("/api/v1/products", summary="List the product catalog")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get(
    "/api/v1/reports/sellers",
    summary="Seller performance report over the stored data",
)
def get_seller_report():
    return _build_report(store.snapshot())


@app.post(
    "/api/v1/reports/sellers",
    summary="Seller performance report over the posted data",
)
def post_seller_report(data: SalesData):
    return _build_report(data)


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed test data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store, settings.SEED)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
