import time
from fastapi import APIRouter, Request

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(request: Request):
    store = request.app.state.catalog_store
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "catalog": store.status,
        "countries": len(store.catalog),
    }
