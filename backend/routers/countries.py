import logging

from fastapi import APIRouter, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.page import CountryDetail, PageView
from services.browser_service import CatalogStore, build_detail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["countries"])

limiter = Limiter(key_func=get_remote_address)


def _loaded_store(request: Request) -> CatalogStore:
    store: CatalogStore = request.app.state.catalog_store
    if store.status == CatalogStore.ERROR:
        raise HTTPException(status_code=503, detail=store.error)
    if store.status != CatalogStore.LOADED:
        raise HTTPException(status_code=503, detail="Loading countries...")
    return store


@router.get("", response_model=PageView)
async def list_countries(
    request: Request,
    search: str = "",
    page: int = Query(1),
):
    store = _loaded_store(request)
    session = store.session(settings.page_size)
    session.search(search)
    if page != 1:
        session.go_to(page)
    return session.view()


@router.get("/{country_id}", response_model=CountryDetail)
@limiter.limit(settings.detail_rate_limit)
async def get_country(request: Request, country_id: str):
    store = _loaded_store(request)
    record = store.catalog.get(country_id)
    if not record:
        raise HTTPException(status_code=404, detail="Country not found")
    try:
        return await build_detail(record, request.app.state.weather_loader)
    except Exception as e:
        logger.exception("Country detail failed")
        raise HTTPException(status_code=500, detail=str(e))
