import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from config import settings
from routers import countries, health
from services.browser_service import CatalogStore, WeatherLoader
from services.country_service import fetch_countries
from services.weather_service import get_current_weather
from utils.http_client import close_client

logger = logging.getLogger(__name__)


def create_app(country_loader=None, weather_loader: WeatherLoader | None = None) -> FastAPI:
    limiter = Limiter(key_func=get_remote_address)

    app = FastAPI(title="CountryDeck", version="0.1.0")

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.state.catalog_store = CatalogStore()
    app.state.country_loader = country_loader or fetch_countries
    app.state.weather_loader = weather_loader or get_current_weather

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(countries.router)

    @app.get("/")
    async def root():
        return {
            "name": "CountryDeck API",
            "version": "0.1.0",
            "endpoints": ["/health", "/countries", "/countries/{country_id}"],
        }

    @app.on_event("startup")
    async def startup():
        await app.state.catalog_store.load(app.state.country_loader)
        logger.info("CountryDeck API is running (catalog %s)", app.state.catalog_store.status)

    @app.on_event("shutdown")
    async def shutdown():
        await close_client()

    return app


app = create_app()
