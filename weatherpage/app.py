"""Region weather page: FastAPI app serving the server-rendered view."""

import logging
from collections.abc import Callable
from datetime import datetime
from functools import partial

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from weatherpage.config.schema import PageConfig
from weatherpage.ingest.cwa_client import CwaClient
from weatherpage.ingest.forecast_fetcher import ForecastFetcher
from weatherpage.ingest.response_cache import ResponseCache
from weatherpage.models.common import local_now
from weatherpage.view.page import render_page, resolve_region
from weatherpage.view.selector import selected_region

logger = logging.getLogger(__name__)


def build_fetcher(config: PageConfig) -> ForecastFetcher:
    """Wire the CWA client and freshness cache from config."""
    client = CwaClient(
        base_url=config.api.base_url,
        dataset_id=config.api.dataset_id,
        api_key_env=config.api.api_key_env,
        user_agent=config.api.user_agent,
        timeout=config.api.timeout_seconds,
    )
    cache = None
    if config.cache.enabled and config.cache.ttl_seconds > 0:
        cache = ResponseCache(
            ttl_seconds=config.cache.ttl_seconds,
            max_entries=config.cache.max_entries,
        )
    return ForecastFetcher(client, cache)


def create_app(
    config: PageConfig | None = None,
    fetcher: ForecastFetcher | None = None,
    now: Callable[[], datetime] | None = None,
) -> FastAPI:
    config = config or PageConfig()
    fetcher = fetcher or build_fetcher(config)
    now = now or partial(local_now, config.display.timezone)
    default_region = config.display.default_region

    app = FastAPI(
        title="Region Weather",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/", response_class=HTMLResponse)
    def weather_page(request: Request, city: str | None = None):
        region = resolve_region(city, default_region)
        result = fetcher.fetch(region)
        logger.info("Rendered %s (%s)", region, type(result).__name__)
        return render_page(
            region,
            result,
            selected=selected_region(request.query_params, default_region),
            now=now(),
        )

    return app
