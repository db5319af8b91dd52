"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nutriscan.api.models import (
    BarcodeScanRequest,
    ClassificationResultModel,
    ClassifyRequest,
    IngredientScanRequest,
    NutritionFactsModel,
    ScanReportModel,
    ScoreResponse,
)
from nutriscan.api.profiles import router as profiles_router
from nutriscan.app_logging import configure_logging
from nutriscan.config import parse_match_mode
from nutriscan.containers import AppContainer
from nutriscan.services.classification import classify
from nutriscan.services.products import (
    EmptyIngredientsError,
    InvalidBarcodeError,
    ProductNotFoundError,
)
from nutriscan.services.scoring import nutrition_score


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    match_mode = parse_match_mode(container.settings.match_mode)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(profiles_router)

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found(
        request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        logger.info("Product not found: %s", exc)
        return JSONResponse(
            status_code=404,
            content={"detail": "No product data, please scan again."},
        )

    @app.exception_handler(InvalidBarcodeError)
    @app.exception_handler(EmptyIngredientsError)
    async def invalid_scan(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(httpx.HTTPError)
    async def upstream_failure(request: Request, exc: httpx.HTTPError) -> JSONResponse:
        logger.exception("Product database request failed")
        return JSONResponse(
            status_code=502,
            content={"detail": "Product database is unavailable."},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/scans/barcode",
        response_model=ScanReportModel,
        response_model_exclude_none=True,
    )
    async def scan_barcode(payload: BarcodeScanRequest, request: Request):
        """Look up a barcode and classify it for the profile."""
        state_container: AppContainer = request.app.state.container
        report = await state_container.scan_service.scan_barcode(
            payload.barcode, payload.profile_id
        )
        return ScanReportModel.from_domain(report)

    @app.post(
        "/scans/ingredients",
        response_model=ScanReportModel,
        response_model_exclude_none=True,
    )
    async def scan_ingredients(payload: IngredientScanRequest, request: Request):
        """Classify an ingredient-label capture for the profile."""
        state_container: AppContainer = request.app.state.container
        report = await state_container.scan_service.scan_ingredients(
            payload.ingredients, payload.profile_id
        )
        return ScanReportModel.from_domain(report)

    @app.post(
        "/classify",
        response_model=ClassificationResultModel,
        response_model_exclude_none=True,
    )
    async def classify_product(payload: ClassifyRequest):
        """Classify an explicit product against explicit profile facets."""
        result = classify(
            payload.product.to_domain(),
            payload.profile.allergens,
            payload.profile.dietary_restrictions,
            payload.profile.health_conditions,
            payload.profile.fitness_goals,
            match_mode=match_mode,
        )
        return ClassificationResultModel.from_domain(result)

    @app.post("/score", response_model=ScoreResponse)
    async def score(facts: NutritionFactsModel) -> ScoreResponse:
        """Return the display nutrition score for a set of facts."""
        return ScoreResponse(score=nutrition_score(facts.to_domain()))

    return app
