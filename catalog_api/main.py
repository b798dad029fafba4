import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from catalog_api.api.router import api_router
from catalog_api.errors import CatalogError, MissingCredentials, UpstreamUnavailable
from catalog_api.services.catalog_service import InvalidSupplier

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Apparel Catalog Middleware (S&S + SanMar)")

app.include_router(api_router)


def error_status(exc: CatalogError) -> int:
    if isinstance(exc, InvalidSupplier):
        return 400
    if isinstance(exc, MissingCredentials):
        return 500
    if isinstance(exc, UpstreamUnavailable) and exc.timed_out:
        return 504
    return 502


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    status = error_status(exc)
    logger.error(f"{request.method} {request.url.path} failed ({type(exc).__name__}): {exc}")
    return JSONResponse({"error": str(exc), "detail": exc.payload}, status_code=status)


@app.get("/")
def root():
    return {"status": "running", "message": "Apparel Catalog Middleware"}
