import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.routes.fixtures import router as fixtures_router
from app.routes.predict import router as predict_router
from config.settings import settings
from core.errors import InvalidInput
from data.providers.errors import ProviderError

# Logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("lp2m")

app = FastAPI(
    title="LP2M",
    description="Fixtures por liga y pronósticos Poisson",
    version="1.0.0",
)

app.include_router(fixtures_router, prefix="/api", tags=["fixtures"])
app.include_router(predict_router, prefix="/api", tags=["predict"])


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    logger.warning("Entrada inválida en %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError):
    logger.error("Error de proveedor en %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.get("/api/health")
def health():
    return {"ok": True}


def run() -> None:
    import uvicorn

    logger.info("LP2M backend live on %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
