import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .routes.receipts import router as receipts_router
from .utils.logging import logger

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

app.include_router(receipts_router)

@app.exception_handler(RequestValidationError)
async def decode_error_handler(request: Request, exc: RequestValidationError):
    # malformed payloads are reported apart from receipts that fail the rules
    logger.info("Undecodable payload on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={
            "detail": "The receipt payload could not be decoded.",
            "errors": jsonable_encoder(exc.errors()),
        },
    )

@app.get("/health")
def health():
    return {"ok": True}

def run():
    logger.info("Starting %s (%s) on %s:%s", settings.APP_NAME, settings.ENV, settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
