"""Eisaku — Japanese-to-English composition practice backend."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from log import get_logger
from routes import router

logger = get_logger("eisaku.backend")

app = FastAPI(title="Eisaku", summary="News sentences and translation hints for English composition practice")
app.include_router(router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request body", extra={"component": "api", "endpoint": request.url.path, "detail": str(exc.errors())})
    return JSONResponse({"error": "Invalid request"}, status_code=400)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
