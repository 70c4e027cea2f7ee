import json
import logging
import time
import uuid
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import get_settings
from core.errors import ContentValidationError, build_error
from routes import i18n, pages, posts, system

settings = get_settings()

# -----------------------------
# Logging (structured-ish)
# -----------------------------
logger = logging.getLogger("portfolio-api")
logger.setLevel(settings.log_level)
handler = logging.StreamHandler()
handler.setLevel(settings.log_level)


class JsonFormatter(logging.Formatter):
    EXTRA_KEYS = ("request_id", "path", "status", "latency_ms", "lang", "key", "count")

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "msg": record.getMessage(),
        }
        for k in self.EXTRA_KEYS:
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


handler.setFormatter(JsonFormatter())
logger.handlers = [handler]

# -----------------------------
# App
# -----------------------------
app = FastAPI(
    title="Portfolio Content API",
    description="Conteúdo bilíngue (inglês/português) do portfólio e do blog",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    err = build_error(status_code, message)
    payload = {"ok": False, "error": err.to_response()}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        payload["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=payload)


# -----------------------------
# Middleware: request_id + logging
# -----------------------------
@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
    start = time.time()
    request.state.request_id = request_id

    try:
        response = await call_next(request)
    except Exception:
        latency_ms = int((time.time() - start) * 1000)
        logger.error(
            "unhandled_exception",
            exc_info=True,
            extra={"request_id": request_id, "path": request.url.path, "status": 500, "latency_ms": latency_ms},
        )
        return _error_response(request, 500, "Erro interno no servidor.")

    latency_ms = int((time.time() - start) * 1000)
    logger.info(
        "request",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "status": response.status_code,
            "latency_ms": latency_ms,
        },
    )
    response.headers["X-Request-Id"] = request_id
    return response


# -----------------------------
# Exception handlers
# -----------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        "http_exception",
        extra={"request_id": getattr(request.state, "request_id", None), "path": request.url.path, "status": exc.status_code},
    )
    return _error_response(request, exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
    message = f"Parâmetros inválidos em {request.url.path}: {', '.join(fields)}"
    return _error_response(request, 422, message)


@app.exception_handler(ContentValidationError)
async def content_exception_handler(request: Request, exc: ContentValidationError):
    logger.error(
        "content_validation_error",
        extra={"request_id": getattr(request.state, "request_id", None), "path": request.url.path, "status": 500},
    )
    return _error_response(request, 500, str(exc))


app.include_router(system.router)
app.include_router(i18n.router)
app.include_router(pages.router)
app.include_router(posts.router)
