import time
from contextlib import asynccontextmanager
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .cache import get_cache, key_for
from .config import Settings, get_settings
from .exceptions import ArgumentLimitError, SvcSameException
from .functions import BUILTIN_FUNCTIONS, get_function
from .graph_utils import normalize_elements
from .log import configure_logging, get_logger
from .predicate import evaluate
from .types import (
    BatchSameRequest,
    BatchSameResponse,
    FunctionCallRequest,
    FunctionCallResponse,
    SameRequest,
    SameResponse,
)
from .utils import compute_etag, make_cache_headers

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)
    cache = get_cache(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await cache.start()
        logger.info("Service started", env=settings.app_env, cache=cache.backend)
        try:
            yield
        finally:
            await cache.close()

    app = FastAPI(
        title="svc-same",
        description="SAME predicate for graph pattern queries",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.cache = cache

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=round(time.time() - start_time, 4),
        )
        return response

    @app.exception_handler(SvcSameException)
    async def svc_same_exception_handler(request: Request, exc: SvcSameException):
        logger.warning(
            "Request rejected",
            error=exc.message,
            error_type=exc.error_type,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "type": exc.error_type},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.error(
            "HTTP exception occurred",
            error=str(exc.detail),
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unexpected exception occurred",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    def decode_arguments(raw: List[Any]) -> List[Any]:
        if len(raw) > settings.max_arguments:
            raise ArgumentLimitError(len(raw), settings.max_arguments)
        return normalize_elements(raw)

    def evaluate_request(raw: List[Any]) -> SameResponse:
        verdict = evaluate(decode_arguments(raw))
        logger.debug(
            "SAME evaluated",
            arity=len(raw),
            outcome=verdict.outcome.value,
            reason=verdict.reason.value,
        )
        return SameResponse(
            result=verdict.outcome.to_nullable(),
            outcome=verdict.outcome,
            reason=verdict.reason,
        )

    @app.get("/health", tags=["ops"])
    async def health():
        return {"status": "ok", "env": settings.app_env, "cache": cache.backend}

    @app.post("/v1/same", response_model=SameResponse, tags=["same"])
    async def same_endpoint(payload: SameRequest):
        return evaluate_request(payload.elements)

    @app.post("/v1/same/batch", response_model=BatchSameResponse, tags=["same"])
    async def same_batch(
        payload: BatchSameRequest,
        response: Response,
        use_cache: bool = Query(default=True, alias="cache"),
    ):
        key = key_for("same_batch", payload.model_dump(mode="json"))
        data = await cache.get(key) if use_cache else None
        if data is None:
            results = [evaluate_request(item.elements) for item in payload.evaluations]
            data = BatchSameResponse(results=results).model_dump(mode="json")
            if use_cache:
                await cache.set(key, data, ttl=settings.cache_api_ttl)
        else:
            logger.debug("Cache hit", key=key)

        max_age = settings.cache_api_ttl if use_cache else 0
        etag = compute_etag(data)
        response.headers.update(make_cache_headers(max_age, etag))
        return data

    @app.get("/v1/functions", tags=["functions"])
    async def list_functions():
        return {"functions": sorted(BUILTIN_FUNCTIONS)}

    @app.post("/v1/functions/{name}", response_model=FunctionCallResponse, tags=["functions"])
    async def call_builtin(name: str, payload: FunctionCallRequest):
        function = get_function(name)
        result = function(*decode_arguments(payload.arguments))
        logger.debug("Builtin called", function=name.lower(), arity=len(payload.arguments), result=result)
        return FunctionCallResponse(function=name.lower(), result=result)

    return app


app = create_app()
