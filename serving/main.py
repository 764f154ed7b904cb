import logging
import sys
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from pydantic import BaseModel, StrictInt

from resizer.pipeline import ResizePipeline
from resizer.resize_config import ServerConfig
from resizer.results import TransformError

logger = logging.getLogger(__name__)

# --- Prometheus Metrics ---
RESIZE_REQUESTS = Counter(
    "resize_requests_total", "Total resize requests by outcome", ["status"]
)
RESIZE_LATENCY = Histogram(
    "resize_latency_seconds", "Latency of the decode/resize/encode pipeline"
)


class ResizeRequest(BaseModel):
    input_jpeg: str
    # true and "10" are rejected, not coerced
    desired_width: StrictInt
    desired_height: StrictInt


_MESSAGE_PREFIX = {400: "Invalid input", 500: "Internal server error"}


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"code": status, "message": f"{_MESSAGE_PREFIX[status]}: {message}"},
    )


def _client_error(message: str) -> JSONResponse:
    return _error(400, message)


def _server_error(message: str) -> JSONResponse:
    return _error(500, message)


def error_response(error: TransformError) -> JSONResponse:
    return _error(error.kind.http_status, error.message)


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    config = config or ServerConfig.from_env()
    pipeline = ResizePipeline(config.resize)

    app = FastAPI(title="JPEG Resize Service")

    # CORS for frontend integration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        reason = errors[0].get("msg", "malformed request body") if errors else "malformed request body"
        RESIZE_REQUESTS.labels(status="bad_request").inc()
        logger.warning(f"Rejected {request.url.path} request: {reason}")
        return _client_error(reason)

    @app.post("/resize_image")
    def resize_image(request: ResizeRequest):
        """
        Resizes a base64 JPEG to exactly desired_width x desired_height.
        Runs in FastAPI's threadpool since the work is CPU-bound.
        """
        start_time = time.time()
        try:
            with RESIZE_LATENCY.time():
                result = pipeline.run(request.input_jpeg, request.desired_width, request.desired_height)
        except Exception as e:
            # cv2.error / MemoryError on very large targets
            RESIZE_REQUESTS.labels(status="error").inc()
            logger.exception("Resize raised unexpectedly")
            return _server_error(str(e) or type(e).__name__)
        latency = time.time() - start_time

        if not result.ok:
            RESIZE_REQUESTS.labels(status=result.error.kind.value).inc()
            level = logging.WARNING if result.error.kind.is_client_error else logging.ERROR
            logger.log(level, f"Resize failed ({result.error.kind.value}): {result.error.message}")
            return error_response(result.error)

        RESIZE_REQUESTS.labels(status="success").inc()
        logger.debug(
            f"Resized to {request.desired_width}x{request.desired_height} in {latency:.3f}s"
        )
        return {"code": "200", "message": "success", "output_jpeg": result.output_jpeg}

    @app.get("/metrics")
    async def metrics():
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/")
    async def root():
        return {"status": "JPEG Resize Service is running", "endpoints": ["/resize_image", "/metrics", "/health"]}

    return app


def main():
    try:
        config = ServerConfig.from_env()
        logging.basicConfig(
            level=getattr(logging, config.log_level, logging.INFO),
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        app = create_app(config)

        import uvicorn

        logger.info(f"Server started on http://{config.host}:{config.port}")
        logger.info("Endpoint: POST /resize_image")
        logger.debug(f"Configuration: {config.to_dict()}")
        uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    except Exception as e:
        logger.critical(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
