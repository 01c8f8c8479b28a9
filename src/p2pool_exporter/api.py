"""HTTP surface of the exporter.

Routes:
  - GET /metrics          Prometheus text exposition of the P2Pool state
  - GET /metrics/json     the same metric list as JSON
  - GET /table            HTML dashboard
  - GET /health           liveness plus presence of the state files
  - GET /exporter/metrics the exporter's own request metrics
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from loguru import logger
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from p2pool_exporter import __version__, settings
from p2pool_exporter.dashboard.table import render_stratum_table
from p2pool_exporter.telemetry.metric_registry import (
    EXPORTER_REGISTRY,
    RENDER_DURATION_SECONDS,
    REQUESTS_TOTAL,
    SOURCE_ERRORS_TOTAL,
)
from p2pool_exporter.telemetry.renderer import render
from p2pool_exporter.telemetry.state_reader import collect_metrics, read_network_state, read_stratum_state
from p2pool_exporter.utils.exceptions import StateDecodeError, StateReadError

PROMETHEUS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def _data_dir(request: Request) -> Path:
    return request.app.state.data_dir


def _source_error_response(request: Request, exc: Exception, *, status_code: int, reason: str) -> JSONResponse:
    logger.warning(f"{request.url.path} failed ({reason}): {exc}")
    SOURCE_ERRORS_TOTAL.labels(reason=reason).inc()
    REQUESTS_TOTAL.labels(route=request.url.path, status=str(status_code)).inc()
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(data_dir: Path | str = settings.DATA_DIR) -> FastAPI:
    app = FastAPI(title="P2Pool exporter", version=__version__)
    app.state.data_dir = Path(data_dir)

    @app.exception_handler(StateReadError)
    async def handle_read_error(request: Request, exc: StateReadError) -> JSONResponse:
        return _source_error_response(request, exc, status_code=503, reason="read")

    @app.exception_handler(StateDecodeError)
    async def handle_decode_error(request: Request, exc: StateDecodeError) -> JSONResponse:
        return _source_error_response(request, exc, status_code=502, reason="decode")

    @app.get("/metrics")
    async def prometheus_metrics(request: Request) -> Response:
        with RENDER_DURATION_SECONDS.labels(route="/metrics").time():
            body = render(await collect_metrics(_data_dir(request)))
        REQUESTS_TOTAL.labels(route="/metrics", status="200").inc()
        return Response(content=body, media_type=PROMETHEUS_CONTENT_TYPE)

    @app.get("/metrics/json")
    async def json_metrics(request: Request) -> list[Dict[str, Any]]:
        with RENDER_DURATION_SECONDS.labels(route="/metrics/json").time():
            metrics = await collect_metrics(_data_dir(request))
        REQUESTS_TOTAL.labels(route="/metrics/json", status="200").inc()
        return [metric.model_dump(mode="json", by_alias=True) for metric in metrics]

    @app.get("/table", response_class=HTMLResponse)
    async def stratum_table(request: Request) -> HTMLResponse:
        data_dir = _data_dir(request)
        with RENDER_DURATION_SECONDS.labels(route="/table").time():
            stratum = await read_stratum_state(data_dir)
            network = await read_network_state(data_dir)
            page = render_stratum_table(stratum, network)
        REQUESTS_TOTAL.labels(route="/table", status="200").inc()
        return HTMLResponse(content=page)

    @app.get("/health")
    async def health(request: Request) -> Dict[str, Any]:
        data_dir = _data_dir(request)
        return {
            "ok": True,
            "data_dir": str(data_dir),
            "sources": {
                "stratum": (data_dir / settings.STRATUM_FILE).is_file(),
                "network": (data_dir / settings.NETWORK_STATS_FILE).is_file(),
            },
        }

    @app.get("/exporter/metrics", include_in_schema=False)
    async def exporter_metrics() -> Response:
        return Response(content=generate_latest(EXPORTER_REGISTRY), media_type=CONTENT_TYPE_LATEST)

    return app


def start_server(
    data_dir: Path | str = settings.DATA_DIR,
    host: str = settings.EXPORTER_HOST,
    port: int | None = None,
    log_level: str = "warning",
) -> None:
    """Blocking runner; ``port`` defaults to EXPORTER_PORT."""
    import uvicorn

    if port is None:
        port = settings.parse_port(settings.EXPORTER_PORT)

    logger.info(f"Serving P2Pool state from {data_dir} on http://{host}:{port}")
    uvicorn.run(create_app(data_dir), host=host, port=port, log_level=log_level)
