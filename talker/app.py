# talker/app.py
import logging
import threading

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.deps import set_emitter, set_shared
from .api.routes import router
from .core import SharedState
from . import config as C

_log = logging.getLogger(__name__)


def create_app(shared: SharedState, emitter=None) -> FastAPI:
    """App bound to the same SharedState the emit loop reads."""
    set_shared(shared)
    set_emitter(emitter)

    app = FastAPI(title="Talker")
    # CORS for HTTP (allow all origins; credentials False to keep wildcard)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


def start_api_in_thread(app: FastAPI, host: str = C.API_HOST, port: int = C.API_PORT) -> threading.Thread:
    """Serve `app` with uvicorn on a daemon thread; dies with the process."""
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level="warning"))

    def serve():
        try:
            server.run()
        except SystemExit:
            # uvicorn exits on bind failure; chatter keeps going without HTTP
            _log.error(f"[api] could not serve on {host}:{port}")

    th = threading.Thread(target=serve, daemon=True)
    th.start()
    _log.info(f"[api] starting on http://{host}:{port}/api/v1")
    return th
