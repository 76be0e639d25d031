import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

# Load environment variables from .env file for local development
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings
from core.db import initialize_database
from core.errors import install_handlers
from core.log import configure_logging
from core.middleware import install_middleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- Database Initialization ----------------------------------------
        if settings.DB_INIT_SCHEMA:
            initialize_database(settings)
        logger.info(f"🚀 Inventory backend listening at http://{settings.HOST}:{settings.PORT}")
        yield

    app = FastAPI(
        title='Inventory API',
        version='1.0.0',
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.boot_t0 = time.time()

    # --- CORS ---------------------------------------------------------------
    allow_origins = settings.allowed_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_origins != ['*'],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Middleware & error handlers ----------------------------------------
    install_middleware(app)   # request logging
    install_handlers(app)     # AppError → JSON / plain text

    # --- Health -------------------------------------------------------------
    @app.get('/health')
    def health(request: Request):
        return {'status': 'ok', 'uptime': round(time.time() - request.app.state.boot_t0, 2)}

    # --- Router composition -------------------------------------------------
    from modules.inventory import router as inventory_router
    from modules.export import router as export_router

    app.include_router(inventory_router, prefix='/inventory', tags=['inventory'])
    app.include_router(export_router, prefix='/export', tags=['export'])

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
