from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from database import Managers, build_managers, get_settings
from api import bets, tables

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(managers: Managers = None) -> FastAPI:
    """
    建立 FastAPI app

    參數：
        managers: 預先建立好的 Managers（測試用），預設在啟動時建立全新的 store
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: 建立 in-memory store（process 結束即消失）
        app.state.managers = managers or build_managers()
        logger.info("Roulette API started")
        yield
        # Shutdown: 沒有需要釋放的資源

    app = FastAPI(
        title="Roulette API",
        description="Backend API for roulette tables: place bets, spin and settle",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(tables.router)
    app.include_router(bets.router)

    @app.get("/")
    def root():
        return {"message": "Roulette API", "status": "ok"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
