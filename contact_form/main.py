import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from contact_form.api.routes_contacts import router as contacts_router
from contact_form.core.access_log import AccessLog, access_log_middleware
from contact_form.core.config import Settings
from contact_form.core.errors import global_exception_handler
from contact_form.db.session import Database


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.database.create_tables()
    print("rodando...", flush=True)
    yield
    await app.state.access_log.drain()
    app.state.database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="Contact Form", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = Database(settings.database_url)
    app.state.access_log = AccessLog(settings.access_log_path)

    app.middleware("http")(access_log_middleware)
    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(contacts_router)
    return app


def run() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )
    uvicorn.run("contact_form.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
