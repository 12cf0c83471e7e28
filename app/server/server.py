from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger

logger = get_module_logger()

handler = FastAPI(title="Translation catalogs")

allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

handler.include_router(api_router)
logger.info("server_initialized", routes=len(handler.routes))
