from fastapi import APIRouter

router = APIRouter(tags=["System"])


@router.get("/health")
def get_health():
    """Healthcheck endpoint."""
    return {"status": "ok"}
