from fastapi import APIRouter

from ..models.v1.health_models import PingResponse

router = APIRouter(tags=["health"])

@router.get("/ping", response_model=PingResponse)
def ping():
    return PingResponse()
