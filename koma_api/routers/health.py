from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from koma_api.core.errors import StoreUnavailableError

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request):
    state = getattr(request.app, "state", None)
    if not getattr(state, "ready", False):
        return JSONResponse({"status": "starting", "database": "not initialized"}, status_code=503)
    try:
        state.repository.ping()
    except StoreUnavailableError as exc:
        return JSONResponse({"status": "degraded", "database": exc.message}, status_code=503)
    return {"status": "ok", "database": "connected"}
