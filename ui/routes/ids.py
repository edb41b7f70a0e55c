"""Token and unique id issuing routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.errors import EntropySourceError, PreconditionError
from internal.logging import get_logger
from rnd import PREFIX_NONE, generate_token, generate_uid
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1/rnd", tags=["rnd"])

# These will be set by app.py
_api_config = None
_file_logger = None


def init(api_config, file_logger):
    """Initialize with api config and audit logger references."""
    global _api_config, _file_logger
    _api_config = api_config
    _file_logger = file_logger


def _issue(kind, fn, *args):
    try:
        return fn(*args)
    except PreconditionError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except EntropySourceError as exc:
        get_logger().error(f"{kind}: entropy source failed", error=exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="entropy source unavailable") from exc


@router.get("/token")
async def token(size: int = Query(None), username=Depends(verify_basic_auth)):
    """Issue a random token (requires basic auth)."""
    size = _api_config.token_size if size is None else size
    value = _issue("token", generate_token, size)
    _file_logger.try_log("token", {"size": size, "user": username})
    return {"token": value, "size": size}


@router.get("/uid")
async def uid(prefix: str = Query(None), count: int = Query(1), username=Depends(verify_basic_auth)):
    """Issue one or more unique ids (requires basic auth)."""
    if count < 1 or count > _api_config.max_batch:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"count must be between 1 and {_api_config.max_batch}",
        )

    prefix = PREFIX_NONE if prefix is None else prefix
    uids = [_issue("uid", generate_uid, prefix) for _ in range(count)]
    _file_logger.try_log("uid", {"uids": uids, "user": username})
    return {"uids": uids}
