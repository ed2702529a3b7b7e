from __future__ import annotations

from fastapi import APIRouter, HTTPException

from .. import __version__
from ..errors import HTTP_STATUS, Result
from ..logs import LogContext

APP_NAME = "resume-api"

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/version")
def version():
    return {"app": APP_NAME, "version": __version__}


def unwrap(res: Result, log: LogContext, write_ok: bool = True):
    """Return the result value, or write the log and raise the matching HTTP error."""
    if not res.ok:
        log.write("ERROR", res.error.message)
        raise HTTPException(status_code=HTTP_STATUS[res.error.code], detail=res.error.to_dict())
    if write_ok:
        log.write("OK")
    return res.value
