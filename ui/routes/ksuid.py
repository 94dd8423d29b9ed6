"""KSUID generation and parsing routes."""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from core.errors import KsuidParseError
from internal.logging import get_logger
from utils.ksuid import generate_ksuid, is_valid_ksuid, parse_ksuid
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1/ksuid", tags=["ksuid"])

# These will be set by app.py
_config = None
_logger = None


def init(generator_config):
    """Initialize with the generator config."""
    global _config, _logger
    _config = generator_config
    _logger = get_logger("ksuid")


@router.get("")
async def generate(count: int = Query(1, ge=1), timestamp: Optional[int] = Query(None, ge=0)):
    """Generate one or more KSUIDs, optionally at a fixed unix time."""
    if count > _config.max_batch:
        return JSONResponse(
            status_code=422,
            content={"error": {
                "code": "batch_too_large",
                "message": f"count must be at most {_config.max_batch}",
                "value": count,
            }},
        )

    ksuids = [generate_ksuid(timestamp) for _ in range(count)]
    _logger.debug("Generated KSUIDs", count=count, fixed_timestamp=timestamp is not None)
    return {"timestamp": format_timestamp(), "ksuids": ksuids}


@router.get("/{value}")
async def parse(value: str):
    """Parse a KSUID into its timestamp and random payload."""
    try:
        parsed = parse_ksuid(value)
    except KsuidParseError as exc:
        _logger.info("Rejected KSUID", error=exc, value=value)
        return JSONResponse(status_code=422, content={"error": exc.to_dict()})
    return parsed.to_dict()


@router.get("/{value}/valid")
async def valid(value: str):
    """Whether the value is a well-formed KSUID."""
    return {"ksuid": value, "valid": is_valid_ksuid(value)}
