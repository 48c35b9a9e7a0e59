import logging
from typing import Optional

import pydantic
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from folio import dependencies as deps
from folio.errors import UpstreamError, ValidationError
from folio.schemas.subscribe import SubscribeRequest, SubscribeResponse
from folio.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again later."


@router.post("/api/subscribe", status_code=201, response_model=SubscribeResponse)
async def subscribe(
    request: Request,
    service: SubscriptionService = Depends(deps.get_subscription_service),
):
    """
    Add an email address to the newsletter.
    Always answers with a single `error` field; empty on success.
    """
    email = await _read_email(request)
    try:
        await run_in_threadpool(service.subscribe, email)
    except ValidationError as e:
        return _error(400, str(e))
    except UpstreamError as e:
        return _error(502, str(e))
    except Exception as e:
        logger.error(f"Subscription failed: {e}", exc_info=True)
        return _error(500, GENERIC_ERROR_MESSAGE)
    return SubscribeResponse(error="")


async def _read_email(request: Request) -> Optional[str]:
    # Missing, non-JSON or mistyped bodies all count as "no email"
    try:
        payload = SubscribeRequest.model_validate(await request.json())
    except (ValueError, pydantic.ValidationError) as e:
        logger.debug(f"Unreadable subscription body: {e}")
        return None
    return payload.email


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=SubscribeResponse(error=message).model_dump()
    )
