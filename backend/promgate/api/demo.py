"""Demo routes used to exercise the metrics middleware.

Each handler sleeps a random delay before answering so the duration
histogram has something to show.
"""

import asyncio
import random

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


async def _simulate_work(request: Request) -> None:
    max_delay = request.app.state.settings.DEMO_MAX_DELAY
    if max_delay > 0:
        await asyncio.sleep(random.uniform(0, max_delay))


@router.get("/")
async def home(request: Request) -> dict[str, str]:
    await _simulate_work(request)
    return {"message": "home"}


@router.get("/index")
async def index(request: Request) -> dict[str, str]:
    await _simulate_work(request)
    return {"message": "index"}


@router.get("/forbidden")
async def forbidden(request: Request) -> JSONResponse:
    await _simulate_work(request)
    return JSONResponse(status_code=403, content={"message": "forbidden"})


@router.get("/badreq")
async def badreq(request: Request) -> JSONResponse:
    await _simulate_work(request)
    return JSONResponse(status_code=400, content={"message": "badreq"})
