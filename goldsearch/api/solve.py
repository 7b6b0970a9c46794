"""Search endpoints: health, function list, solve."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from goldsearch import __version__
from goldsearch.cli import list_functions_fn, solve_fn
from goldsearch.core.errors import SearchError
from goldsearch.core.problem import DEFAULT_LEFT, DEFAULT_PRECISION, DEFAULT_RIGHT

logger = logging.getLogger(__name__)

router = APIRouter()


class SolveRequest(BaseModel):
    function: int = 0
    left: float = DEFAULT_LEFT
    right: float = DEFAULT_RIGHT
    precision: int = DEFAULT_PRECISION


@router.get("/api/health")
async def health():
    return {"ok": True, "version": __version__}


@router.get("/api/functions")
async def list_functions(request: Request):
    return {"functions": list_functions_fn(request.app.state.registry)}


@router.post("/api/solve")
async def solve(body: SolveRequest, request: Request):
    try:
        return solve_fn(
            body.function,
            body.left,
            body.right,
            body.precision,
            registry=request.app.state.registry,
        )
    except SearchError as e:
        logger.info("Solve request rejected: %s", e)
        raise HTTPException(400, detail={"kind": e.kind, "message": str(e)})
