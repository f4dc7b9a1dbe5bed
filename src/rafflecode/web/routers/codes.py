"""Code generation, listing and statistics endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from rafflecode.core.modules.code.models import (
    CodeList,
    CodeRecord,
    CodeStats,
    CodeType,
    GeneratedCode,
    MessageResponse,
)
from rafflecode.web.deps import AppDep
from rafflecode.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["codes"])


class GenerateCodeRequest(BaseModel):
    """Request to generate a new code."""

    type: CodeType = Field(..., description="'alphabetic' (A-Z) or 'alphanumeric' (A-Z, 0-9)")


@router.post(
    "/generate",
    summary="Generate code",
    description=(
        "Generate a new 7 character uppercase code of the requested type. "
        "Codes are only saved and checked for duplicates when persistence is enabled."
    ),
    operation_id="generateCode",
    responses={
        200: {"description": "Code generated"},
        400: {"model": ErrorResponse, "description": "Invalid or missing type"},
        409: {"model": ErrorResponse, "description": "No unique code found (persistence enabled)"},
        500: {"model": ErrorResponse, "description": "Code could not be saved (persistence enabled)"},
    },
)
async def generate_code(request: GenerateCodeRequest, app: AppDep) -> GeneratedCode:
    return await app.generate_code(request.type)


@router.get(
    "/codes",
    summary="List codes",
    description="Get all stored codes with their type.",
    operation_id="listCodes",
    responses={200: {"description": "All stored codes"}},
)
async def list_codes(app: AppDep) -> CodeList:
    return await app.get_codes()


@router.get(
    "/codes/details",
    summary="List code details",
    description="Get all stored codes including sequence id and generation time.",
    operation_id="listCodeDetails",
    responses={200: {"description": "All stored code records"}},
)
async def list_code_details(app: AppDep) -> list[CodeRecord]:
    return await app.get_code_details()


@router.get(
    "/stats",
    summary="Get code statistics",
    description="Get total and per-type counts, plus the generation time of the first and last stored code.",
    operation_id="getStats",
    responses={200: {"description": "Code statistics"}},
)
async def get_stats(app: AppDep) -> CodeStats:
    return await app.get_stats()


@router.post(
    "/reset",
    summary="Reset codes",
    description="Delete all stored codes.",
    operation_id="resetCodes",
    responses={
        200: {"description": "All codes cleared"},
        500: {"model": ErrorResponse, "description": "Codes file could not be deleted"},
    },
)
async def reset_codes(app: AppDep) -> MessageResponse:
    await app.reset_codes()
    return MessageResponse(message="All codes cleared.")
