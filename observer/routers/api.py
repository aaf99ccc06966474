from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel, ValidationError

from observer.schemas.entries import EntryCreate
from observer.schemas.tokens import TokenResponse, TokenUpdate
from observer.services.entries import entry_store
from observer.services.errors import NotFound, StoreFailure, ValidationFailure
from observer.services.tokens import token_store

router = APIRouter(prefix="/api", tags=["api"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_body(request: Request) -> dict:
    """Request body as a flat dict, from either a JSON object or form fields."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    if not (await request.body()).strip():
        return {}
    try:
        body = await request.json()
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Malformed JSON body: {exc}",
        ) from exc
    if not isinstance(body, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be an object",
        )
    return body


def _parse(model: type[ModelT], body: dict) -> ModelT:
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc


@router.get("/token")
def list_token_entries() -> dict:
    return {}


@router.post("/token", response_model=TokenResponse)
def create_token() -> TokenResponse:
    try:
        return token_store.issue()
    except StoreFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc


@router.put("/token", response_model=TokenResponse)
def update_token(body: dict = Depends(read_body)) -> TokenResponse:
    payload = _parse(TokenUpdate, body)
    try:
        return token_store.update(payload.token, payload)
    except ValidationFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except StoreFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc


@router.delete("/token")
def delete_token() -> dict:
    return {}


@router.post("/entry", status_code=status.HTTP_202_ACCEPTED)
def create_entry(body: dict = Depends(read_body)) -> Response:
    payload = _parse(EntryCreate, body)
    try:
        entry_store.insert(payload)
    except ValidationFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except StoreFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return Response(status_code=status.HTTP_202_ACCEPTED)


@router.delete("/entry")
def delete_entry() -> dict:
    return {}
