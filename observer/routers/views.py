from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse

from observer.pages import render_front_page, render_token_page
from observer.services.entries import entry_store
from observer.services.errors import NotFound, StoreFailure
from observer.services.tokens import token_store

router = APIRouter(tags=["views"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def front_page() -> HTMLResponse:
    return HTMLResponse(render_front_page())


@router.get("/view/{token}", response_class=HTMLResponse)
def view_token(token: str) -> HTMLResponse:
    try:
        record = token_store.find_by_token(token)
        # Entries are only looked up once the token is known to exist.
        entries = entry_store.find_all_by_token(record.token)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except StoreFailure as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return HTMLResponse(render_token_page(record, entries))


@router.get("/view/{token}/{entry_id}")
def view_entry(token: str, entry_id: str) -> dict:
    return {}
