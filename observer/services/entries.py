import logging

from observer.models.db_operation import _add_record, _select_records
from observer.models.schema.entry import LogEntry
from observer.schemas.entries import EntryCreate, EntryResponse
from observer.services.errors import InsertFailure, ValidationFailure
from observer.services.timestamps import as_utc, utcnow

LOGGER = logging.getLogger(__name__)


def _is_missing(value) -> bool:
    return value is None or value == ""


class EntryStore:
    def insert(self, payload: EntryCreate) -> EntryResponse:
        if _is_missing(payload.token) or _is_missing(payload.payload):
            raise ValidationFailure("Both token and payload are required")

        entry = _add_record(
            "entry",
            token=payload.token,
            created=utcnow(),
            data=payload.payload,
            type=payload.type,
            length=payload.length,
            logged=payload.logged,
            message=payload.message,
        )
        if entry.id is None:
            raise InsertFailure("Unable to insert new entry.")
        LOGGER.debug("Accepted entry id=%s token=%s", entry.id, entry.token)
        return self._to_response(entry)

    def find_all_by_token(self, token: str) -> list[EntryResponse]:
        entries = _select_records("entry", order_by="id", token=token)
        return [self._to_response(entry) for entry in entries]

    def _to_response(self, entry: LogEntry) -> EntryResponse:
        return EntryResponse(
            token=entry.token,
            created=as_utc(entry.created),
            data=entry.data,
            type=entry.type,
            length=entry.length,
            logged=entry.logged,
            message=entry.message,
        )


entry_store = EntryStore()
