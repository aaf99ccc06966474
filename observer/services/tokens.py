import logging

from observer.config import settings
from observer.models.db_operation import (
    _add_record,
    _find_and_modify,
    _select_one_or_none,
)
from observer.models.schema.token import TokenEntry
from observer.schemas.tokens import TokenResponse, TokenUpdate
from observer.services.errors import (
    DuplicateRecord,
    InsertFailure,
    NotFound,
    ValidationFailure,
)
from observer.services.timestamps import as_utc, utcnow
from observer.services.token_generator import TokenGenerator

LOGGER = logging.getLogger(__name__)


class TokenStore:
    def __init__(self, max_attempts: int) -> None:
        self._max_attempts = max_attempts

    def exists(self, token: str) -> bool:
        return _select_one_or_none("token", token=token) is not None

    def find_by_token(self, token: str) -> TokenResponse:
        entry = _select_one_or_none("token", token=token)
        if entry is None:
            raise NotFound(f"Token {token} not found")
        return self._to_response(entry)

    def insert(self, token: str) -> TokenResponse:
        now = utcnow()
        entry = _add_record(
            "token",
            token=token,
            created=now,
            changed=now,
            expire=None,
            description=None,
        )
        if entry.id is None:
            raise InsertFailure("Unable to insert new token.")
        return self._to_response(entry)

    def issue(self, generator: TokenGenerator | None = None) -> TokenResponse:
        """Create a token record under a freshly generated, unused value."""
        if generator is None:
            generator = TokenGenerator(self.exists, self._max_attempts)
        for candidate in generator.candidates():
            try:
                record = self.insert(candidate)
            except DuplicateRecord:
                LOGGER.warning("Token %s was taken before insert, retrying", candidate)
                continue
            LOGGER.info("Issued token %s", record.token)
            return record

    def update(self, token: str | None, payload: TokenUpdate) -> TokenResponse:
        values = payload.changes()
        if not values:
            raise ValidationFailure("Either description or expire must be set")
        if not token:
            raise ValidationFailure("Token is required")

        values["changed"] = utcnow()
        entry = _find_and_modify("token", values=values, token=token)
        if entry is None:
            raise NotFound(f"Token {token} not found")
        LOGGER.info("Updated token %s fields=%s", token, sorted(values))
        return self._to_response(entry)

    def _to_response(self, entry: TokenEntry) -> TokenResponse:
        return TokenResponse(
            token=entry.token,
            created=as_utc(entry.created),
            changed=as_utc(entry.changed),
            expire=as_utc(entry.expire),
            description=entry.description,
        )


token_store = TokenStore(settings.token_max_attempts)
