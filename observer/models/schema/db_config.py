from observer.models.schema.entry import LogEntry
from observer.models.schema.token import TokenEntry


class Databases:
    token = TokenEntry
    entry = LogEntry
