from sqlalchemy import JSON, Column, DateTime, Integer, String

from observer.database import Base


class LogEntry(Base):
    __tablename__ = "entries"

    id = Column(Integer, primary_key=True)
    # Matched against tokens.token at query time, no foreign key.
    token = Column(String(255), nullable=False, index=True)
    created = Column(DateTime(timezone=True), nullable=False)
    data = Column(JSON, nullable=True)
    type = Column(String(255), nullable=True)
    length = Column(JSON, nullable=True)
    logged = Column(JSON, nullable=True)
    message = Column(JSON, nullable=True)
