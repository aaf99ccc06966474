from sqlalchemy import Column, DateTime, Integer, String, Text

from observer.database import Base


class TokenEntry(Base):
    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True)
    token = Column(String(32), nullable=False, unique=True, index=True)
    created = Column(DateTime(timezone=True), nullable=False)
    changed = Column(DateTime(timezone=True), nullable=False)
    expire = Column(DateTime(timezone=True), nullable=True)
    description = Column(Text, nullable=True)
