"""SQLAlchemy ORM models for clients and registered users"""

from sqlalchemy import Column, String, Boolean, DateTime, Date, Integer, ForeignKey, Text
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class ClientRecord(Base):
    """Client that users register under"""

    __tablename__ = "client"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False)
    status = Column(String(16), nullable=False, default="none")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    users = relationship("UserRecord", back_populates="client", cascade="all, delete-orphan")


class UserRecord(Base):
    """Accepted applicant with resolved credit limit"""

    __tablename__ = "registered_user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("client.id", ondelete="CASCADE"), nullable=False, index=True)
    firstname = Column(Text, nullable=False)
    surname = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    has_credit_limit = Column(Boolean, nullable=False)
    credit_limit = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    client = relationship("ClientRecord", back_populates="users")
