"""
SQLAlchemy table mappings.

rooms         id, title, created_at
room_members  room_id, nickname, position   (member order is kept by position)
chats         id, room_id, sender_nickname, message, created_at

Timestamps are naive UTC.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class RoomMemberRecord(Base):
    __tablename__ = "room_members"

    room_id: Mapped[int] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"), primary_key=True
    )
    nickname: Mapped[str] = mapped_column(String(50), primary_key=True, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)


class ChatRecord(Base):
    __tablename__ = "chats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    room_id: Mapped[int] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"), index=True, nullable=False
    )
    sender_nickname: Mapped[str] = mapped_column(String(50), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, index=True, nullable=False)


class RoomRecord(Base):
    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    members: Mapped[list[RoomMemberRecord]] = relationship(
        order_by=RoomMemberRecord.position,
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    # Only loaded on demand (selectinload), never lazily
    chats: Mapped[list[ChatRecord]] = relationship(
        order_by=[ChatRecord.created_at, ChatRecord.id],
        cascade="all, delete-orphan",
        lazy="raise",
    )
