from typing import Optional
from datetime import datetime
from sqlalchemy.orm import Mapped, declarative_base, mapped_column
from sqlalchemy.sql import func
from sqlalchemy import BigInteger, Boolean, DateTime, Integer, String, Text

# Base is the declarative base for SQLAlchemy models
BaseApp = declarative_base()
BaseSde = declarative_base()


# --------------------------
# App
# --------------------------
class CharacterModel(BaseApp):
    __tablename__ = "character"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    corporation_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

# Undirected: either side may be the queried character
class AltCharacterModel(BaseApp):
    __tablename__ = "alt_character"

    account_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    alt_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)

class AdminModel(BaseApp):
    __tablename__ = "admin"

    character_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    role: Mapped[str] = mapped_column(String, nullable=False)
    granted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, server_default=func.now())
    granted_by_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

class BadgeModel(BaseApp):
    __tablename__ = "badge"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, unique=True, nullable=False)

class BadgeAssignmentModel(BaseApp):
    __tablename__ = "badge_assignment"

    CharacterId: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    BadgeId: Mapped[int] = mapped_column(Integer, primary_key=True)
    GrantedById: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    GrantedAt: Mapped[Optional[datetime]] = mapped_column(DateTime, server_default=func.now())

class FleetActivityModel(BaseApp):
    __tablename__ = "fleet_activity"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    character_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    fleet_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    hull: Mapped[int] = mapped_column(Integer, nullable=False)
    first_seen: Mapped[int] = mapped_column(BigInteger, nullable=False)  # unix seconds
    last_seen: Mapped[int] = mapped_column(BigInteger, nullable=False)  # unix seconds
    is_boss: Mapped[bool] = mapped_column(Boolean, default=False)


# --------------------------
# SDE
# --------------------------
class Types(BaseSde):
    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    groupID: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    name: Mapped[str] = mapped_column(Text)  # JSON string of localized names
    published: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
