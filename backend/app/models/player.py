# backend/app/models/player.py
from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import Boolean, DateTime, Integer, String, false, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from ..db.base_class import Base

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30
# Ids are signed 64-bit integers.
MAX_ID = 2**63 - 1


class Race(str, PyEnum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, PyEnum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    race: Mapped[Race] = mapped_column(SQLEnum(Race, name="race"), nullable=False, index=True)
    profession: Mapped[Profession] = mapped_column(SQLEnum(Profession, name="profession"), nullable=False, index=True)

    # Stored as naive UTC; the API exchanges epoch milliseconds.
    birthday: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    banned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, server_default=false())

    # --- Progression ---
    experience: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    level: Mapped[int] = mapped_column(Integer, default=0, nullable=False, comment="Derived from experience")
    until_next_level: Mapped[int] = mapped_column(Integer, default=0, nullable=False, comment="Derived from experience and level")

    def __repr__(self) -> str:
        return f"<Player(id={self.id}, name='{self.name}', level={self.level}, banned={self.banned})>"
