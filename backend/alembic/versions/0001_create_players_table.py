"""create players table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

RACES = ("HUMAN", "DWARF", "ELF", "GIANT", "ORC", "TROLL", "HOBBIT")
PROFESSIONS = ("WARRIOR", "ROGUE", "SORCERER", "CLERIC", "PALADIN", "NAZGUL", "WARLOCK", "DRUID")


def upgrade() -> None:
    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=12), nullable=False),
        sa.Column("title", sa.String(length=30), nullable=False),
        sa.Column("race", sa.Enum(*RACES, name="race"), nullable=False),
        sa.Column("profession", sa.Enum(*PROFESSIONS, name="profession"), nullable=False),
        sa.Column("birthday", sa.DateTime(), nullable=False),
        sa.Column("banned", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("experience", sa.Integer(), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False, comment="Derived from experience"),
        sa.Column("until_next_level", sa.Integer(), nullable=False, comment="Derived from experience and level"),
    )
    op.create_index(op.f("ix_players_name"), "players", ["name"], unique=False)
    op.create_index(op.f("ix_players_race"), "players", ["race"], unique=False)
    op.create_index(op.f("ix_players_profession"), "players", ["profession"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_players_profession"), table_name="players")
    op.drop_index(op.f("ix_players_race"), table_name="players")
    op.drop_index(op.f("ix_players_name"), table_name="players")
    op.drop_table("players")
    sa.Enum(name="profession").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="race").drop(op.get_bind(), checkfirst=True)
