"""create booking schema

Creates users, parking_spots and bookings together with the role enum, the
email domain, the ordering check, the future-start insert trigger, the
bookings_overlap exclusion constraint and the updated_at trigger.

Revision ID: 0001_create_booking_schema
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op

from parking_api.core.schema import DOWNGRADE_STATEMENTS, UPGRADE_STATEMENTS


# revision identifiers, used by Alembic.
revision: str = '0001_create_booking_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    for statement in UPGRADE_STATEMENTS:
        op.execute(statement)


def downgrade() -> None:
    for statement in DOWNGRADE_STATEMENTS:
        op.execute(statement)
