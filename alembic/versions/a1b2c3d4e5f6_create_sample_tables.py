"""Create audio/movement and vital-signs sample tables.

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create both sample tables with a created_at index for newest-first reads."""
    op.create_table(
        "audio_movement_samples",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("mic_rms", sa.Float(), nullable=False, comment="Microphone RMS level"),
        sa.Column(
            "piezo_peak",
            sa.Float(),
            nullable=False,
            comment="Peak piezo (bed movement) amplitude",
        ),
        sa.Column("state", sa.Integer(), nullable=False, comment="Device sleep state (0-3)"),
        sa.Column(
            "timestamp",
            sa.BigInteger(),
            nullable=False,
            comment="Device clock, epoch milliseconds",
        ),
        *_timestamp_columns(),
    )
    op.create_index(
        "ix_audio_movement_samples_created_at", "audio_movement_samples", ["created_at"]
    )

    op.create_table(
        "vital_samples",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("heart_rate", sa.Float(), nullable=False, comment="Heart rate (BPM)"),
        sa.Column("spo2", sa.Float(), nullable=False, comment="Blood oxygen (%)"),
        sa.Column(
            "temperature", sa.Float(), nullable=False, comment="Body temperature (Celsius)"
        ),
        sa.Column(
            "timestamp",
            sa.BigInteger(),
            nullable=False,
            comment="Device clock, epoch milliseconds",
        ),
        *_timestamp_columns(),
    )
    op.create_index("ix_vital_samples_created_at", "vital_samples", ["created_at"])


def downgrade() -> None:
    """Drop both sample tables."""
    op.drop_index("ix_vital_samples_created_at", table_name="vital_samples")
    op.drop_table("vital_samples")
    op.drop_index("ix_audio_movement_samples_created_at", table_name="audio_movement_samples")
    op.drop_table("audio_movement_samples")
