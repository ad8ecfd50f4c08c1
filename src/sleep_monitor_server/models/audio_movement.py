"""Audio/movement sample database model."""

from sqlalchemy import BigInteger, Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from sleep_monitor_server.models.base import Base, TimestampMixin


class AudioMovementReading(Base, TimestampMixin):
    """One reading from the microphone/piezo stream.

    The device computes the sleep state on board and sends it with
    every reading: 0 awake, 1 light sleep, 2 deep sleep, 3 REM.
    """

    __tablename__ = "audio_movement_samples"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    mic_rms: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Microphone RMS level"
    )
    piezo_peak: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Peak piezo (bed movement) amplitude"
    )
    state: Mapped[int] = mapped_column(
        Integer, nullable=False, comment="Device sleep state (0-3)"
    )
    timestamp: Mapped[int] = mapped_column(
        BigInteger, nullable=False, comment="Device clock, epoch milliseconds"
    )

    __table_args__ = ({"sqlite_autoincrement": True},)
