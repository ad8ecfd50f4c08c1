"""Vital-signs sample database model."""

from sqlalchemy import BigInteger, Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from sleep_monitor_server.models.base import Base, TimestampMixin


class VitalReading(Base, TimestampMixin):
    """One reading from the pulse oximeter/thermometer stream."""

    __tablename__ = "vital_samples"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    heart_rate: Mapped[float] = mapped_column(Float, nullable=False, comment="Heart rate (BPM)")
    spo2: Mapped[float] = mapped_column(Float, nullable=False, comment="Blood oxygen (%)")
    temperature: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Body temperature (Celsius)"
    )
    timestamp: Mapped[int] = mapped_column(
        BigInteger, nullable=False, comment="Device clock, epoch milliseconds"
    )

    __table_args__ = ({"sqlite_autoincrement": True},)
