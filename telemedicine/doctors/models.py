from datetime import date

from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from telemedicine.common.base_models import IntIdBase, TimestampMixin


class Doctor(IntIdBase, TimestampMixin):
    __tablename__ = "doctors"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    practising_certificate: Mapped[str] = mapped_column(String(255), nullable=False)
    certificate_code: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    place_of_certificate: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_certificate: Mapped[date] = mapped_column(Date, nullable=False)
    scope_of_practice: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    number_of_consultants: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    is_verify: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    hospital_doctors = relationship(
        "HospitalDoctor", back_populates="doctor", lazy="selectin", cascade="all, delete-orphan"
    )
    major_doctors = relationship("MajorDoctor", back_populates="doctor", lazy="selectin", cascade="all, delete-orphan")
    certification_doctors = relationship(
        "CertificationDoctor", back_populates="doctor", lazy="selectin", cascade="all, delete-orphan"
    )


class HospitalDoctor(IntIdBase):
    __tablename__ = "hospital_doctors"

    doctor_id: Mapped[int] = mapped_column(ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True)
    hospital_id: Mapped[int] = mapped_column(ForeignKey("hospitals.id"), nullable=False, index=True)
    is_working: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    doctor = relationship("Doctor", back_populates="hospital_doctors")


class MajorDoctor(IntIdBase):
    __tablename__ = "major_doctors"

    doctor_id: Mapped[int] = mapped_column(ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True)
    major_id: Mapped[int] = mapped_column(ForeignKey("majors.id"), nullable=False, index=True)

    doctor = relationship("Doctor", back_populates="major_doctors")


class CertificationDoctor(IntIdBase):
    __tablename__ = "certification_doctors"

    doctor_id: Mapped[int] = mapped_column(ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True)
    certification_id: Mapped[int] = mapped_column(ForeignKey("certifications.id"), nullable=False, index=True)
    evidence: Mapped[str | None] = mapped_column(String(500), nullable=True)
    date_of_issue: Mapped[date | None] = mapped_column(Date, nullable=True)

    doctor = relationship("Doctor", back_populates="certification_doctors")
