from datetime import date

from pydantic import EmailStr, Field

from telemedicine.common.schemas import CamelModel


class HospitalDoctorCreate(CamelModel):
    hospital_id: int
    is_working: bool = True


class MajorDoctorCreate(CamelModel):
    major_id: int


class CertificationDoctorCreate(CamelModel):
    certification_id: int
    evidence: str | None = Field(default=None, max_length=500)
    date_of_issue: date | None = None


class DoctorCreate(CamelModel):
    email: EmailStr
    practising_certificate: str = Field(min_length=1, max_length=255)
    certificate_code: str = Field(min_length=1, max_length=100)
    place_of_certificate: str = Field(min_length=1, max_length=255)
    date_of_certificate: date
    scope_of_practice: str = Field(min_length=1, max_length=500)
    description: str | None = None
    hospital_doctors: list[HospitalDoctorCreate] = []
    major_doctors: list[MajorDoctorCreate] = []
    certification_doctors: list[CertificationDoctorCreate] = []


class DoctorUpdate(CamelModel):
    id: int
    practising_certificate: str = Field(min_length=1, max_length=255)
    certificate_code: str = Field(min_length=1, max_length=100)
    place_of_certificate: str = Field(min_length=1, max_length=255)
    date_of_certificate: date
    scope_of_practice: str = Field(min_length=1, max_length=500)
    description: str | None = None


class HospitalDoctorResponse(CamelModel):
    id: int
    hospital_id: int
    is_working: bool


class MajorDoctorResponse(CamelModel):
    id: int
    major_id: int


class CertificationDoctorResponse(CamelModel):
    id: int
    certification_id: int
    evidence: str | None
    date_of_issue: date | None


class DoctorResponse(CamelModel):
    id: int
    email: str
    practising_certificate: str
    certificate_code: str
    place_of_certificate: str
    date_of_certificate: date
    scope_of_practice: str
    description: str | None
    number_of_consultants: int
    rating: float
    is_verify: bool
    hospital_doctors: list[HospitalDoctorResponse]
    major_doctors: list[MajorDoctorResponse]
    certification_doctors: list[CertificationDoctorResponse]
