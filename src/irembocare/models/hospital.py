"""医疗机构模型."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Hospital(BaseModel):
    """医院 / 诊所."""

    name: str
    type: Literal["Public", "Private"]
    phone: str
    email: str
    telemedicine: bool = Field(default=False, description="是否提供远程问诊")
    specialties: list[str] = Field(default_factory=list)

    @property
    def slug(self) -> str:
        """由名称生成的标识."""
        return "-".join(self.name.lower().split())


class TelemedicineRequest(BaseModel):
    """远程问诊申请."""

    model_config = ConfigDict(populate_by_name=True)

    patient_name: str = Field(min_length=1, alias="patientName")
    district: str = Field(min_length=1)
    symptoms: str = Field(min_length=1)
    hospital_name: str = Field(min_length=1, alias="hospitalName")
    contact_method: str = Field(min_length=1, alias="contactMethod")
    urgency: Literal["normal", "urgent"] = "normal"
