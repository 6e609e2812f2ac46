"""
DDx Refine — Схеми симптомів

- SymptomInfo: запис каталогу симптомів (id + label)
- RoundRecord: одна відповідь користувача в раунді уточнення
"""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator


class SymptomInfo(BaseModel):
    """
    Симптом з каталогу.

    Приклад:
        symptom = SymptomInfo(id="skin_rash", label="Skin rash")
    """
    id: str = Field(..., min_length=1, description="Ідентифікатор симптому")
    label: str = Field(default="", description="Назва для показу")

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        """Прибрати пробіли по краях"""
        v = v.strip()
        if not v:
            raise ValueError("symptom id must not be blank")
        return v

    def model_post_init(self, __context) -> None:
        if not self.label:
            self.label = label_from_id(self.id)

    class Config:
        json_schema_extra = {
            "example": {"id": "skin_rash", "label": "Skin rash"}
        }


class RoundRecord(BaseModel):
    """Запис раунду: питання про симптом та відповідь"""
    round: int = Field(..., ge=1)
    symptom: str
    confirmed: bool
    timestamp: datetime = Field(default_factory=datetime.now)


def label_from_id(symptom_id: str) -> str:
    """'skin_rash' -> 'Skin rash'"""
    text = symptom_id.replace("_", " ").strip()
    text = " ".join(text.split())
    return text[:1].upper() + text[1:]
