"""
CEFR Models
Common European Framework of Reference levels and their descriptors.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CEFRLevel(str, Enum):
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class CEFRSkills(BaseModel):
    """Can-do statement per skill"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    listening: str
    reading: str
    speaking_production: str
    speaking_interaction: str
    writing: str


class CEFRDescriptor(BaseModel):
    """Label, summary and skill descriptors of one CEFR level"""
    model_config = ConfigDict(frozen=True)

    level: CEFRLevel
    label: str
    description: str
    skills: CEFRSkills
