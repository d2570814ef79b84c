"""Family member profile data models."""

from typing import List

from pydantic import BaseModel, Field

from .medicine import new_id


class MemberMedication(BaseModel):
    """A medication on a family member's schedule."""
    id: str = Field(default_factory=new_id, description="Unique medication identifier")
    name: str = Field(..., description="Medication name, e.g. 'Lisinopril'")
    dosage: str = Field(default="N/A", description="Dosage, e.g. '5mg' or '2 puffs'")
    schedule: str = Field(default="Unscheduled", description="When taken, e.g. 'As Needed'")


class FamilyMember(BaseModel):
    """
    Represents a household member and the medications they take.

    Attributes:
        id: Unique member identifier
        name: Display name
        age: Age in years
        chronic_condition: Chronic condition summary (e.g., "Hypertension")
        allergies: Known allergies (e.g., "Penicillin, Peanuts")
        medications: Scheduled medications
    """
    id: str = Field(default_factory=new_id, description="Unique member identifier")
    name: str = Field(..., description="Member name", min_length=1)
    age: int = Field(default=0, description="Age in years", ge=0)
    chronic_condition: str = Field(default="None Specified", description="Chronic condition")
    allergies: str = Field(default="None Specified", description="Known allergies")
    medications: List[MemberMedication] = Field(
        default_factory=list,
        description="Scheduled medications"
    )

    @property
    def has_allergies(self) -> bool:
        """Whether any real allergy is recorded (placeholders count as none)."""
        return self.allergies.strip().lower() not in ("none", "none specified", "")

    def __str__(self) -> str:
        return f"{self.name} ({self.age})"
