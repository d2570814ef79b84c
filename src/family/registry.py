"""Family member profiles and their medication schedules."""

import logging
from typing import Iterable, List, Optional

from ..models import FamilyMember, MemberMedication

logger = logging.getLogger(__name__)

NOT_SPECIFIED = "None Specified"


class FamilyRegistry:
    """In-memory registry of family member profiles."""

    def __init__(self, members: Optional[Iterable[FamilyMember]] = None):
        self._members: List[FamilyMember] = list(members or [])

    def __len__(self) -> int:
        return len(self._members)

    @property
    def members(self) -> List[FamilyMember]:
        return list(self._members)

    def get(self, member_id: str) -> FamilyMember:
        """Look up a member by id.

        Raises:
            KeyError: If no member has this id
        """
        for member in self._members:
            if member.id == member_id:
                return member
        raise KeyError(f"Family member not found: {member_id}")

    def add_member(
        self,
        name: str,
        age: Optional[int] = None,
        chronic_condition: str = "",
        allergies: str = "",
        medication_name: str = "",
        medication_dosage: str = "",
        medication_schedule: str = "",
    ) -> FamilyMember:
        """
        Create and register a family member profile.

        An initial medication is attached only when a medication name is given.
        Blank details fall back to placeholder text.

        Args:
            name: Member name (required)
            age: Age in years (defaults to 0)
            chronic_condition: Chronic condition summary
            allergies: Known allergies
            medication_name: Name of an initial medication
            medication_dosage: Dosage of the initial medication
            medication_schedule: Schedule of the initial medication

        Returns:
            The new FamilyMember

        Raises:
            ValueError: If name is blank
        """
        name = name.strip()
        if not name:
            raise ValueError("Family member name cannot be blank")

        medications = []
        if medication_name.strip():
            medications.append(MemberMedication(
                name=medication_name.strip(),
                dosage=medication_dosage.strip() or "N/A",
                schedule=medication_schedule.strip() or "Unscheduled",
            ))

        member = FamilyMember(
            name=name,
            age=age or 0,
            chronic_condition=chronic_condition.strip() or NOT_SPECIFIED,
            allergies=allergies.strip() or NOT_SPECIFIED,
            medications=medications,
        )
        self._members.append(member)
        logger.debug("Added family member %s with %d medication(s)", member.name, len(medications))
        return member

    def medication_count(self, member_id: str) -> int:
        """Number of scheduled medications for a member."""
        return len(self.get(member_id).medications)


def sample_family() -> FamilyRegistry:
    """Registry pre-filled with the demo household."""
    return FamilyRegistry([
        FamilyMember(
            id='m1', name='Grandpa Ahmed', age=72,
            chronic_condition='Hypertension', allergies='None',
            medications=[
                MemberMedication(id='m1-1', name='Lisinopril', dosage='5mg', schedule='7:00 AM'),
                MemberMedication(id='m1-2', name='Aspirin', dosage='81mg', schedule='8:00 PM'),
                MemberMedication(id='m1-3', name='Multivitamin', dosage='1 tablet', schedule='9:00 AM'),
            ],
        ),
        FamilyMember(
            id='m2', name='Aisha', age=34,
            chronic_condition='None', allergies='Penicillin',
            medications=[
                MemberMedication(id='m2-1', name='Daily Vitamin C', dosage='1000mg', schedule='After Breakfast'),
            ],
        ),
        FamilyMember(
            id='m3', name='Omar (Son)', age=12,
            chronic_condition='Asthma', allergies='Peanuts, Pollen',
            medications=[
                MemberMedication(id='m3-1', name='Inhaler (Albuterol)', dosage='2 puffs', schedule='As Needed'),
                MemberMedication(id='m3-2', name='Cetirizine', dosage='10mg', schedule='Before Bed'),
            ],
        ),
    ])
