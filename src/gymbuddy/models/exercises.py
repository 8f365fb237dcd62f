"""Exercise catalog model."""

from dataclasses import dataclass


@dataclass
class Exercise:
    """An entry in the exercise library.

    Seeded entries come from the bundled dataset; user additions are
    flagged ``is_custom``. Muscles and equipment are free text.
    """

    id: str
    name: str
    image: str = ""
    body_part: str = ""
    primary_muscles: str = ""
    secondary_muscles: str = ""
    equipment: str = ""
    is_custom: bool = False

    def to_dict(self) -> dict:
        """Convert to the JSON shape served by the API."""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "bodyPart": self.body_part,
            "primaryMuscles": self.primary_muscles,
            "secondaryMuscles": self.secondary_muscles,
            "equipment": self.equipment,
            "isCustom": self.is_custom,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from the JSON shape (as found in the seed dataset)."""
        return cls(
            id=data["id"],
            name=data["name"],
            image=data.get("image") or "",
            body_part=data.get("bodyPart") or "",
            primary_muscles=data.get("primaryMuscles") or "",
            secondary_muscles=data.get("secondaryMuscles") or "",
            equipment=data.get("equipment") or "",
            is_custom=bool(data.get("isCustom", False)),
        )
