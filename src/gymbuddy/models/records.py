"""Personal record model."""

from dataclasses import dataclass


@dataclass
class PersonalRecord:
    """Best logged set for one exercise across all sessions."""

    exercise_id: str | None
    name: str | None
    body_part: str | None
    image: str | None
    pr_weight: float | None
    reps_at_pr: int

    def to_dict(self) -> dict:
        return {
            "exerciseId": self.exercise_id,
            "name": self.name,
            "bodyPart": self.body_part,
            "image": self.image,
            "prWeight": self.pr_weight,
            "repsAtPr": self.reps_at_pr,
        }
