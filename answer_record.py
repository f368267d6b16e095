"""
Healthspan Survey — Answer Record
One fully-populated questionnaire submission, as consumed by the engines.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnswerRecord:
    age: int
    sex: str            # male / female / other
    smoking: str        # never / rare / often / past
    alcohol: str        # none / week1 / week2_3 / daily
    exercise: str       # none / week1_2 / week3_5 / daily
    sleep: str          # <5 / 5_6 / 7_8 / 9plus
    chronic_count: int  # checked conditions, "none" excluded
    meds: str           # yes / no
    stress: str         # low / mid / high
