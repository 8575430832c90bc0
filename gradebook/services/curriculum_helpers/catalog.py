# /gradebook/services/curriculum_helpers/catalog.py

"""
Helpers over a single grade level's curriculum, shared by grade entry, the
report card and curriculum administration.
"""

from typing import List, NamedTuple, Optional, Union

from ...models.curriculum_model import (
    JuniorHighGradeData,
    PrimaryGradeData,
    PrimaryTotals,
    Semester,
    SemesterData,
    Subject,
    SubjectCategory,
)
from ..report_helpers.gpa_calculator import activity_code, subject_hour_count

GradeLevelData = Union[PrimaryGradeData, JuniorHighGradeData]

# Primary grades have no semesters; their activities use the first ordinal.
PRIMARY_PERIOD_NUMBER = 1


class EntrySubject(NamedTuple):
    category: SubjectCategory
    subject: Subject

    @property
    def is_activity(self) -> bool:
        return self.category is SubjectCategory.DEVELOPMENT


def activities_with_codes(activities: List[Subject], period_number: int) -> List[Subject]:
    """Returns the activities with every missing code filled in by `activity_code`."""
    return [a.model_copy(update={"code": activity_code(a, period_number)}) for a in activities]


def subject_lists(grade_data: GradeLevelData, semester: Optional[Semester]) -> Union[PrimaryGradeData, SemesterData]:
    """The object holding the three subject lists for a grade (and semester)."""
    if isinstance(grade_data, PrimaryGradeData):
        return grade_data
    if semester is None:
        raise ValueError(f"A semester is required for {grade_data.level}.")
    return grade_data.semesters.get(semester)


def entry_subjects(grade_data: GradeLevelData, semester: Optional[Semester]) -> List[EntrySubject]:
    """
    Subjects graded for a class, in display order: core, additional, then
    development activities with their storage keys resolved.
    """
    lists = subject_lists(grade_data, semester)
    period_number = PRIMARY_PERIOD_NUMBER if isinstance(grade_data, PrimaryGradeData) else semester.number
    return (
        [EntrySubject(SubjectCategory.CORE, s) for s in lists.coreSubjects]
        + [EntrySubject(SubjectCategory.ADDITIONAL, s) for s in lists.additionalSubjects]
        + [EntrySubject(SubjectCategory.DEVELOPMENT, s)
           for s in activities_with_codes(lists.developmentActivities, period_number)]
    )


def _hours(subjects: List[Subject]) -> float:
    return sum(subject_hour_count(s.hours) for s in subjects)


def recompute_totals(grade_data: GradeLevelData) -> GradeLevelData:
    """Returns the grade data with its hour totals recalculated from the subject lists."""
    if isinstance(grade_data, PrimaryGradeData):
        core = _hours(grade_data.coreSubjects)
        additional = _hours(grade_data.additionalSubjects)
        development = _hours(grade_data.developmentActivities)
        totals = PrimaryTotals(core=core, additional=additional, development=development,
                               total=core + additional + development)
        return grade_data.model_copy(update={"totals": totals})

    semesters = {}
    for semester in Semester:
        data = grade_data.semesters.get(semester)
        total = _hours(data.coreSubjects) + _hours(data.additionalSubjects) + _hours(data.developmentActivities)
        semesters[semester.value] = data.model_copy(update={"totalHours": total})
    return grade_data.model_copy(update={"semesters": grade_data.semesters.model_copy(update=semesters)})


def with_subject_list(
    grade_data: GradeLevelData,
    semester: Optional[Semester],
    category: SubjectCategory,
    subjects: List[Subject],
) -> GradeLevelData:
    """Returns the grade data with one subject list replaced and totals recomputed."""
    if isinstance(grade_data, PrimaryGradeData):
        updated = grade_data.model_copy(update={category.value: subjects})
    else:
        lists = subject_lists(grade_data, semester)
        new_semester = lists.model_copy(update={category.value: subjects})
        updated = grade_data.model_copy(
            update={"semesters": grade_data.semesters.model_copy(update={semester.value: new_semester})}
        )
    return recompute_totals(updated)
