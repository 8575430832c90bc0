# /gradebook/services/seed_data.py

"""
Initial data used when the store is empty: the curriculum structure for all
nine grade levels and a small sample roster.

Primary grades count hours per year. Secondary grades write each subject as
"credit (hours per semester)".
"""

from typing import Dict, List

from ..core.grade_levels import GRADE_LEVEL_LABELS

# (subject prefix, name, hours for p1-p3, hours for p4-p6)
_PRIMARY_CORE = [
    ("ท", "ภาษาไทย", 200, 160),
    ("ค", "คณิตศาสตร์", 200, 160),
    ("ว", "วิทยาศาสตร์และเทคโนโลยี", 80, 120),
    ("ส", "สังคมศึกษา ศาสนาและวัฒนธรรม", 80, 80),
    ("ส", "ประวัติศาสตร์", 40, 40),
    ("พ", "สุขศึกษาและพลศึกษา", 80, 80),
    ("ศ", "ศิลปะ", 80, 80),
    ("ง", "การงานอาชีพ", 40, 80),
    ("อ", "ภาษาอังกฤษ", 200, 80),
]

_DEVELOPMENT_ACTIVITIES = [
    ("แนะแนว", 40),
    ("ลูกเสือ-เนตรนารี", 40),
    ("ชุมนุม", 30),
    ("กิจกรรมเพื่อสังคมและสาธารณประโยชน์", 10),
]

# (subject prefix, name, credit, hours per semester)
_SECONDARY_CORE = [
    ("ท", "ภาษาไทย", 1.5, 60),
    ("ค", "คณิตศาสตร์", 1.5, 60),
    ("ว", "วิทยาศาสตร์และเทคโนโลยี", 1.5, 60),
    ("ส", "สังคมศึกษา ศาสนาและวัฒนธรรม", 1.5, 60),
    ("ส", "ประวัติศาสตร์", 0.5, 20),
    ("พ", "สุขศึกษาและพลศึกษา", 1.0, 40),
    ("ศ", "ศิลปะ", 1.0, 40),
    ("ง", "การงานอาชีพ", 1.0, 40),
    ("อ", "ภาษาอังกฤษ", 1.5, 60),
]


def _primary_grade(grade_number: int) -> Dict:
    upper = grade_number > 3
    core = []
    sequence: Dict[str, int] = {}
    for prefix, name, lower_hours, upper_hours in _PRIMARY_CORE:
        sequence[prefix] = sequence.get(prefix, 0) + 1
        core.append({
            "code": f"{prefix}1{grade_number}1{sequence[prefix]:02d}",
            "name": name,
            "hours": upper_hours if upper else lower_hours,
        })
    additional = [{"code": f"ส1{grade_number}231", "name": "หน้าที่พลเมือง", "hours": 40}]
    development = [{"code": "", "name": name, "hours": hours} for name, hours in _DEVELOPMENT_ACTIVITIES]

    core_total = sum(s["hours"] for s in core)
    additional_total = sum(s["hours"] for s in additional)
    development_total = sum(s["hours"] for s in development)
    return {
        "kind": "primary",
        "title": f"โครงสร้างหลักสูตรชั้น{GRADE_LEVEL_LABELS[f'p{grade_number}']}",
        "level": GRADE_LEVEL_LABELS[f"p{grade_number}"],
        "coreSubjects": core,
        "additionalSubjects": additional,
        "developmentActivities": development,
        "totals": {
            "core": core_total,
            "additional": additional_total,
            "development": development_total,
            "total": core_total + additional_total + development_total,
        },
    }


def _secondary_semester(grade_number: int, semester_number: int) -> Dict:
    core = []
    sequence: Dict[str, int] = {}
    for prefix, name, credit, hours in _SECONDARY_CORE:
        # Semester 1 subjects take odd sequence numbers, semester 2 even ones.
        sequence[prefix] = sequence.get(prefix, 0) + 1
        number = (sequence[prefix] - 1) * 2 + semester_number
        core.append({"code": f"{prefix}2{grade_number}1{number:02d}", "name": name, "hours": f"{credit} ({hours})"})
    additional = [
        {"code": f"ส2{grade_number}23{semester_number}", "name": "หน้าที่พลเมือง", "hours": "0.5 (20)"},
        {"code": f"ว2{grade_number}20{semester_number}", "name": "วิทยาการคำนวณ", "hours": "0.5 (20)"},
    ]
    development = [{"code": "", "name": name, "hours": hours // 2} for name, hours in _DEVELOPMENT_ACTIVITIES]

    total_hours = (
        sum(hours for _, _, _, hours in _SECONDARY_CORE)
        + 40
        + sum(a["hours"] for a in development)
    )
    return {
        "coreSubjects": core,
        "additionalSubjects": additional,
        "developmentActivities": development,
        "totalHours": total_hours,
    }


def _secondary_grade(grade_number: int) -> Dict:
    return {
        "kind": "secondary",
        "title": f"โครงสร้างหลักสูตรชั้น{GRADE_LEVEL_LABELS[f'm{grade_number}']}",
        "level": GRADE_LEVEL_LABELS[f"m{grade_number}"],
        "semesters": {
            "semester1": _secondary_semester(grade_number, 1),
            "semester2": _secondary_semester(grade_number, 2),
        },
    }


def initial_curriculum() -> Dict[str, Dict]:
    curriculum = {f"p{n}": _primary_grade(n) for n in range(1, 7)}
    curriculum.update({f"m{n}": _secondary_grade(n) for n in range(1, 4)})
    return curriculum


_SAMPLE_NAMES = [
    "เด็กชายกิตติพัฒน์ ใจดี", "เด็กหญิงชุติมา แสงทอง", "เด็กชายณัฐวุฒิ บุญมา",
    "เด็กหญิงปิยะนุช ศรีสุข", "เด็กชายวรเมธ คำดี", "เด็กหญิงสุภาพร มั่นคง",
]


def initial_students() -> Dict[str, Dict[str, List[Dict]]]:
    """Two students in room 1 of every grade level, ids 1001 upwards."""
    roster: Dict[str, Dict[str, List[Dict]]] = {}
    next_id = 1001
    for index, grade_level in enumerate(GRADE_LEVEL_LABELS):
        students = []
        for number in (1, 2):
            students.append({
                "id": str(next_id),
                "name": _SAMPLE_NAMES[(index * 2 + number - 1) % len(_SAMPLE_NAMES)],
                "number": number,
            })
            next_id += 1
        roster[grade_level] = {"1": students}
    return roster
