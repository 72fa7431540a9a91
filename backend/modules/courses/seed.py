"""Starter catalog inserted into an empty courses table."""

DUMMY_COURSES: list[dict] = [
    # CSE
    {"title": "GATE 2026 - CSE Full Syllabus", "branch": "CSE", "description": "Comprehensive CSE course.", "topics": ["Algorithms", "Data Structures", "OS", "DBMS"], "price": 4999},
    {"title": "GATE 2026 - CSE Crash Course", "branch": "CSE", "description": "Crash course for CSE.", "topics": ["Networks", "Compiler", "Digital Logic"], "price": 2999},
    # ECE
    {"title": "GATE 2026 - ECE Full Syllabus", "branch": "ECE", "description": "Full ECE course.", "topics": ["Signals", "Networks", "Analog Circuits"], "price": 4999},
    {"title": "GATE 2026 - ECE Practice Series", "branch": "ECE", "description": "Practice for ECE.", "topics": ["Microprocessors", "Communication"], "price": 1999},
    # ME
    {"title": "GATE 2026 - ME Full Syllabus", "branch": "ME", "description": "Full ME course.", "topics": ["Thermodynamics", "Fluid Mechanics"], "price": 4999},
    {"title": "GATE 2026 - ME Crash Course", "branch": "ME", "description": "Crash course for ME.", "topics": ["Strength of Materials", "Heat Transfer"], "price": 2999},
    # CE
    {"title": "GATE 2026 - CE Full Syllabus", "branch": "CE", "description": "Full CE course.", "topics": ["Structural", "Geotechnical"], "price": 4999},
    {"title": "GATE 2026 - CE Practice Series", "branch": "CE", "description": "Practice for CE.", "topics": ["Environmental", "Surveying"], "price": 1999},
    # EE
    {"title": "GATE 2026 - EE Full Syllabus", "branch": "EE", "description": "Full EE course.", "topics": ["Power Systems", "Machines"], "price": 4999},
    {"title": "GATE 2026 - EE Crash Course", "branch": "EE", "description": "Crash course for EE.", "topics": ["Power Electronics", "Analog Circuits"], "price": 2999},
    # IN
    {"title": "GATE 2026 - IN Full Syllabus", "branch": "IN", "description": "Full IN course.", "topics": ["Transducers", "Control Systems"], "price": 4999},
    {"title": "GATE 2026 - IN Practice Series", "branch": "IN", "description": "Practice for IN.", "topics": ["Sensors", "Process Control"], "price": 1999},
]
