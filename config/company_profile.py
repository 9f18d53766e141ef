"""Acme Corp company profile for synthetic data generation."""

from datetime import date

COMPANY = {
    "name": "Acme Corp",
    "email_domain": "acmecorp.com",
    "total_employees": 100,
    # "Now" for generated data: no termination may fall after this date
    "reference_date": date(2025, 12, 16),
}

# The root of the hierarchy. Everyone else reports up to this record.
ROOT_EMPLOYEE = {
    "email": "margaret.chen@acmecorp.com",
    "full_name": "Margaret Chen",
    "department": "Executive",
    "job_title": "Chief Executive Officer",
    "hire_date": date(2012, 3, 1),
    "work_state": "California",
    "status": "active",
    "date_of_birth": date(1968, 7, 15),
    "gender": "Female",
    "ethnicity": "Asian",
}

# Department configuration. "target" is the final headcount of the department,
# root included for Executive. "template_key" selects accomplishment templates.
DEPARTMENTS = [
    {
        "name": "Engineering",
        "head_title": "VP of Engineering",
        "manager_count": 3,
        "manager_title": "Engineering Manager",
        "target": 28,
        "template_key": "engineering",
        "ic_titles": [
            "Software Engineer", "Senior Software Engineer", "Staff Engineer",
            "QA Engineer", "DevOps Engineer",
        ],
    },
    {
        "name": "Sales",
        "head_title": "VP of Sales",
        "manager_count": 2,
        "manager_title": "Sales Manager",
        "target": 18,
        "template_key": "sales",
        "ic_titles": [
            "Account Executive", "Sales Representative", "Business Development Rep",
            "Sales Engineer",
        ],
    },
    {
        "name": "Marketing",
        "head_title": "Director of Marketing",
        "manager_count": 0,
        "manager_title": "Team Lead",
        "target": 12,
        "template_key": "marketing",
        "ic_titles": [
            "Marketing Specialist", "Content Manager", "Product Marketing Manager",
            "Brand Manager", "Digital Marketing Specialist",
        ],
    },
    {
        "name": "Operations",
        "head_title": "Director of Operations",
        "manager_count": 1,
        "manager_title": "Operations Manager",
        "target": 14,
        "template_key": "operations",
        "ic_titles": [
            "Operations Analyst", "Project Coordinator", "Business Analyst",
            "Operations Specialist",
        ],
    },
    {
        "name": "HR",
        "head_title": "Director of HR",
        "manager_count": 0,
        "manager_title": "Team Lead",
        "target": 6,
        "template_key": "hr",
        "ic_titles": ["HR Specialist", "Recruiter", "HR Coordinator", "Benefits Administrator"],
    },
    {
        "name": "Finance",
        "head_title": "Director of Finance",
        "manager_count": 0,
        "manager_title": "Team Lead",
        "target": 8,
        "template_key": "finance",
        "ic_titles": ["Financial Analyst", "Accountant", "Senior Accountant", "Payroll Specialist"],
    },
    {
        "name": "Customer Success",
        "head_title": "Customer Success Manager",
        "manager_count": 0,
        "manager_title": "Team Lead",
        "target": 10,
        "template_key": "customer_success",
        "ic_titles": [
            "Customer Success Rep", "Support Specialist", "Account Manager",
            "Implementation Specialist",
        ],
    },
    {
        "name": "Executive",
        "head_title": "Chief Operating Officer",
        "manager_count": 0,
        "manager_title": "Team Lead",
        "target": 4,
        "template_key": "generic",
        "ic_titles": ["Chief of Staff", "Executive Assistant"],
    },
]

# Company-wide status mix: 82 active, 12 terminated, 6 on leave
STATUS_TARGETS = {
    "terminated": 12,
    "leave": 6,
}

# Department heads joined in the company's growth years
HEAD_HIRE_WINDOW = (date(2015, 1, 1), date(2021, 12, 31))

# Tenure buckets for generic hire dates: (weight, start, end)
TENURE_RANGES = [
    (15, date(2025, 1, 1), date(2025, 12, 16)),   # < 1 year
    (22, date(2023, 1, 1), date(2024, 12, 31)),   # 1-2 years
    (35, date(2020, 1, 1), date(2022, 12, 31)),   # 2-5 years
    (20, date(2015, 1, 1), date(2019, 12, 31)),   # 5-10 years
    (8, date(2010, 1, 1), date(2014, 12, 31)),    # 10+ years
]

# Generic terminations happen in the second half of 2024
TERMINATION_WINDOW = (date(2024, 6, 1), date(2024, 11, 30))

TERMINATION_REASONS = {
    "voluntary": 0.70,
    "involuntary": 0.22,
    "retirement": 0.05,
    "other": 0.03,
}

GENDER_DISTRIBUTION = {
    "Male": 48,
    "Female": 47,
    "Non-binary": 3,
    "Prefer not to say": 2,
}

ETHNICITY_DISTRIBUTION = {
    "White": 45,
    "Asian": 25,
    "Hispanic/Latino": 15,
    "Black/African American": 10,
    "Two or more": 3,
    "Prefer not to say": 2,
}

WORK_STATE_DISTRIBUTION = {
    "California": 45,
    "New York": 15,
    "Texas": 12,
    "Colorado": 8,
    "Washington": 8,
    "Florida": 3,
    "Illinois": 3,
    "Massachusetts": 2,
    "Oregon": 2,
    "Arizona": 2,
}

# Review cycles, registered before any employee
REVIEW_CYCLES = [
    {
        "id": "rc_2023_annual",
        "name": "2023 Annual Review",
        "cycle_type": "annual",
        "start_date": date(2023, 1, 1),
        "end_date": date(2023, 12, 31),
        "status": "closed",
    },
    {
        "id": "rc_2024_annual",
        "name": "2024 Annual Review",
        "cycle_type": "annual",
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 12, 31),
        "status": "closed",
    },
    {
        "id": "rc_2025_q1",
        "name": "Q1 2025 Check-in",
        "cycle_type": "quarterly",
        "start_date": date(2025, 1, 1),
        "end_date": date(2025, 3, 31),
        "status": "active",
    },
]

# Rating bands, best first. Targets: 8/22/55/12/3 %.
RATING_DISTRIBUTION = {
    "exceptional": 0.08,
    "exceeds": 0.22,
    "meets": 0.55,
    "developing": 0.12,
    "unsatisfactory": 0.03,
}

RATING_RANGES = {
    "exceptional": (4.8, 5.0),
    "exceeds": (4.0, 4.7),
    "meets": (3.0, 3.9),
    "developing": (2.0, 2.9),
    "unsatisfactory": (1.0, 1.9),
}

# Lower bound of each band when classifying a final score
RATING_BAND_FLOORS = [
    ("exceptional", 4.8),
    ("exceeds", 4.0),
    ("meets", 3.0),
    ("developing", 2.0),
    ("unsatisfactory", 1.0),
]

# Chronological pulse surveys
SURVEYS = [
    {"name": "Q2 2024 Pulse", "date": date(2024, 6, 15)},
    {"name": "Q4 2024 Pulse", "date": date(2024, 12, 15)},
    {"name": "Q1 2025 Pulse", "date": date(2025, 3, 15)},
]

SURVEY_RESPONSE_RATE = 0.95
FEEDBACK_RATE = 0.70

# Behavioral patterns for everyone without a fixed narrative
ENPS_PATTERN_WEIGHTS = {
    "stable_high": 0.30,
    "stable_mid": 0.25,
    "stable_low": 0.15,
    "declining": 0.10,
    "improving": 0.10,
    "manager_driven_low": 0.10,
}

# Score distribution forced onto a disengaged team; mean ~5
MANAGER_DRIVEN_SCORES = {3: 0.15, 4: 0.20, 5: 0.30, 6: 0.20, 7: 0.15}

# Acceptable average for the manager-driven team
TEAM_AVERAGE_TARGET = (4.0, 6.0)
