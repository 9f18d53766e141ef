"""Named individuals whose records trace a fixed, documented narrative.

Every generator consults this table through ``overrides.OverrideTable``; no
generator compares identities on its own.

Per-cycle maps use "*" as the default entry.
"""

from datetime import date

NAMED_INDIVIDUALS = [
    {
        "key": "SARAH_CHEN",
        "narrative": "High performer with declining engagement (flight risk)",
        "email": "sarah.chen@acmecorp.com",
        "full_name": "Sarah Chen",
        "department": "Marketing",
        "job_title": "Marketing Manager",
        "hire_date": date(2021, 3, 15),
        "status": "active",
        "gender": "Female",
        "work_state": "California",
        "performance": {
            "bands": {"*": {"exceptional": 0.7, "exceeds": 0.3}},
            "floor": {"*": 4.5},
        },
        "enps": {"pattern": "declining", "scores": [9, 7, 6]},
    },
    {
        "key": "MARCUS_JOHNSON",
        "narrative": "Two cycles below 2.5, slight improvement in Q1 2025",
        "email": "marcus.johnson@acmecorp.com",
        "full_name": "Marcus Johnson",
        "department": "Sales",
        "job_title": "Sales Representative",
        "hire_date": date(2022, 6, 1),
        "status": "active",
        "gender": "Male",
        "work_state": "Texas",
        "performance": {
            "bands": {
                "*": {"unsatisfactory": 0.7, "developing": 0.3},
                "rc_2025_q1": {"developing": 1.0},
            },
            "ceiling": {"rc_2023_annual": 2.4, "rc_2024_annual": 2.4},
            "range": {"rc_2025_q1": (2.5, 2.9)},
        },
    },
    {
        "key": "ELENA_RODRIGUEZ",
        "narrative": "Consistent 4.5+ ratings, six years in, promotion ready",
        "email": "elena.rodriguez@acmecorp.com",
        "full_name": "Elena Rodriguez",
        "department": "Engineering",
        "job_title": "Senior Software Engineer",
        "hire_date": date(2019, 4, 15),
        "status": "active",
        "gender": "Female",
        "work_state": "California",
        "performance": {
            "bands": {"*": {"exceptional": 0.6, "exceeds": 0.4}},
            "floor": {"*": 4.5},
        },
    },
    {
        "key": "JAMES_PARK",
        "narrative": "Recent hire struggling at around 2.8",
        "email": "james.park@acmecorp.com",
        "full_name": "James Park",
        "department": "Engineering",
        "job_title": "Junior Software Engineer",
        "hire_date": date(2024, 9, 15),
        "status": "active",
        "gender": "Male",
        "work_state": "Washington",
        "performance": {
            "bands": {"*": {"developing": 1.0}},
            "range": {"*": (2.7, 3.0)},
            "eligible_cycles": ["rc_2024_annual", "rc_2025_q1"],
        },
    },
    {
        "key": "LISA_THOMPSON",
        "narrative": "Work anniversary on December 20",
        "email": "lisa.thompson@acmecorp.com",
        "full_name": "Lisa Thompson",
        "department": "Operations",
        "job_title": "Operations Analyst",
        "hire_date": date(2020, 12, 20),
        "status": "active",
        "gender": "Female",
        "work_state": "Colorado",
    },
    {
        "key": "ROBERT_KIM",
        "narrative": "Longest-tenured individual contributor, steady 3.5",
        "email": "robert.kim@acmecorp.com",
        "full_name": "Robert Kim",
        "department": "Finance",
        "job_title": "Senior Accountant",
        "hire_date": date(2013, 2, 10),
        "status": "active",
        "gender": "Male",
        "work_state": "California",
        "performance": {
            "bands": {"*": {"meets": 1.0}},
            "range": {"*": (3.4, 3.6)},
        },
    },
    {
        "key": "AMANDA_FOSTER",
        "narrative": "Left voluntarily in November 2024",
        "email": "amanda.foster@acmecorp.com",
        "full_name": "Amanda Foster",
        "department": "Sales",
        "job_title": "Account Executive",
        "hire_date": date(2021, 8, 15),
        "status": "terminated",
        "termination_date": date(2024, 11, 15),
        "termination_reason": "voluntary",
        "gender": "Female",
        "work_state": "New York",
        "performance": {
            "excluded_cycles": ["rc_2025_q1"],
        },
    },
    {
        "key": "DAVID_NGUYEN",
        "narrative": "On parental leave since November",
        "email": "david.nguyen@acmecorp.com",
        "full_name": "David Nguyen",
        "department": "Engineering",
        "job_title": "Staff Engineer",
        "hire_date": date(2018, 3, 1),
        "status": "leave",
        "gender": "Male",
        "work_state": "California",
    },
    {
        "key": "JENNIFER_WALSH",
        "narrative": "Engineering manager whose team averages ~5 on eNPS",
        "role": "manager",
        "email": "jennifer.walsh@acmecorp.com",
        "full_name": "Jennifer Walsh",
        "department": "Engineering",
        "job_title": "Engineering Manager",
        "hire_date": date(2019, 1, 15),
        "status": "active",
        "gender": "Female",
        "work_state": "California",
        "date_of_birth": date(1985, 4, 22),
        "ethnicity": "White",
        "performance": {
            "bands": {"*": {"exceeds": 0.4, "meets": 0.6}},
        },
        "team_enps": {"pattern": "manager_driven_low"},
    },
    {
        "key": "MICHAEL_BROWN",
        "narrative": "Remote California employee of a New York company",
        "email": "michael.brown@acmecorp.com",
        "full_name": "Michael Brown",
        "department": "Engineering",
        "job_title": "Software Engineer",
        "hire_date": date(2022, 5, 1),
        "status": "active",
        "gender": "Male",
        "work_state": "California",
    },
]
