"""Free-text eNPS feedback, bucketed by score tier and behavioral pattern."""

FEEDBACK = {
    "promoter": [
        "I love the people I work with and the problems we get to solve.",
        "Great culture and real opportunities to grow here.",
        "Leadership is transparent and I feel trusted to do my job.",
        "I'd recommend Acme to any friend looking for a new role.",
    ],
    "passive": [
        "Generally a good place to work, but career paths could be clearer.",
        "Good team, though workload has been uneven this quarter.",
        "Compensation is fair; I'd like more investment in training.",
        "Things are fine. Communication between departments could improve.",
    ],
    "detractor": [
        "I don't see a clear path for advancement.",
        "Too many priorities change without explanation.",
        "Compensation hasn't kept up with the market.",
        "Tooling and processes slow us down more than they should.",
    ],
    "manager_issue": [
        "My manager rarely has time for one-on-ones.",
        "Feedback from my manager is inconsistent and hard to act on.",
        "Decisions on our team are made without any input from us.",
        "I don't feel supported by my direct manager.",
    ],
    "declining": [
        "Things used to be better here; the last few months have been rough.",
        "I'm feeling less connected to the mission than when I joined.",
        "Recent changes have made my work less rewarding.",
        "I've started to wonder whether this is still the right place for me.",
    ],
}
