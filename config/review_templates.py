"""Narrative templates for performance reviews.

Placeholders in braces are filled by ``narratives.NarrativeBuilder``.
"""

STRENGTHS = {
    "exceptional": [
        "Sets the standard for the team through outstanding ownership and judgment",
        "Consistently delivers work well beyond the scope of the role",
        "Acts as a force multiplier, raising the quality of everyone's output",
        "Combines deep expertise with exceptional communication across teams",
    ],
    "exceeds": [
        "Strong problem-solving skills and reliable delivery against deadlines",
        "Proactively identifies issues and drives them to resolution",
        "Excellent collaboration with cross-functional partners",
        "Takes initiative on improvements without being asked",
    ],
    "meets": [
        "Dependable contributor who completes assigned work with good quality",
        "Works well with teammates and responds to feedback",
        "Solid understanding of core responsibilities",
        "Maintains a steady, consistent level of output",
    ],
    "developing": [
        "Shows willingness to learn and asks good questions",
        "Positive attitude and good rapport with the team",
        "Has begun to build familiarity with core processes",
        "Responsive when given clear direction",
    ],
    "unsatisfactory": [
        "Punctual and courteous in team interactions",
        "Has shown occasional effort on smaller tasks",
        "Open to discussing expectations with the manager",
    ],
}

AREAS_FOR_IMPROVEMENT = {
    "exceptional": [
        "Continue delegating so others can grow into larger responsibilities",
        "Share more of the strategic context behind decisions with the wider org",
        "Protect time for long-term initiatives amid high demand",
    ],
    "exceeds": [
        "Broaden strategic thinking beyond immediate team goals",
        "Invest more in documentation and knowledge sharing",
        "Build stronger presentation skills for senior audiences",
    ],
    "meets": [
        "Take more ownership of ambiguous problems",
        "Improve prioritization when juggling competing deadlines",
        "Communicate progress and blockers earlier",
        "Seek more cross-functional exposure",
    ],
    "developing": [
        "Needs to meet deadlines more consistently",
        "Should ask for help earlier when blocked",
        "Quality of deliverables requires closer review than expected",
        "Must build deeper knowledge of core tools and processes",
    ],
    "unsatisfactory": [
        "Performance is significantly below expectations for the role",
        "Deliverables are frequently late or incomplete",
        "Must demonstrate sustained improvement under a performance plan",
    ],
}

MANAGER_COMMENTS = {
    "exceptional": [
        "{name} had an outstanding cycle and is a clear top performer.",
        "{name} continues to exceed every expectation; ready for expanded scope.",
    ],
    "exceeds": [
        "{name} had a strong cycle and consistently delivered above expectations.",
        "Great work this cycle, {name}. Keep building on this momentum.",
    ],
    "meets": [
        "{name} met expectations and is a reliable member of the team.",
        "Solid cycle for {name}; next step is taking on more ownership.",
    ],
    "developing": [
        "{name} is still developing in the role; we agreed on a focused growth plan.",
        "I want to see more consistency from {name} next cycle.",
    ],
    "unsatisfactory": [
        "{name}'s performance has not met expectations; a formal improvement plan is in place.",
        "We need to see significant, sustained improvement from {name}.",
    ],
}

# Keyed by department template key
ACCOMPLISHMENTS = {
    "engineering": [
        "Shipped the {feature} ahead of schedule",
        "Reduced p95 latency of the {system} by {percent}%",
        "Migrated the {system} with zero downtime",
        "Mentored {count} engineers through onboarding",
        "Cut CI build times by {percent}% for the {project}",
        "Resolved {count} high-severity incidents within SLA",
    ],
    "sales": [
        "Closed {count} new enterprise deals including {client}",
        "Reached {percent}% of annual quota",
        "Built ${amount}K in qualified pipeline",
        "Expanded the {client} account by {percent}%",
        "Shortened average sales cycle by {days} days",
    ],
    "marketing": [
        "Launched the {project} campaign generating {count} hundred leads",
        "Grew organic traffic by {percent}%",
        "Produced {count} case studies with {client}",
        "Improved email conversion rates by {points} points",
    ],
    "operations": [
        "Streamlined the {project} process, saving {hours} hours per week",
        "Reduced vendor costs by {percent}%",
        "Coordinated delivery of the {project} on time",
        "Automated {count} recurring reports",
    ],
    "hr": [
        "Filled {count} open roles with a {days}-week average time to hire",
        "Rolled out the {project} onboarding refresh",
        "Raised benefits enrollment completion by {percent}%",
        "Ran {count} manager training sessions",
    ],
    "finance": [
        "Closed the books {days} days faster each month",
        "Identified ${amount}K in cost savings",
        "Led the audit preparation for the {project}",
        "Built a forecasting model accurate to within {points}%",
    ],
    "customer_success": [
        "Maintained {percent}% retention across a book of {count} accounts",
        "Rescued the at-risk {client} renewal",
        "Raised CSAT by {points} points",
        "Cut average response time by {hours} hours",
    ],
    "generic": [
        "Delivered the {project} on schedule",
        "Improved team efficiency by {percent}%",
        "Partnered with {count} departments on company initiatives",
        "Saved {hours} hours per week through process improvements",
    ],
}

FEATURES = ["user dashboard", "reporting module", "integration layer", "mobile app"]
SYSTEMS = ["legacy database", "authentication service", "payment system", "API gateway"]
PROJECTS = ["Q2 initiative", "customer portal", "data pipeline", "platform refresh"]
