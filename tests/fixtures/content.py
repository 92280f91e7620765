"""
Sample narrative and mental model records for ModelSearch tests.

Records are plain dicts, shaped like the decoded JSON the application loads.
"""

NARRATIVES = [
    {
        "narrative_id": "NAR-001",
        "title": "Sunk Cost Fallacy in Product Roadmaps",
        "summary": "Teams keep funding features because of past investment rather than future value",
        "category": "Decision Science",
        "tags": ["bias", "investment", "roadmap"],
        "domain": ["product", "strategy"],
        "evidence_quality": "A",
    },
    {
        "narrative_id": "NAR-002",
        "title": "Anchoring in Salary Negotiation",
        "summary": "The first number mentioned shapes the final agreement",
        "category": "Decision Science",
        "tags": ["bias", "negotiation"],
        "domain": ["hiring"],
        "evidence_quality": "B",
    },
    {
        "narrative_id": "NAR-003",
        "title": "Feedback Loops in Platform Growth",
        "summary": "Growth compounds when usage improves the product for every user",
        "category": "Systems Thinking",
        "tags": ["feedback", "growth"],
        "domain": ["product"],
        "evidence_quality": "A",
    },
]

MENTAL_MODELS = [
    {
        "code": "P1",
        "name": "First Principles Framing",
        "definition": "Break problems into fundamental truths and reason up from them",
        "transformation": "P",
        "tags": ["reasoning", "fundamentals"],
        "complexity": "low",
    },
    {
        "code": "P2",
        "name": "Stakeholder Mapping",
        "definition": "Identify everyone affected by a decision and what they need",
        "transformation": "P",
        "tags": ["reasoning", "stakeholders"],
        "complexity": "medium",
    },
    {
        "code": "IN1",
        "name": "Inversion",
        "definition": "Solve a problem by considering how to cause the opposite outcome",
        "transformation": "IN",
        "tags": ["reasoning"],
        "complexity": "low",
    },
]
