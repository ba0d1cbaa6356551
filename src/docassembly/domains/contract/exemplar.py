"""Reference contract record, as produced upstream for ``law/draft-contract``."""

from __future__ import annotations

from typing import Any

EXEMPLAR: dict[str, Any] = {
    "title": "SaaS Service Agreement — CloudTech Inc. / Meridian Corp",
    "contractType": "Service Agreement",
    "parties": [
        {"name": "CloudTech Inc.", "role": "Service Provider", "email": "legal@cloudtech.example"},
        {"name": "Meridian Corporation", "role": "Client"},
    ],
    "effectiveDate": "2026-03-01",
    "terminationDate": "2027-02-28",
    "jurisdiction": "State of Delaware",
    "clauses": [
        {
            "title": "1. Services",
            "text": "Provider will deliver the hosted platform described in Schedule A.",
            "subclauses": [
                "1.1 Availability of 99.9% measured monthly.",
                {"text": "1.2 Support during business hours."},
            ],
        },
        "Either party may terminate with 90 days written notice.",
    ],
    "keyTerms": [
        {
            "clause": "Service Level Agreement",
            "summary": "99.9% uptime guarantee with credits for downtime",
            "concern": "Credit calculation methodology is vague",
        },
    ],
    "riskAreas": [
        {
            "risk": "Limitation of liability caps at 12 months of fees",
            "severity": "high",
            "recommendation": "Negotiate higher cap for data-related incidents",
        },
    ],
    "compensation": {"monthlyFee": "$4,500", "billingCycle": "monthly"},
    "confidentiality": "Both parties keep non-public information confidential for 3 years.",
}
