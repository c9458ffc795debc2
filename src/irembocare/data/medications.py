"""药品与急救指南（演示数据）."""

from typing import Any

# 每种疾病的常用药品；type: brand|generic，effectiveness: 0-1
MEDICATIONS_BY_DISEASE: dict[str, list[dict[str, Any]]] = {
    "malaria": [
        {
            "openfda": {
                "brand_name": ["Coartem"],
                "generic_name": ["Artemether/Lumefantrine"],
            },
            "dosage": "Adult: 4 tablets twice daily for 3 days",
            "type": "brand",
            "effectiveness": 0.95,
        },
        {
            "openfda": {"brand_name": ["Artemether"], "generic_name": ["Artemether"]},
            "dosage": "As prescribed by healthcare provider",
            "type": "generic",
            "effectiveness": 0.85,
        },
    ],
    "fever": [
        {
            "openfda": {"brand_name": ["Panadol"], "generic_name": ["Paracetamol"]},
            "dosage": "Adult: 500mg-1g every 4-6 hours",
            "type": "brand",
            "effectiveness": 0.9,
        },
        {
            "openfda": {
                "brand_name": ["Aspirin"],
                "generic_name": ["Acetylsalicylic acid"],
            },
            "dosage": "Adult: 300-600mg every 4 hours",
            "type": "generic",
            "effectiveness": 0.8,
        },
    ],
    "headache": [
        {
            "openfda": {"brand_name": ["Panadol"], "generic_name": ["Paracetamol"]},
            "dosage": "Adult: 500mg-1g every 4-6 hours",
            "type": "brand",
            "effectiveness": 0.85,
        },
        {
            "openfda": {"brand_name": ["Ibuprofen"], "generic_name": ["Ibuprofen"]},
            "dosage": "Adult: 200-400mg every 4-6 hours",
            "type": "generic",
            "effectiveness": 0.88,
        },
    ],
}

MEDICATION_DISCLAIMER = (
    "This is demo data. Always consult a healthcare professional "
    "for proper medication advice."
)

FIRST_AID_TIPS: list[dict[str, Any]] = [
    {
        "condition": "Burns",
        "tip": "Cool the burn under running water for 10 minutes.",
        "severity": "mild",
        "steps": [
            "Remove from heat source",
            "Cool with water",
            "Cover with clean cloth",
            "Seek medical help if severe",
        ],
    },
    {
        "condition": "Bleeding",
        "tip": "Apply pressure to stop bleeding and use a clean cloth.",
        "severity": "moderate",
        "steps": [
            "Apply direct pressure",
            "Elevate if possible",
            "Use clean cloth",
            "Call emergency if severe",
        ],
    },
    {
        "condition": "Choking",
        "tip": "Perform back blows and abdominal thrusts.",
        "severity": "severe",
        "steps": [
            "Encourage coughing",
            "5 back blows",
            "5 abdominal thrusts",
            "Call emergency services",
        ],
    },
    {
        "condition": "Fracture",
        "tip": "Immobilize the area and seek immediate medical attention.",
        "severity": "severe",
        "steps": [
            "Don't move the person",
            "Immobilize the injury",
            "Apply ice if available",
            "Get emergency help",
        ],
    },
    {
        "condition": "Heart Attack",
        "tip": "Call emergency services immediately and give aspirin if available.",
        "severity": "critical",
        "steps": [
            "Call 911 immediately",
            "Give aspirin if conscious",
            "Help them sit comfortably",
            "Monitor breathing",
        ],
    },
]

FIRST_AID_DISCLAIMER = (
    "These are basic first-aid guidelines. "
    "Always seek professional medical help in emergencies."
)
