"""Builders for patients, queries and raw dataset records used across tests."""

from __future__ import annotations

from typing import Any, Dict, List

from patient_directory.domain.entities import ContactInfo, Patient, PatientQuery


def make_patient(
    patient_id: int,
    name: str = "Test Patient",
    age: int = 40,
    medical_issue: str = "fever",
    with_contact: bool = True,
) -> Patient:
    """Helper to create patients."""
    contact = (
        (ContactInfo(address="1 Main St", number="555-0100", email=f"p{patient_id}@example.com"),)
        if with_contact
        else ()
    )
    return Patient(
        id=patient_id,
        name=name,
        age=age,
        medical_issue=medical_issue,
        contact=contact,
    )


def make_query(**kwargs: Any) -> PatientQuery:
    """Helper to create queries."""
    return PatientQuery(**kwargs)


def make_records(count: int) -> List[Dict[str, Any]]:
    """Raw dataset records in the bundled JSON shape."""
    issues = ["fever", "rash", "headache", "back_pain", "sinusitis"]
    return [
        {
            "patient_id": i,
            "patient_name": f"Patient {i:03d}",
            "age": 20 + (i * 7) % 30,
            "medical_issue": issues[i % len(issues)],
            "photo_url": None,
            "contact": [
                {"address": None, "number": f"555-{i:04d}", "email": f"p{i}@example.com"}
            ],
        }
        for i in range(1, count + 1)
    ]


def ids(patients: List[Patient]) -> List[int]:
    return [p.id for p in patients]


def ages(patients: List[Patient]) -> List[int]:
    return [p.age for p in patients]
