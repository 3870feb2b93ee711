"""
Shared fixtures for settlement tests.
"""
import pytest


@pytest.fixture
def participants():
    """Three trip participants."""
    return [
        {"id": "a", "name": "Alice"},
        {"id": "b", "name": "Bob"},
        {"id": "c", "name": "Carol"},
    ]


@pytest.fixture
def dinner_expense():
    """Alice pays 90 USD, split equally between the three."""
    return {
        "id": "e1",
        "amount": 90,
        "currency": "USD",
        "paidByParticipantId": "a",
        "shares": [
            {"participantId": "a", "amount": 30},
            {"participantId": "b", "amount": 30},
            {"participantId": "c", "amount": 30},
        ],
    }


@pytest.fixture
def bob_paid_alice():
    """Bob already paid Alice 30 USD."""
    return {
        "id": "p1",
        "fromParticipantId": "b",
        "toParticipantId": "a",
        "amount": 30,
        "currency": "USD",
    }


@pytest.fixture
def four_way_trip():
    """Four people, two USD expenses, balances a=+90 b=+10 c=-50 d=-50."""
    participants = [
        {"id": "a", "name": "Alice"},
        {"id": "b", "name": "Bob"},
        {"id": "c", "name": "Carol"},
        {"id": "d", "name": "Dave"},
    ]
    expenses = [
        {
            "id": "e1",
            "amount": 120,
            "currency": "USD",
            "paidByParticipantId": "a",
            "shares": [{"participantId": pid, "amount": 30} for pid in "abcd"],
        },
        {
            "id": "e2",
            "amount": 40,
            "currency": "USD",
            "paidByParticipantId": "b",
            "shares": [
                {"participantId": "c", "amount": 20},
                {"participantId": "d", "amount": 20},
            ],
        },
    ]
    return {"participants": participants, "expenses": expenses, "payments": []}


@pytest.fixture
def uneven_trip():
    """Five people, equal splits that do not divide evenly, three currencies."""
    participants = [{"id": pid, "name": pid.upper()} for pid in "abcde"]
    expenses = [
        {
            "id": "e1", "amount": 100, "currency": "USD", "paidByParticipantId": "a",
            "shares": [{"participantId": pid, "amount": "33.3333333333"} for pid in "abc"],
        },
        {
            "id": "e2", "amount": "47.15", "currency": "USD", "paidByParticipantId": "d",
            "shares": [
                {"participantId": "a", "amount": "9.43"},
                {"participantId": "b", "amount": "9.43"},
                {"participantId": "c", "amount": "9.43"},
                {"participantId": "d", "amount": "9.43"},
                {"participantId": "e", "amount": "9.43"},
            ],
        },
        {
            "id": "e3", "amount": 15000, "currency": "CLP", "paidByParticipantId": "e",
            "shares": [
                {"participantId": "b", "amount": 5000},
                {"participantId": "c", "amount": 5000},
                {"participantId": "e", "amount": 5000},
            ],
        },
        {
            "id": "e4", "amount": 20, "currency": "USD", "paidByParticipantId": "c",
            "shares": [
                {"participantId": "c", "amount": 10},
                {"participantId": "e", "amount": 10},
            ],
        },
        {
            "id": "e5", "amount": 2400, "currency": "JPY", "paidByParticipantId": "b",
            "shares": [{"participantId": pid, "amount": 480} for pid in "abcde"],
        },
    ]
    payments = [
        {"id": "p1", "fromParticipantId": "e", "toParticipantId": "a", "amount": 5, "currency": "USD"},
        {"id": "p2", "fromParticipantId": "c", "toParticipantId": "e", "amount": 2000, "currency": "CLP"},
    ]
    return {"participants": participants, "expenses": expenses, "payments": payments}
