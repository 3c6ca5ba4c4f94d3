import pytest


@pytest.fixture
def sample_rows():
    return [
        {"type": "Expense", "service": "2F-5 Noodle Bar", "amount": "-25.00", "dateTime": "2024-03-14 12:05:00"},
        {"type": "Expense", "service": "2F-5 Noodle Bar", "amount": "-30.00", "dateTime": "2024-03-15 12:30:00"},
        {"type": "WeChat Top Up", "service": "Balance", "amount": "100", "dateTime": "2024-03-10 09:00:00"},
    ]


def dining_row(service="2F-5 Noodle Bar", amount="-10", when="2024-03-14 12:00:00"):
    return {"type": "Expense", "service": service, "amount": amount, "dateTime": when}
