"""Shared fixtures for profiling engine tests."""

import pytest


@pytest.fixture
def price_rows():
    """100 prices between 10 and 20 plus one extreme value."""
    rows = [{"price": 10 + (i % 11)} for i in range(99)]
    rows.append({"price": 10000})
    return rows


@pytest.fixture
def rows_with_empty_column():
    """Three columns, the last one made entirely of empty strings."""
    return [
        {"id": i, "segment": "A" if i % 2 else "B", "notes": ""}
        for i in range(30)
    ]


@pytest.fixture
def negated_rows():
    return [{"x": float(i), "y": -float(i)} for i in range(1, 11)]


@pytest.fixture
def dated_rows():
    """Five strictly increasing dates paired with strictly increasing sales."""
    return [
        {"date": f"2024-01-0{day}", "sales": 10 * day}
        for day in range(1, 6)
    ]


@pytest.fixture
def mixed_rows():
    """A small table exercising every column type."""
    regions = ["north", "south", "east", "west"]
    return [
        {
            "order_id": f"customer note number {i}",
            "region": regions[i % 4],
            "amount": 100 + i * 3,
            "discount": (i % 5) * 1.5,
            "ordered_at": f"2023-03-{(i % 28) + 1:02d}",
        }
        for i in range(60)
    ]
