"""
Test the example host enums.

Validates the concrete PENDING / IN_PROGRESS / COMPLETED scenarios for each
shape, plus the description-providing Priority enum.
"""

from enumfriendly.examples import Priority, StatusInt, StatusStr, StatusUnbacked


def test_string_backed_scenario():
    assert StatusStr.values() == ["pending", "in_progress", "completed"]
    assert StatusStr.comment() == "possible values: pending, in_progress, completed"
    assert StatusStr.coerce_enum("completed") is StatusStr.COMPLETED
    assert StatusStr.coerce_enum("done") is None


def test_integer_backed_scenario():
    assert StatusInt.only_values(["1"], strict=True) == []
    assert StatusInt.only_values(["1"], strict=False) == [1]


def test_unbacked_scenario():
    assert StatusUnbacked.values() == ["PENDING", "IN_PROGRESS", "COMPLETED"]
    assert StatusUnbacked.to_options() == [
        {"value": "PENDING", "label": "Pending", "name": "Pending"},
        {"value": "IN_PROGRESS", "label": "In Progress", "name": "In Progress"},
        {"value": "COMPLETED", "label": "Completed", "name": "Completed"},
    ]


def test_priority_labels_and_descriptions():
    assert Priority.readable() == ["Low", "Normal", "High Priority"]
    assert Priority.to_readable_dict() == {"low": "Low", "normal": "Normal", "high": "High Priority"}
    assert Priority.HIGH_PRIORITY.description() == "Handled before anything else"
