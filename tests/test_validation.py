import pytest

from src.models.errors import InvalidInput
from src.models.user import User
from src.models.validation import collect_errors, validate_user

def make_user(name="John", sur_name="Doe", email="john.doe@example.com"):
    return User(name=name, sur_name=sur_name, email=email)

# Valid users pass through unchanged
def test_accepts_valid_user(john):
    assert validate_user(john) is john
    assert collect_errors(john) == []

def test_rejects_invalid_email_format():
    with pytest.raises(InvalidInput) as exc_info:
        validate_user(make_user(email="invalid-email"))
    assert exc_info.value.errors == ["Invalid email format: 'invalid-email'"]

def test_rejects_empty_name():
    with pytest.raises(InvalidInput) as exc_info:
        validate_user(make_user(name=""))
    assert "Name is required" in exc_info.value.message

def test_rejects_empty_surname():
    with pytest.raises(InvalidInput) as exc_info:
        validate_user(make_user(sur_name=""))
    assert "Surname is required" in exc_info.value.message

def test_whitespace_only_fields_are_required():
    errors = collect_errors(make_user(name="   ", sur_name="\t", email="  "))
    assert errors == ["Name is required", "Surname is required", "Email is required"]

@pytest.mark.parametrize("name", ["J", " J ", "J  "])
def test_name_length_is_measured_after_trimming(name):
    assert collect_errors(make_user(name=name)) == ["Name must be at least 2 characters"]

def test_surname_too_short():
    assert collect_errors(make_user(sur_name="D")) == ["Surname must be at least 2 characters"]

@pytest.mark.parametrize("email", [
    "john@example",
    "john.example.com",
    "john@example.c",
    "john doe@example.com",
    "john@example.com\n",
])
def test_rejects_malformed_emails(email):
    assert collect_errors(make_user(email=email)) == [f"Invalid email format: '{email}'"]

@pytest.mark.parametrize("email", [
    "a.b-c_d%e+f@sub.example.co",
    "JOHN@EXAMPLE.ORG",
    "x1@y2.io",
])
def test_accepts_well_formed_emails(email):
    assert collect_errors(make_user(email=email)) == []

# Every rule runs, so all problems are reported together and in field order
def test_accumulates_all_errors_in_order():
    with pytest.raises(InvalidInput) as exc_info:
        validate_user(make_user(name="", sur_name="D", email="nope"))

    error = exc_info.value
    assert error.errors == [
        "Name is required",
        "Surname must be at least 2 characters",
        "Invalid email format: 'nope'",
    ]
    assert error.message == (
        "Invalid input: Name is required, "
        "Surname must be at least 2 characters, "
        "Invalid email format: 'nope'"
    )
