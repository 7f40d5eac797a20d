import pytest

from dtos.request.contact_request import ContactRequest
from services.contact_validator import ContactRequestValidator


@pytest.fixture
def validator():
    return ContactRequestValidator()


def _errors_for(result, field):
    return [e.message for e in result.errors if e.field == field]


@pytest.mark.asyncio
async def test_valid_request_has_no_errors(validator):
    result = await validator.validate(ContactRequest(name="John Doe", email="john.doe@example.com"))
    assert result.is_valid
    assert result.messages == []


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", None])
async def test_name_is_required(validator, name):
    result = await validator.validate(ContactRequest(name=name, email="john.doe@example.com"))
    assert not result.is_valid
    assert _errors_for(result, "name") == ["Name is required"]


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["", "   ", None])
async def test_email_is_required(validator, email):
    result = await validator.validate(ContactRequest(name="John Doe", email=email))
    assert _errors_for(result, "email") == ["Email is required"]


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["not-an-email", "invalid@", "@invalid.com", "invalid.com"])
async def test_email_must_be_well_formed(validator, email):
    result = await validator.validate(ContactRequest(name="John Doe", email=email))
    assert _errors_for(result, "email") == ["Email must be a valid email address"]


@pytest.mark.asyncio
async def test_name_length_limit(validator):
    at_limit = await validator.validate(ContactRequest(name="a" * 100, email="john.doe@example.com"))
    too_long = await validator.validate(ContactRequest(name="a" * 101, email="john.doe@example.com"))
    assert at_limit.is_valid
    assert _errors_for(too_long, "name") == ["Name cannot exceed 100 characters"]


@pytest.mark.asyncio
async def test_email_length_limit(validator):
    at_limit = f"{'a' * 308}@example.com"
    too_long = f"{'a' * 309}@example.com"
    assert len(at_limit) == 320
    assert len(too_long) == 321

    accepted = await validator.validate(ContactRequest(name="John Doe", email=at_limit))
    rejected = await validator.validate(ContactRequest(name="John Doe", email=too_long))

    assert accepted.is_valid
    assert _errors_for(rejected, "email") == ["Email cannot exceed 320 characters"]


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["john.doe@example.com\n", "\njohn.doe@example.com", "john.doe@example.com\nextra"])
async def test_email_with_line_break_is_rejected(validator, email):
    result = await validator.validate(ContactRequest(name="John Doe", email=email))
    assert _errors_for(result, "email") == ["Email must be a valid email address"]


@pytest.mark.asyncio
async def test_reports_every_invalid_field(validator):
    result = await validator.validate(ContactRequest(name="", email="not-an-email"))
    assert result.messages == ["Name is required", "Email must be a valid email address"]
