"""
Validation utilities and validators.
Centralized validation logic following single responsibility principle.
"""
from decimal import Decimal, InvalidOperation
from core.constants import MONTHS
from core.exceptions import ValidationError as AppValidationError


class PeriodValidator:
    """Validates billing periods (month name + year)"""

    @staticmethod
    def validate_month(month) -> str:
        """Validate an English month name, returning it in canonical form"""
        if not month or not isinstance(month, str):
            raise AppValidationError(
                message="Month is required",
                code="INVALID_MONTH",
                details={"month": "This field is required."}
            )
        canonical = month.strip().capitalize()
        if canonical not in MONTHS:
            raise AppValidationError(
                message=f"Invalid month name: {month}",
                code="INVALID_MONTH",
                details={"month": f"Must be one of {', '.join(MONTHS)}."}
            )
        return canonical

    @staticmethod
    def validate_year(year) -> int:
        """Validate a four-digit year"""
        try:
            value = int(year)
        except (TypeError, ValueError):
            raise AppValidationError(
                message="Year must be a number",
                code="INVALID_YEAR",
                details={"year": "A valid integer is required."}
            )
        if value < 2000 or value > 9999:
            raise AppValidationError(
                message=f"Year out of range: {value}",
                code="INVALID_YEAR",
                details={"year": "Must be between 2000 and 9999."}
            )
        return value

    @classmethod
    def validate_period(cls, month, year):
        return cls.validate_month(month), cls.validate_year(year)


class AmountValidator:
    """Validates money amounts"""

    @staticmethod
    def validate_positive_amount(amount, field_name: str = "amount") -> Decimal:
        """Validate and convert a strictly positive amount"""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, TypeError, ValueError):
            raise AppValidationError(
                message=f"{field_name} must be a number",
                code="INVALID_AMOUNT",
                details={field_name: "A valid number is required."}
            )
        if not value.is_finite() or value <= 0:
            raise AppValidationError(
                message=f"{field_name} must be greater than zero",
                code="INVALID_AMOUNT",
                details={field_name: "Must be greater than zero."}
            )
        if value > Decimal('9999999.99'):
            raise AppValidationError(
                message=f"{field_name} exceeds maximum allowed",
                code="AMOUNT_TOO_LARGE",
                details={field_name: "Must not exceed 9999999.99."}
            )
        return value


class RequiredFieldsValidator:
    """Validates presence of required fields"""

    @staticmethod
    def validate(data: dict, fields):
        missing = {name: "This field is required." for name in fields if not data.get(name)}
        if missing:
            raise AppValidationError(
                message=f"Missing required fields: {', '.join(missing)}",
                code="MISSING_FIELDS",
                details=missing
            )
