"""
New Zealand specific field validators.
"""
import re

from django.core.exceptions import ValidationError

# Standard: 2-3 letters + 1-4 digits. Personalised: 2-6 letters/digits.
_PLATE_STANDARD = re.compile(r"^[A-Z]{2,3}[0-9]{1,4}$")
_PLATE_PERSONALISED = re.compile(r"^[A-Z0-9]{2,6}$")

# 2 letters + 6 digits, e.g. AA123456
_LICENSE = re.compile(r"^[A-Z]{2}[0-9]{6}$")

# +64 or 0, then area/mobile prefix 2-9 and 7-9 more digits
_PHONE = re.compile(r"^(\+64|0)[2-9][0-9]{7,9}$")


def is_nz_plate(value: str) -> bool:
    plate = (value or "").strip().upper()
    return bool(_PLATE_STANDARD.match(plate) or _PLATE_PERSONALISED.match(plate))


def is_nz_license(value: str) -> bool:
    return bool(_LICENSE.match((value or "").strip().upper()))


def is_nz_phone(value: str) -> bool:
    compact = re.sub(r"[\s-]", "", value or "")
    return bool(_PHONE.match(compact))


def validate_nz_plate(value):
    if not is_nz_plate(value):
        raise ValidationError("Invalid NZ registration plate format")


def validate_nz_license(value):
    if not is_nz_license(value):
        raise ValidationError(
            "Invalid NZ driver license format (should be 2 letters + 6 digits, e.g., AA123456)"
        )


def validate_nz_phone(value):
    if not is_nz_phone(value):
        raise ValidationError("Invalid NZ phone number format")
