"""Compound records built from validated primitives."""

from __future__ import annotations

from pydantic import BaseModel

from ordertaking.domain.simple_types import EmailAddress, String50, ZipCode


class PersonalName(BaseModel):
    model_config = {"frozen": True}

    first_name: String50
    last_name: String50


class CustomerInfo(BaseModel):
    model_config = {"frozen": True}

    name: PersonalName
    email_address: EmailAddress


class Address(BaseModel):
    """Postal address. Lines 2-4 are optional."""

    model_config = {"frozen": True}

    address_line1: String50
    address_line2: String50 | None = None
    address_line3: String50 | None = None
    address_line4: String50 | None = None
    city: String50
    zip_code: ZipCode
