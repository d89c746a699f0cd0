"""Request payload models for YouVerify identity verification endpoints."""
import uuid
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .core.exceptions import ValidationError


def generate_request_id() -> str:
    """Generate a unique request ID for BVN lookups (random UUID4, hex form)."""
    return uuid.uuid4().hex


class VerificationPayload(BaseModel):
    """Base payload: serialized with camelCase keys in declaration order."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Identifier being verified")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class NINPayload(VerificationPayload):
    """National Identification Number lookup.

    Attributes:
        id: The NIN to verify
        premium_nin: Request the premium NIN record
        is_subject_consent: The subject consented to the lookup
    """

    premium_nin: bool = Field(default=True, alias="premiumNin")
    is_subject_consent: bool = Field(default=True, alias="isSubjectConsent")


class VNINPayload(VerificationPayload):
    """Virtual NIN lookup."""

    is_subject_consent: bool = Field(default=True, alias="isSubjectConsent")


class BVNMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    request_id: str = Field(default_factory=generate_request_id, alias="requestId")


class BVNPayload(VerificationPayload):
    """Bank Verification Number lookup.

    A fresh metadata.requestId is generated for every payload built.
    """

    metadata: BVNMetadata = Field(default_factory=BVNMetadata)
    is_subject_consent: bool = Field(default=True, alias="isSubjectConsent")
    premium_bvn: bool = Field(default=True, alias="premiumBVN")


def resolve_payload(
    label: str,
    identifier: str | int | None,
    override: Mapping[str, Any] | None,
    model: type[VerificationPayload],
) -> Mapping[str, Any]:
    """Pick the payload to send: the caller's override or a default one.

    A non-empty override is returned unchanged and the identifier is ignored.
    The two are never merged.

    Args:
        label: Identifier name used in the error message (e.g. "NIN")
        identifier: Identifier to build the default payload from; non-string
            values (e.g. a BVN passed as int) are converted with str()
        override: Complete payload supplied by the caller
        model: Payload model built from the identifier when no override is given

    Returns:
        The JSON-serializable payload to send

    Raises:
        ValidationError: If neither an identifier nor an override is given
    """
    if override:
        return override

    if not identifier:
        raise ValidationError(f"{label} is required")

    return model(id=str(identifier)).to_payload()
