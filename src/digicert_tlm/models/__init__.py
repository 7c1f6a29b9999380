"""Re-export typed models for the digicert_tlm SDK."""

from __future__ import annotations

from .business_units import (
    BusinessUnit,
    BusinessUnitAdmin,
    BusinessUnitAdminRequest,
    BusinessUnitListOptions,
    BusinessUnitListResponse,
    BusinessUnitRequest,
    LicensedSeats,
    SeatTypeAllocation,
)
from .certificate_owners import (
    CertificateOwner,
    CertificateOwnerListOptions,
    CertificateOwnerListResponse,
    CertificateOwnerRequest,
    OwnerAssignment,
)
from .certificates import (
    ICA,
    Account,
    AdditionalFormatsResponse,
    CAAttributesWrapper,
    Certificate,
    CertificateRequest,
    CertificateResponse,
    CertificateSearchOptions,
    CertificateSearchResponse,
    RenewRequest,
    RevokeRequest,
    Seat,
    SeatType,
    Subject,
)
from .common import (
    ApiModel,
    CertificateAttributes,
    CustomAttribute,
    DeliveryFormat,
    ListResponse,
    PaginationParams,
    ProfileReference,
    SeatReference,
    SubjectAltNames,
    Validity,
)
from .enrollments import (
    Enrollment,
    EnrollmentAttributes,
    EnrollmentDetailsOptions,
    EnrollmentDetailsResponse,
    EnrollmentRequest,
    EnrollmentResponse,
    EnrollmentStatusResponse,
    ManualEnrollmentRequest,
    RedeemEnrollmentRequest,
)
from .profiles import (
    CustomFieldDef,
    DNField,
    Extension,
    Profile,
    ProfileListOptions,
    ProfileListResponse,
    ProfileTemplate,
    ProfileTemplateListResponse,
    ProfileValidity,
    SANField,
)

__all__ = [
    "Account",
    "AdditionalFormatsResponse",
    "ApiModel",
    "BusinessUnit",
    "BusinessUnitAdmin",
    "BusinessUnitAdminRequest",
    "BusinessUnitListOptions",
    "BusinessUnitListResponse",
    "BusinessUnitRequest",
    "CAAttributesWrapper",
    "Certificate",
    "CertificateAttributes",
    "CertificateOwner",
    "CertificateOwnerListOptions",
    "CertificateOwnerListResponse",
    "CertificateOwnerRequest",
    "CertificateRequest",
    "CertificateResponse",
    "CertificateSearchOptions",
    "CertificateSearchResponse",
    "CustomAttribute",
    "CustomFieldDef",
    "DNField",
    "DeliveryFormat",
    "Enrollment",
    "EnrollmentAttributes",
    "EnrollmentDetailsOptions",
    "EnrollmentDetailsResponse",
    "EnrollmentRequest",
    "EnrollmentResponse",
    "EnrollmentStatusResponse",
    "Extension",
    "ICA",
    "LicensedSeats",
    "ListResponse",
    "ManualEnrollmentRequest",
    "OwnerAssignment",
    "PaginationParams",
    "Profile",
    "ProfileListOptions",
    "ProfileListResponse",
    "ProfileReference",
    "ProfileTemplate",
    "ProfileTemplateListResponse",
    "ProfileValidity",
    "RedeemEnrollmentRequest",
    "RenewRequest",
    "RevokeRequest",
    "SANField",
    "Seat",
    "SeatReference",
    "SeatType",
    "SeatTypeAllocation",
    "Subject",
    "SubjectAltNames",
    "Validity",
]
