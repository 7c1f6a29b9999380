from .business_units import BusinessUnitsClient as BusinessUnitsClient
from .certificate_owners import CertificateOwnersClient as CertificateOwnersClient
from .certificates import CertificatesClient as CertificatesClient
from .enrollments import EnrollmentsClient as EnrollmentsClient
from .profiles import ProfilesClient as ProfilesClient

__all__ = [
    "BusinessUnitsClient",
    "CertificateOwnersClient",
    "CertificatesClient",
    "EnrollmentsClient",
    "ProfilesClient",
]
