"""Document metadata transformer.

Rewrites the descriptive info block of the generated document and drops the
declared servers so clients fall back to the origin serving the document.
"""

from fastapi.openapi.models import Contact, License, OpenAPI

from localized_api.core.config import Settings
from localized_api.openapi.base import DocumentTransformer, TransformerContext


class DocumentMetadataTransformer(DocumentTransformer):
    """Sets title, contact and license, and clears the server list."""

    def __init__(
        self,
        title: str = "My new API",
        contact_name: str = "Support",
        contact_email: str = "support@email.com",
        license_name: str = "MIT",
        license_url: str = "https://opensource.org/licenses/MIT",
    ) -> None:
        self.title = title
        self.contact_name = contact_name
        self.contact_email = contact_email
        self.license_name = license_name
        self.license_url = license_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentMetadataTransformer":
        return cls(
            title=settings.API_TITLE,
            contact_name=settings.CONTACT_NAME,
            contact_email=settings.CONTACT_EMAIL,
            license_name=settings.LICENSE_NAME,
            license_url=settings.LICENSE_URL,
        )

    def transform(self, document: OpenAPI, context: TransformerContext) -> None:
        document.info.title = self.title
        document.info.contact = Contact.model_validate(
            {"name": self.contact_name, "email": self.contact_email}
        )
        document.info.license = License.model_validate(
            {"name": self.license_name, "url": self.license_url}
        )
        document.servers = []
