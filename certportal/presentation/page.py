"""
Certificates page loader.

Dependencies: certportal.presentation
System role: Fetch-then-render entry point; a retry is simply another call
"""

from certportal.presentation.client import CertificatesApiClient
from certportal.presentation.view import View, render


async def load_certificates_view(identifier: str, client: CertificatesApiClient) -> View:
    """Fetch the documents of a company and render the page state."""
    result = await client.fetch_documents(identifier)
    return render(result, identifier=identifier)
