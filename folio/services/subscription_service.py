import logging
from typing import Optional

import httpx

from folio.errors import (
    ConfigurationError,
    UnexpectedError,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MAILCHIMP_MEMBERS_URL = "https://{data_center}.api.mailchimp.com/3.0/lists/{audience_id}/members"
DEFAULT_ERROR_MESSAGE = (
    "There was an error subscribing to the newsletter. "
    "DM me on Twitter and I'll add you to the list."
)


class SubscriptionService:
    """Adds an email address to the Mailchimp audience."""

    def __init__(
        self,
        audience_id: str,
        api_key: str,
        client: Optional[httpx.Client] = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
        timeout: float = 10.0,
    ):
        self.audience_id = audience_id
        self.api_key = api_key
        self.client = client
        self.error_message = error_message
        self.timeout = timeout

    def subscribe(self, email: Optional[str]) -> None:
        if not email or not email.strip():
            raise ValidationError("Email is required")

        url = self.members_url()
        payload = {
            "email_address": email.strip(),
            # 'subscribed' skips Mailchimp's double opt-in
            "status": "subscribed",
        }
        headers = {"Authorization": f"apikey {self.api_key}"}

        try:
            response = self._post(url, payload, headers)
        except httpx.RequestError as e:
            logger.error(f"Mailchimp request failed: {e}")
            raise UnexpectedError("Failed to reach the mailing list service") from e

        if response.status_code >= 400:
            logger.warning(
                f"Mailchimp rejected subscription ({response.status_code}): {response.text}"
            )
            raise UpstreamError(self.error_message, status_code=response.status_code)

        logger.info("New newsletter subscription recorded")

    def members_url(self) -> str:
        if not self.audience_id or not self.api_key:
            raise ConfigurationError(
                "MAILCHIMP_AUDIENCE_ID and MAILCHIMP_API_KEY must both be set"
            )
        # API keys look like <key>-us3; the suffix is the data center
        _key, sep, data_center = self.api_key.rpartition("-")
        if not sep or not data_center:
            raise ConfigurationError("MAILCHIMP_API_KEY has no data center suffix")
        return MAILCHIMP_MEMBERS_URL.format(
            data_center=data_center, audience_id=self.audience_id
        )

    def _post(self, url: str, payload: dict, headers: dict) -> httpx.Response:
        if self.client is not None:
            return self.client.post(url, json=payload, headers=headers)
        return httpx.post(url, json=payload, headers=headers, timeout=self.timeout)
