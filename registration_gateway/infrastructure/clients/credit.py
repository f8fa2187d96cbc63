"""Credit limit service HTTP client"""

import httpx
from datetime import date
from registration_gateway.domain.exceptions import CreditServiceError
from registration_gateway.domain.interfaces import CreditLimitService
from registration_gateway.config import settings


class CreditServiceClient(CreditLimitService):
    """Client for the external user credit service"""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.credit_service_base
        self.timeout = timeout or settings.http_timeout_seconds

    def get_credit_limit(self, firstname: str, surname: str, date_of_birth: date) -> int:
        """
        Fetch the credit limit the service assigns to an applicant.

        Raises:
            CreditServiceError: On timeout, HTTP errors, or invalid response
        """
        with httpx.Client(timeout=self.timeout) as client:
            try:
                response = client.get(
                    f"{self.base_url}/credit/limit",
                    params={
                        "firstname": firstname,
                        "surname": surname,
                        "date_of_birth": date_of_birth.isoformat(),
                    },
                )
                response.raise_for_status()
                data = response.json()
                limit = data["credit_limit"]
                if not isinstance(limit, int) or isinstance(limit, bool):
                    raise CreditServiceError(f"Invalid credit limit data: {limit!r}")
                return limit

            except httpx.TimeoutException as e:
                raise CreditServiceError(f"Credit service timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise CreditServiceError(f"Credit service error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise CreditServiceError(f"Credit service unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise CreditServiceError(f"Invalid credit limit data: {e}") from e
