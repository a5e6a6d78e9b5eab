"""
Patient Directory Client.

Thin httpx client for the ``/api/patients`` endpoint. Error bodies are
turned into PatientApiError and successful bodies are checked for the
``{data, meta}`` envelope before being returned. ``page_window`` turns
the returned meta into the page numbers of a pagination control.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from patient_directory.pipeline.pagination import visible_page_numbers

logger = logging.getLogger(__name__)

REQUIRED_META_FIELDS = ("total", "page", "limit", "totalPages")
REQUIRED_PATIENT_FIELDS = {
    "patient_id": int,
    "patient_name": str,
    "age": int,
    "medical_issue": str,
}

ParamValue = Union[str, int, bool, None]


class PatientApiError(Exception):
    """Raised when the API call fails or returns an unexpected body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def build_query_params(params: Mapping[str, ParamValue]) -> Dict[str, str]:
    """Drop unset and empty values and stringify the rest."""
    return {
        key: str(value).lower() if isinstance(value, bool) else str(value)
        for key, value in params.items()
        if value is not None and value != ""
    }


def is_valid_patient(patient: Any) -> bool:
    if not isinstance(patient, dict):
        return False
    return all(
        isinstance(patient.get(name), kind) and not isinstance(patient.get(name), bool)
        for name, kind in REQUIRED_PATIENT_FIELDS.items()
    )


def validate_response(body: Any) -> Dict[str, Any]:
    """
    Check the ``{data, meta}`` envelope.

    Raises:
        PatientApiError: Naming the first missing or malformed part
    """
    if not isinstance(body, dict) or not isinstance(body.get("data"), list):
        raise PatientApiError("Invalid response format: missing or invalid data array")

    meta = body.get("meta")
    if not isinstance(meta, dict):
        raise PatientApiError("Invalid response format: missing or invalid meta object")

    for name in REQUIRED_META_FIELDS:
        value = meta.get(name)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise PatientApiError(f"Invalid response format: missing or invalid meta.{name}")

    for index, patient in enumerate(body["data"]):
        if not is_valid_patient(patient):
            raise PatientApiError(f"Invalid response format: invalid patient at data[{index}]")

    return body


def page_window(meta: Mapping[str, Any], max_visible: int = 7) -> List[int]:
    """
    Page numbers a pagination control should render for a response's meta.

    ``-1`` and ``-2`` stand for the elided runs before and after the
    current page (see ``visible_page_numbers``).
    """
    return visible_page_numbers(meta["page"], meta["totalPages"], max_visible)


class PatientDirectoryClient:
    """Client for the patient listing API."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: API root
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. MockTransport in tests)
        """
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "PatientDirectoryClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_patients(self, **params: ParamValue) -> Dict[str, Any]:
        """
        Fetch one page of patients.

        Args:
            **params: Query parameters (search, ageMin, ageMax, medical_issue,
                sortBy, sortOrder, page, limit); None and "" are skipped

        Returns:
            Decoded ``{data, meta}`` body

        Raises:
            PatientApiError: On network failure, error status or bad body
        """
        try:
            response = self._client.get(
                "/api/patients",
                params=build_query_params(params),
                headers={"Accept": "application/json"},
            )
        except httpx.TransportError as e:
            logger.warning(f"Patient API unreachable: {e}")
            raise PatientApiError(
                "Network error: Unable to connect to the server. "
                "Please check your connection."
            ) from e

        if response.is_error:
            raise PatientApiError(self._error_message(response), response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise PatientApiError("Invalid response format: body is not JSON") from e

        return validate_response(body)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        message = f"HTTP {response.status_code}: {response.reason_phrase}"
        try:
            body = response.json()
        except ValueError:
            return message
        if isinstance(body, dict):
            if body.get("error"):
                message = str(body["error"])
            if body.get("message"):
                message += f" - {body['message']}"
        return message
