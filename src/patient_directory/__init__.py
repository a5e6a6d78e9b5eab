"""
Patient Directory - Read-Only Patient Listing Service.

Lists, filters, sorts and paginates a fixed collection of patient records
for display in a browser UI. Every request runs the same pipeline over an
immutable snapshot of the dataset, so results are deterministic and no
state is shared between requests.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - One filter stage per query dimension
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (Patient, PatientQuery, PatientPage)
    - filters: Search, age range and medical issue filter stages
    - pipeline: Sorting, pagination and orchestration
    - validation: Request parameter parsing and dataset checks
    - adapters: Data providers, audit loggers, metrics
    - api: FastAPI application
    - client: HTTP client for the API

Example:
    >>> from patient_directory.api import create_app
    >>> app = create_app()
    >>> # GET /api/patients?search=ada&sortBy=age&sortOrder=desc

"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Patient Directory.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import patient_directory
        >>> patient_directory.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("patient_directory").setLevel(level)
