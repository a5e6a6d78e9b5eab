"""
API Package - HTTP Surface.

    - create_app: FastAPI application factory
    - create_pipeline: Pipeline wiring from configuration
"""

from patient_directory.api.app import create_app, create_pipeline

__all__ = ["create_app", "create_pipeline"]
