"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that all components work together correctly.
They use the InMemoryPatientProvider (or a temporary JSON file) so
no external data is needed.

Test Files:
    - test_query_pipeline.py: Full query workflow and its properties
    - test_api.py: HTTP API through FastAPI's TestClient
"""
