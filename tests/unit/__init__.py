"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_search_filter.py / test_age_range_filter.py / test_medical_issue_filter.py
    - test_sorting.py / test_pagination.py: Sort and paginate stages
    - test_request_validator.py: Query parameter parsing
    - test_json_provider.py / test_data_validator.py: Dataset loading
    - test_config_loader.py: Configuration loading/validation
    - test_client.py: HTTP client
"""
