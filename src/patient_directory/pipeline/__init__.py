"""
Pipeline Package - Sorting, Pagination and Orchestration.

Components:
    - sorting: Stable sort stage (sort_patients)
    - pagination: Page slicing and metadata (paginate, visible_page_numbers)
    - query_pipeline: PatientQueryPipeline coordinating all stages

The pipeline is responsible for:
    - Validating listing requests
    - Loading the patient snapshot
    - Executing filter stages in sequence
    - Sorting and paginating the result
    - Collecting metrics and audit trail

Design Principles:
    - All dependencies injected via constructor
    - Stages are pure: each returns a new list
    - No state retained between requests
"""
