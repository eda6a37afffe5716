"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation; remote sources are replaced with
``httpx.MockTransport``. Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_event_bus.py: Priority ordering and chain folding
    - test_data_pipeline.py: Step registration and sequential execution
    - test_filter_conditions.py: Operators and condition variants
    - test_coercion.py: Value coercion and date helpers
    - test_*_module.py: Processing modules
"""
