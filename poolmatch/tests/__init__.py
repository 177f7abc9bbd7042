"""
Tests Package

Test suite for the pooling service.

Modules:
- test_algorithms: Geometry, pair scoring, pool builder, carrier fitness, matcher
- test_tools: Options resolution, timestamp and coordinate parsing
- test_api: FastAPI endpoints

Run all tests:
    pytest poolmatch/tests/

Run specific test file:
    pytest poolmatch/tests/test_algorithms.py -v
"""
