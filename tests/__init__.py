"""
Mundipagg Service Test Suite

This package contains all tests for the Mundipagg service including:
- Unit tests for address parsing, payload building, routing and classification
- Adapter tests against a mocked charges API
- HTTP service tests
"""
