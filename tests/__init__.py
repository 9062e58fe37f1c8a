"""
Test suite for the brainstorm sample.

- Unit tests: domain behavior and filters, no HTTP stack beyond a throwaway app
- Integration tests: one freshly built app and in-process client per test
"""
