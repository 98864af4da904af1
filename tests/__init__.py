"""Resource catalog test suite.

- unit/: domain, application and adapter logic in isolation (mocks)
- integration/: repository and service against in-memory SQLite
- api/: HTTP contract through TestClient with a mocked ResourceService
"""
