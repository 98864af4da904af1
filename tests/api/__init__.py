"""API tests: request parsing, status codes, headers and problem bodies."""
