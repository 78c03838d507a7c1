"""
API server package: HTTP/REST interface.

Exposes the analysis engine to clients over POST /api/analyze and a
GET /health check. Delegates all scoring to the analysis engine.
"""
