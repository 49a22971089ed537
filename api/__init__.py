"""
HTTP API for the signature lock (FastAPI)

- POST /verify - Verify a witness signature against a fingerprint
- POST /hash - Domain-separated digest of bytes
- POST /fingerprint - Fingerprint of a public key
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
