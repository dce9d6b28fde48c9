"""Core constants: backend route paths and shared literal values.

Single source of truth for the backend HTTP contract (paths only; bodies
live in pof_client.schemas).
"""

# Lending bank: commitment creation
PATH_COMMITMENT = "/lb/commitment"
# Borrowing bank: synchronous proof generation
PATH_PROOF_SYNC = "/bb/proof"
# Background proof jobs (submit, then GET /proofs/async/{job_id})
PATH_PROOF_JOBS = "/proofs/async"
# Seller bank: proof verification
PATH_VERIFY = "/sb/verify"

JSON_HEADERS = {"Content-Type": "application/json"}

# Error bodies are not guaranteed to be JSON; keep log/exception text bounded.
MAX_ERROR_BODY_CHARS = 500

DEFAULT_JOB_FAILED_MESSAGE = "Proof job failed"
