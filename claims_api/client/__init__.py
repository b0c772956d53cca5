from .claims_client import ClaimsClient, FETCH_FAILURE_MESSAGE, UPLOAD_FAILURE_MESSAGE

__all__ = [
    "ClaimsClient",
    "FETCH_FAILURE_MESSAGE",
    "UPLOAD_FAILURE_MESSAGE",
]
