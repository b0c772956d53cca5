# ==============================================
# claims_api/transformers/__init__.py
# ==============================================
from .claim_validator import ClaimRowValidator, DEFAULT_RULES, ValidationRule, ValidationType
from .duplicate_detector import DuplicateClaimDetector

__all__ = [
    'ClaimRowValidator',
    'DEFAULT_RULES',
    'DuplicateClaimDetector',
    'ValidationRule',
    'ValidationType',
]
