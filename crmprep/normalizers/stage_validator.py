"""
Borrower stage validation
"""

from core.models import BorrowerStage, VALID_STAGES, DEFAULT_STAGE


def validate_stage(raw) -> BorrowerStage:
    """
    Return the stage unchanged if it is exactly one of the valid stages.

    Matching is case-sensitive with no trimming: "client" and " Client"
    both fall back to the default stage.
    """
    if isinstance(raw, str) and raw in VALID_STAGES:
        return raw
    return DEFAULT_STAGE
