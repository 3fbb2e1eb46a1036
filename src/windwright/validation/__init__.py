from windwright.validation.validator import (
    CandidateError,
    diagnose,
    diagnose_or_raise,
    explain,
)

__all__ = ["CandidateError", "diagnose", "diagnose_or_raise", "explain"]
