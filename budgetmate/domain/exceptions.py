"""Domain-specific exceptions"""

from typing import List, Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Transaction snapshot violates the input contract"""

    def __init__(self, problems: List[str], message: Optional[str] = None):
        self.problems = list(problems)
        super().__init__(message or "; ".join(self.problems))


class InvalidTimeframeError(DomainException):
    """Requested analysis period is not supported"""

    pass
