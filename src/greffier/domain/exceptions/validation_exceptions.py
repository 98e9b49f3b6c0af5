"""
Request parameter exceptions.
"""

from typing import Optional

from greffier.domain.exceptions.base import GreffierException


class InvalidParameterError(GreffierException):
    """Request parameter missing or not in its canonical form."""

    def __init__(
        self,
        message: str = "Bad Request",
        parameter: Optional[str] = None,
    ):
        super().__init__(
            message,
            details={"parameter": parameter} if parameter else None,
        )
        self.parameter = parameter
