"""Domain service interfaces."""

from .authentication import AuthenticationService, JwtSettings
from .payments import PaymentGateway

__all__ = ["AuthenticationService", "JwtSettings", "PaymentGateway"]
