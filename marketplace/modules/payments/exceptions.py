"""Payment domain specific exceptions."""


class PaymentError(Exception):
    """Base class for payment related domain errors."""


class GatewayError(PaymentError):
    """Raised when a call to the mobile-money provider does not succeed."""


class GatewayUnavailableError(GatewayError):
    """Network failure, timeout or provider-side fault. Safe for a caller to retry."""


class GatewayRejectedError(GatewayError):
    """The provider validated the request and declined it."""
