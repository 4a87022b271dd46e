"""
INBOUND WMS - Typed exceptions for the inbound receiving pipeline.

    InboundError (base)
    |
    +-- NotFoundError        referenced ASN / ASN line / receipt / task / SKU missing
    +-- ValidationError      malformed request the service can detect cheaply
    +-- InvalidStateError    operation not allowed in the entity's current state

Every class carries a machine-readable ``code`` used by the API error envelope.
Database failures are not wrapped: the original SQLAlchemy error propagates
after the surrounding unit of work has rolled back.
"""


class InboundError(Exception):
    """Base class for all inbound pipeline errors."""

    code: str = "INBOUND_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(InboundError):
    code: str = "NOT_FOUND"

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")


class ValidationError(InboundError):
    code: str = "VALIDATION_ERROR"


class InvalidStateError(InboundError):
    code: str = "INVALID_STATE"

    def __init__(self, message: str, current_status: str | None = None):
        self.current_status = current_status
        super().__init__(message)
