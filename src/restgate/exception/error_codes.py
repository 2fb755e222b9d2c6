"""Registry of domain error codes.

Each code pairs a small integer with a human-readable message. The integer is
sent to clients in the X-Error-Code header and the message in X-Error.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes with their client-facing messages."""

    GENERIC = (1, "Unknown error.")
    NOT_AUTHORIZED = (2, "Not authorized to perform the requested operation.")
    INVALID_CREDENTIALS = (3, "Invalid credentials.")

    INVALID_TENANT_ID = (1000, "Tenant id not found.")
    INVALID_DEVICE_TYPE_TOKEN = (1001, "Device type token not found.")
    INVALID_AREA_TOKEN = (1002, "Area token not found.")
    INVALID_CUSTOMER_TOKEN = (1003, "Customer token not found.")
    INVALID_DEVICE_TOKEN = (1004, "Invalid device token")
    INVALID_ASSIGNMENT_TOKEN = (1005, "Device assignment token not found.")
    INVALID_USERNAME = (1006, "Username not found.")

    INCOMPLETE_DATA = (1100, "Request data is incomplete.")
    MALFORMED_TOKEN = (1101, "Token contains characters that are not allowed.")

    DUPLICATE_TENANT_ID = (2000, "Tenant id is already in use.")
    DUPLICATE_USER = (2001, "Username is already in use.")
    DUPLICATE_DEVICE_TOKEN = (2100, "Device already exists")
    DUPLICATE_DEVICE_TYPE_TOKEN = (2101, "Device type token is already in use.")
    DUPLICATE_AREA_TOKEN = (2102, "Area token is already in use.")

    TENANT_NOT_AVAILABLE = (3000, "Tenant is not available.")

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message

    def get_message(self) -> str:
        """Human-readable message for this code."""
        return self.message

    @classmethod
    def from_code(cls, code: int) -> "ErrorCode":
        """Resolve a numeric error code to its registry entry.

        Args:
            code: Numeric error code

        Returns:
            Matching ErrorCode

        Raises:
            ValueError: If the code is not registered
        """
        for member in cls:
            if member.code == code:
                return member
        raise ValueError(f"Unknown error code: {code}")
