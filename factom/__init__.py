"""
factom - async client for the factomd and factom-walletd JSON-RPC APIs.
"""

__version__ = "0.3.0"

from loguru import logger

from factom.client import (
    API_VERSION,
    FACTOMD_URI,
    WALLET_URI,
    Factom,
    factomd_call,
    fetch,
    parse,
    send,
    walletd_call,
)
from factom.envelope import ApiError, ApiRequest, ApiResponse, Envelope, decode, encode
from factom.errors import (
    ApplicationError,
    DeserializationError,
    FactomError,
    SerializationError,
    TransportError,
)

__all__ = [
    "__version__",
    "API_VERSION",
    "FACTOMD_URI",
    "WALLET_URI",
    "Factom",
    "factomd_call",
    "walletd_call",
    "send",
    "parse",
    "fetch",
    "ApiError",
    "ApiRequest",
    "ApiResponse",
    "Envelope",
    "encode",
    "decode",
    "FactomError",
    "TransportError",
    "SerializationError",
    "DeserializationError",
    "ApplicationError",
]

# Silent unless the application opts in with logger.enable("factom").
logger.disable("factom")
