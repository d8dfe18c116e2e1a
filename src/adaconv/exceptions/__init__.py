"""Custom exceptions for the ada-convert system."""


class AdaConvException(Exception):
    """Base exception for all ada-convert errors."""
    pass


# Encoding Errors
class EncodingError(AdaConvException):
    """Base exception for text/binary encoding errors."""
    pass


class HexDecodingError(EncodingError):
    """Raised when a string is not valid hexadecimal."""
    pass


# Ledger Errors
class LedgerError(AdaConvException):
    """Base exception for ledger value errors."""
    pass


class CredentialError(LedgerError):
    """Raised when a credential or key hash is malformed."""
    pass


class PointerError(LedgerError):
    """Raised when a stake pointer is malformed."""
    pass


class InvalidNetworkError(LedgerError):
    """Raised when a network id is not testnet or mainnet."""
    pass


class AddressDeserializationError(LedgerError):
    """Raised when bytes are not a valid address of the expected era."""
    pass


class InvalidTxIdError(LedgerError):
    """Raised when a transaction id is not 32 bytes."""
    pass


class InvalidKeyError(LedgerError):
    """Raised when raw key material has the wrong shape."""
    pass
