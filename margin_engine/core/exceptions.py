from typing import Optional, Any, Dict


class MarginEngineError(Exception):
    """Base exception for all custom errors in the Margin Engine"""
    def __init__(self, message: str, code: int = 500, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.code}] {self.message}"


class ConfigurationError(MarginEngineError):
    """Raised when there is a configuration error"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=503, details=details)


class ValidationError(MarginEngineError):
    """Raised when an order intent violates a structural constraint"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=422, details=details)


class SigningError(MarginEngineError):
    """Raised when a request cannot be signed (missing or invalid key material)"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=401, details=details)


class TransportError(MarginEngineError):
    """Raised on network level failures: timeouts, refused connections"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=504, details=details)


class ApiError(MarginEngineError):
    """
    交易所返回了非成功状态
    error_code / error_message 原样保留交易所 {code, msg} 中的内容
    """
    def __init__(
        self,
        status_code: int,
        error_code: Optional[int],
        error_message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(error_message, code=status_code, details=details)

    def __str__(self):
        if self.error_code is None:
            return f"[{self.status_code}] {self.error_message}"
        return f"[{self.status_code}] ({self.error_code}) {self.error_message}"


class DeserializationError(MarginEngineError):
    """Raised when a response body does not match the expected shape"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=502, details=details)
