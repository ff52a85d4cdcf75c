from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetail:
    code: str
    message: str


class StarkBankException(Exception):
    def __init__(self, *args):
        super().__init__(*args)

    def __str__(self):
        return f"Stark Bank - {super().__str__()}"


class StarkBankConfigurationError(StarkBankException):
    def __str__(self):
        return f"Configuration error: {super().__str__()}"


class StarkBankValueError(StarkBankException):
    def __str__(self):
        return f"Invalid value: {super().__str__()}"


class StarkBankRequestError(StarkBankException):
    def __init__(self, message: str, status_code: int, content: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.content = content

    @property
    def errors(self) -> list[ErrorDetail]:
        if not isinstance(self.content, dict):
            return []
        return [
            ErrorDetail(code=error.get("code", ""), message=error.get("message", ""))
            for error in self.content.get("errors") or []
        ]

    def __str__(self):
        error_content = self.content or "No details in response"
        return f"Request failed: {super().__str__()} - {self.status_code} {error_content}"


class StarkBankValidationError(StarkBankRequestError):
    pass


class StarkBankAuthenticationError(StarkBankRequestError):
    pass


class StarkBankNotFoundError(StarkBankRequestError):
    pass


class StarkBankTransportError(StarkBankRequestError):
    def __init__(self, message: str):
        super().__init__(message, 0, None)
