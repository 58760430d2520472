from typing import Optional


# every error below aborts the run
class MarketCapError(Exception):
    pass


class NetworkError(MarketCapError):
    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedPayload(MarketCapError):
    pass


class InvalidNumber(MarketCapError, ValueError):
    # ValueError so pydantic reports it as a field error
    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid decimal literal: {text!r}")
        self.text = text


class TerminalError(MarketCapError):
    pass


class ConfigError(MarketCapError):
    pass
