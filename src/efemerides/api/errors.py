"""Errors raised when fetching an efeméride."""


class FetchError(Exception):
    """Base class for fetch failures. ``message`` is shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoDataForDate(FetchError):
    """The API answered with no events for the requested date."""

    def __init__(self, fecha: str) -> None:
        super().__init__("No se encontraron datos para esta fecha.")
        self.fecha = fecha


class ServerError(FetchError):
    """The API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Error del servidor ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ConnectionOrParseError(FetchError):
    """The request failed or the response could not be decoded."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Error de conexión o datos: {detail}")
        self.detail = detail
