"""
Errores de ingesta de la hoja de estaciones
"""
from typing import Optional


class FeedError(Exception):
    """Fallo a nivel de descarga: el conjunto de estaciones anterior se conserva."""

    def __init__(self, kind: str, message: Optional[str] = None, status_code: Optional[int] = None):
        self.kind = kind
        self.status_code = status_code
        super().__init__(message or kind)


class FeedFetchError(FeedError):
    """Sin URL, timeout, error de red o código HTTP distinto de 200."""


class InvalidFeedFormat(FeedError):
    """Respuesta vacía o documento HTML en lugar de texto delimitado."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("invalid_format", message)


class NoValidStations(FeedError):
    """Se decodificó la hoja pero ninguna fila supera la validación."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("no_valid_stations", message)
