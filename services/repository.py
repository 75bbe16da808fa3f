"""
Repositorio de estaciones: única copia autoritativa del conjunto actual.

El conjunto se sustituye entero en cada descarga válida y nunca se muta en
sitio. Si la descarga falla se mantiene el anterior (mejor datos antiguos
que ningún dato).
"""
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from api.errors import FeedError, FeedFetchError, NoValidStations
from api.sheet_feed import fetch_feed_text
from providers.defaults import DEFAULT_STATIONS
from providers.types import MonitoringPoint
from .decoder import decode_table
from .normalizer import normalize_row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    ok: bool
    station_count: int
    selected_id: Optional[str]
    error: Optional[str] = None
    synced_at: Optional[float] = None


def build_stations(rows: Iterable[Dict[str, str]], delimiter: str = ",") -> List[MonitoringPoint]:
    """Filas -> estaciones válidas, sin ids repetidos (gana la primera)."""
    seen = set()
    stations = []
    dropped = 0
    for row in rows:
        point = normalize_row(row, delimiter)
        if point is None:
            dropped += 1
            continue
        if point.id in seen:
            logger.warning(f"Id de estación repetido '{point.id}': se ignora la fila")
            dropped += 1
            continue
        seen.add(point.id)
        stations.append(point)
    if dropped:
        logger.info(f"{dropped} filas descartadas por identidad o coordenadas no válidas")
    return stations


class StationRepository:
    """Celda compartida con el conjunto de estaciones y el estado de sincronización."""

    def __init__(self, initial: Iterable[MonitoringPoint] = DEFAULT_STATIONS):
        self._lock = threading.RLock()
        self._sync_lock = threading.Lock()
        self._stations: Tuple[MonitoringPoint, ...] = tuple(initial)
        self._generation = 0
        self._source = "default"
        self._last_sync: Optional[float] = None
        self._last_error: Optional[str] = None
        self._last_result: Optional[SyncResult] = None

    # ------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------
    def stations(self) -> Tuple[MonitoringPoint, ...]:
        with self._lock:
            return self._stations

    def get(self, point_id: str) -> Optional[MonitoringPoint]:
        for point in self.stations():
            if point.id == point_id:
                return point
        return None

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def status(self) -> Dict:
        with self._lock:
            return {
                "last_sync": self._last_sync,
                "station_count": len(self._stations),
                "last_error": self._last_error,
                "source": self._source,
            }

    def resolve_selection(self, selected_id: Optional[str]) -> Optional[str]:
        """La selección se mantiene si sigue existiendo; si no, la primera estación."""
        stations = self.stations()
        if not stations:
            return None
        if selected_id and any(p.id == selected_id for p in stations):
            return selected_id
        return stations[0].id

    # ------------------------------------------------------------
    # Escritura
    # ------------------------------------------------------------
    def replace(self, stations: Iterable[MonitoringPoint], source: str = "feed") -> int:
        new = tuple(stations)
        if not new:
            raise NoValidStations("Conjunto de estaciones vacío")
        with self._lock:
            self._stations = new
            self._generation += 1
            self._source = source
            self._last_sync = time.time()
            self._last_error = None
            return self._generation

    def refresh(self, rows: Iterable[Dict[str, str]], delimiter: str = ",",
                selected_id: Optional[str] = None) -> Optional[str]:
        """
        Reconstruye el conjunto a partir de filas decodificadas.

        Returns:
            Selección efectiva tras la sustitución

        Raises:
            NoValidStations: ninguna fila válida (el conjunto no cambia)
        """
        stations = build_stations(rows, delimiter)
        if not stations:
            raise NoValidStations("Ninguna fila de la hoja tiene id, nombre y coordenadas válidas")
        self.replace(stations, source="feed")
        logger.info(f"Repositorio actualizado: {len(stations)} estaciones")
        return self.resolve_selection(selected_id)

    def sync(self, fetch: Callable[[], str] = fetch_feed_text,
             selected_id: Optional[str] = None) -> SyncResult:
        """
        Descarga, decodifica y sustituye como una sola unidad de trabajo.

        Solo hay una descarga en curso: una petición concurrente espera a que
        termine y reutiliza su resultado en lugar de descargar otra vez.
        Los errores de ingesta quedan en last_error y no se propagan. Cualquier
        otra excepción de `fetch` se registra como FeedFetchError("network").
        """
        if not self._sync_lock.acquire(blocking=False):
            logger.info("Sincronización ya en curso: se espera a su resultado")
            with self._sync_lock:
                return self._result_for(self._last_result, selected_id)

        try:
            try:
                text = self._fetch_text(fetch)
                decoded = decode_table(text)
                selection = self.refresh(decoded.rows, decoded.delimiter, selected_id)
                result = SyncResult(
                    ok=True,
                    station_count=len(self.stations()),
                    selected_id=selection,
                    synced_at=self.status()["last_sync"],
                )
            except FeedError as e:
                logger.warning(f"Sincronización fallida ({e.kind}): {e}")
                with self._lock:
                    self._last_error = str(e)
                status = self.status()
                result = SyncResult(
                    ok=False,
                    station_count=status["station_count"],
                    selected_id=self.resolve_selection(selected_id),
                    error=str(e),
                    synced_at=status["last_sync"],
                )
            self._last_result = result
            return result
        finally:
            self._sync_lock.release()

    @staticmethod
    def _fetch_text(fetch: Callable[[], str]) -> str:
        try:
            return fetch()
        except FeedError:
            raise
        except Exception as e:
            raise FeedFetchError("network", f"{type(e).__name__}: {e}") from e

    def _result_for(self, result: Optional[SyncResult], selected_id: Optional[str]) -> SyncResult:
        status = self.status()
        return SyncResult(
            ok=result.ok if result is not None else status["last_error"] is None,
            station_count=status["station_count"],
            selected_id=self.resolve_selection(selected_id),
            error=result.error if result is not None else status["last_error"],
            synced_at=status["last_sync"],
        )
