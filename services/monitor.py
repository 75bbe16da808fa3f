"""
Fachada de consulta para el mapa, el gráfico y el informe
"""
import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from config import SERIES_DAYS, SERIES_POINTS_PER_DAY, TREND_DAYS
from models.anomaly import alarm_tier, anomaly_index, clamp01
from models.ranges import filter_by_range, quick_stats, last_days_trend
from models.series import generate_station_series, generate_reference_series
from providers.defaults import REFERENCE_POINTS
from providers.types import MonitoringPoint, ReferencePoint, SeriesRecord
from .repository import StationRepository, SyncResult

logger = logging.getLogger(__name__)

Point = Union[MonitoringPoint, ReferencePoint]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnomalyMonitor:
    """
    Vista de solo lectura sobre el repositorio.

    Las series se guardan por (generación, ancla, punto). El ancla es el reloj
    redondeado hacia abajo al paso de muestreo (24 h / puntos por día): la serie
    es estable dentro de un paso y avanza con el reloj aunque no haya sync.
    """

    def __init__(self, repository: StationRepository,
                 references: Iterable[ReferencePoint] = REFERENCE_POINTS,
                 days: int = SERIES_DAYS, points_per_day: int = SERIES_POINTS_PER_DAY,
                 clock: Callable[[], datetime] = _utc_now):
        self.repository = repository
        self._references: Tuple[ReferencePoint, ...] = tuple(references)
        self.days = days
        self.points_per_day = points_per_day
        self._cache_lock = threading.Lock()
        self._clock = clock
        self._cache_key: Optional[Tuple[int, datetime]] = None
        self._series_cache: Dict[str, List[SeriesRecord]] = {}

    def current_stations(self) -> Tuple[MonitoringPoint, ...]:
        return self.repository.stations()

    def reference_points(self) -> Tuple[ReferencePoint, ...]:
        return self._references

    def find_point(self, point_id: str) -> Optional[Point]:
        station = self.repository.get(point_id)
        if station is not None:
            return station
        for ref in self._references:
            if ref.id == point_id:
                return ref
        return None

    def point_index(self, point_id: str) -> float:
        """Índice actual: ponderado para estaciones, valor fijo para referencias."""
        point = self.find_point(point_id)
        if isinstance(point, MonitoringPoint):
            return anomaly_index(point.metrics)
        if isinstance(point, ReferencePoint):
            return clamp01(point.ref)
        return 0.0

    def series_for(self, point_id: str, now: Optional[datetime] = None) -> List[SeriesRecord]:
        """
        Serie sintética de un punto (estación o referencia). Id desconocido = [].

        Con `now` explícito la serie se genera sin pasar por la caché.
        """
        point = self.find_point(point_id)
        if point is None:
            return []
        if now is not None:
            return self._generate(point, now)

        anchor = self.anchor()
        key = (self.repository.generation, anchor)
        with self._cache_lock:
            if key != self._cache_key:
                self._series_cache = {}
                self._cache_key = key
            cached = self._series_cache.get(point_id)
            if cached is None:
                cached = self._generate(point, anchor)
                self._series_cache[point_id] = cached
            return cached

    def anchor(self) -> datetime:
        """Reloj actual redondeado hacia abajo al paso de muestreo."""
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        step = timedelta(hours=24 / max(self.points_per_day, 1))
        return _EPOCH + ((now - _EPOCH) // step) * step

    def _generate(self, point: Point, now: Optional[datetime]) -> List[SeriesRecord]:
        if isinstance(point, ReferencePoint):
            return generate_reference_series(point, self.days, self.points_per_day, now=now)
        return generate_station_series(point, self.days, self.points_per_day, now=now)

    def filtered_records(self, point_id: str, start=None, end=None) -> List[SeriesRecord]:
        return filter_by_range(self.series_for(point_id), start, end)

    def filtered_stats(self, point_id: str, start=None, end=None) -> Dict[str, float]:
        return quick_stats(self.filtered_records(point_id, start, end))

    def daily_trend(self, point_id: str, days: int = TREND_DAYS,
                    now: Optional[datetime] = None) -> List[Dict]:
        ref = now if now is not None else self._clock()
        return last_days_trend(self.series_for(point_id), days=days, now=ref)

    def report_record(self, point_id: str, start=None, end=None) -> Dict:
        """Resumen serializable de la ventana seleccionada (para el almacén de registros)."""
        point = self.find_point(point_id)
        index = self.point_index(point_id)
        records = self.filtered_records(point_id, start, end)
        return {
            "point_id": point_id,
            "point_name": point.name if point is not None else "",
            "kind": "station" if isinstance(point, MonitoringPoint) else "reference",
            "from": records[0].timestamp.isoformat() if records else None,
            "to": records[-1].timestamp.isoformat() if records else None,
            "count": len(records),
            "index": round(index, 3),
            "alarm": alarm_tier(index).key,
            "stats": quick_stats(records),
            "created_at": self._clock().isoformat(),
        }

    def sync(self, selected_id: Optional[str] = None, **kwargs) -> SyncResult:
        return self.repository.sync(selected_id=selected_id, **kwargs)
