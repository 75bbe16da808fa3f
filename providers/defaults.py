"""
Conjunto de estaciones por defecto y ciudades de referencia.

Las estaciones se usan mientras no haya una descarga válida de la hoja;
las ciudades de referencia son fijas durante toda la vida del proceso.
"""
from typing import Tuple

from .types import MonitoringPoint, ReferencePoint


def _metrics(ert, emf, radon, muller, leaf, co2, ch4):
    return {
        "ERT": ert,
        "EMF": emf,
        "Radon": radon,
        "Cosmic": muller,
        "Muller": muller,
        "Leaf": leaf,
        "CO2": co2,
        "CH4": ch4,
    }


DEFAULT_STATIONS: Tuple[MonitoringPoint, ...] = (
    MonitoringPoint("IST", "İstanbul", 41.01, 28.97, _metrics(0.35, 0.55, 0.18, 0.28, 0.30, 0.20, 0.15)),
    MonitoringPoint("BAL", "Balıkesir", 39.65, 27.89, _metrics(0.42, 0.62, 0.22, 0.20, 0.26, 0.18, 0.16)),
    MonitoringPoint("SIN", "Sinop", 42.02, 35.15, _metrics(0.30, 0.35, 0.16, 0.22, 0.24, 0.12, 0.10)),
    MonitoringPoint("KMR", "Kahramanmaraş", 37.57, 36.93, _metrics(0.85, 0.95, 0.55, 0.40, 0.48, 0.30, 0.28)),
)

DEFAULT_SELECTION = "KMR"


REFERENCE_POINTS: Tuple[ReferencePoint, ...] = (
    # Mármara
    ReferencePoint("BUR", "Bursa", 40.19, 29.06, 0.35),
    ReferencePoint("KOC", "Kocaeli", 40.77, 29.92, 0.40),
    # Egeo
    ReferencePoint("IZM", "İzmir", 38.42, 27.14, 0.33),
    ReferencePoint("MAN", "Manisa", 38.62, 27.43, 0.30),
    ReferencePoint("DEN", "Denizli", 37.78, 29.09, 0.28),
    # Mediterráneo
    ReferencePoint("ANT", "Antalya", 36.89, 30.71, 0.34),
    ReferencePoint("ADA", "Adana", 37.0, 35.32, 0.45),
    ReferencePoint("HAT", "Hatay", 36.2, 36.16, 0.50),
    # Anatolia central
    ReferencePoint("ANK", "Ankara", 39.93, 32.86, 0.32),
    ReferencePoint("KON", "Konya", 37.87, 32.48, 0.30),
    ReferencePoint("KAY", "Kayseri", 38.72, 35.48, 0.36),
    # Mar Negro
    ReferencePoint("SAM", "Samsun", 41.29, 36.33, 0.30),
    ReferencePoint("TRA", "Trabzon", 41.0, 39.72, 0.28),
    # Anatolia oriental
    ReferencePoint("ERZ", "Erzurum", 39.9, 41.27, 0.35),
    ReferencePoint("VAN", "Van", 38.49, 43.38, 0.42),
    ReferencePoint("MAL", "Malatya", 38.35, 38.31, 0.44),
    # Sudeste
    ReferencePoint("GAZ", "Gaziantep", 37.06, 37.38, 0.48),
    ReferencePoint("DIY", "Diyarbakır", 37.91, 40.23, 0.46),
    # Equilibrio
    ReferencePoint("ESK", "Eskişehir", 39.77, 30.52, 0.30),
    ReferencePoint("SIV", "Sivas", 39.75, 37.02, 0.34),
)
