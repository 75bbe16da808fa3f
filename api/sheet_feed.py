"""
Cliente de la hoja publicada (CSV) con las lecturas de las estaciones
"""
import logging
import time
from typing import Optional

import requests

from config import FEED_URL, FEED_TIMEOUT_SECONDS, FEED_CACHE_BUSTER_PARAM
from .errors import FeedFetchError

logger = logging.getLogger(__name__)


def cache_buster() -> str:
    """Parámetro distinto en cada petición para saltarse cachés intermedias."""
    return str(int(time.time() * 1000))


def fetch_feed_text(url: Optional[str] = None, timeout: Optional[float] = None,
                    session: Optional[requests.Session] = None) -> str:
    """
    Descarga el CSV publicado.

    Args:
        url: URL de la hoja (por defecto FEED_URL)
        timeout: Segundos máximos de espera (por defecto FEED_TIMEOUT_SECONDS)
        session: Sesión requests opcional (reutilización de conexiones, tests)

    Returns:
        Texto de la respuesta tal cual

    Raises:
        FeedFetchError: sin URL, timeout, error de red o HTTP != 200
    """
    target = (url if url is not None else FEED_URL).strip()
    if not target:
        raise FeedFetchError("no_url", "No hay URL de hoja configurada (SIRIUS_FEED_URL)")

    wait = FEED_TIMEOUT_SECONDS if timeout is None else float(timeout)
    params = {FEED_CACHE_BUSTER_PARAM: cache_buster()}
    headers = {
        "Accept": "text/csv, text/plain;q=0.9, */*;q=0.1",
        "Cache-Control": "no-cache",
    }
    getter = session.get if session is not None else requests.get

    logger.info(f"Descargando hoja de estaciones ({target})")
    try:
        r = getter(target, params=params, headers=headers, timeout=wait)
    except requests.Timeout as e:
        logger.warning(f"Timeout descargando la hoja tras {wait:.0f}s")
        raise FeedFetchError("timeout", f"Sin respuesta en {wait:.0f}s") from e
    except requests.RequestException as e:
        logger.warning(f"Error de red descargando la hoja: {e}")
        raise FeedFetchError("network", str(e)) from e

    if r.status_code != 200:
        logger.warning(f"HTTP {r.status_code} descargando la hoja")
        raise FeedFetchError("http", f"HTTP {r.status_code}", status_code=r.status_code)

    # Google Sheets no siempre declara charset y requests cae en latin-1
    if not r.encoding or r.encoding.lower() == "iso-8859-1":
        r.encoding = "utf-8"

    text = r.text
    logger.info(f"Hoja descargada: {len(text)} caracteres")
    return text
