"""
Almacén de registros en fichero JSON ({"records": [...]})
"""
import json
import logging
import os
import tempfile
import threading
from typing import Any, Dict, List

from config import RECORDS_PATH

logger = logging.getLogger(__name__)


class RecordStore:
    """Añadir y listar registros; el formato interno no afecta al resto de la app."""

    def __init__(self, path: str = RECORDS_PATH):
        self.path = path
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {"records": []}
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                logger.warning(f"JSON no válido en {self.path} ({e}): se reinicia la lista")
                return {"records": []}
        if not isinstance(data, dict) or not isinstance(data.get("records"), list):
            logger.warning(f"Formato inesperado en {self.path}: se reinicia la lista")
            return {"records": []}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        folder = os.path.dirname(os.path.abspath(self.path))
        fd, tmp = tempfile.mkstemp(prefix=".records_", suffix=".json", dir=folder)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except Exception:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def list_records(self) -> List[Any]:
        with self._lock:
            return list(self._read()["records"])

    def append_record(self, record: Any) -> Dict[str, str]:
        with self._lock:
            data = self._read()
            data["records"].append(record)
            self._write(data)
        logger.info(f"Registro guardado en {self.path} ({len(data['records'])} en total)")
        return {"status": "ok"}
