"""
Componentes de sidebar: capa, modo del índice, ventana temporal y sincronización
"""
from datetime import datetime, time as dtime

import streamlit as st

from models.layers import LAYERS
from utils.helpers import LOCAL_TZ, age_string

LAYER_LABELS = {
    "ERT": "ERT",
    "EMF": "EMF",
    "Radon": "Radón",
    "Cosmic": "Cósmica",
    "INDEX": "Índice de anomalía",
}

RANGE_LABELS = {
    "24h": "Últimas 24 h",
    "7d": "Últimos 7 días",
    "30d": "Últimos 30 días",
    "custom": "Personalizado",
}


def _custom_window():
    """Fechas del rango personalizado como instantes locales [desde 00:00, hasta 23:59:59]."""
    today = datetime.now(LOCAL_TZ).date()
    c1, c2 = st.sidebar.columns(2)
    with c1:
        d_from = st.date_input("Desde", value=today, key="range_from")
    with c2:
        d_to = st.date_input("Hasta", value=today, key="range_to")
    start = datetime.combine(d_from, dtime.min).replace(tzinfo=LOCAL_TZ)
    end = datetime.combine(d_to, dtime.max).replace(tzinfo=LOCAL_TZ)
    return start, end


def render_sidebar(status: dict):
    """
    Renderiza la barra lateral

    Args:
        status: Estado del repositorio (last_sync, station_count, last_error, source)

    Returns:
        Diccionario con layer, index_mode, range_preset, custom_window, sync_clicked
    """
    st.sidebar.title("⚙️ Ajustes")

    layer = st.sidebar.radio(
        "Capa",
        list(LAYERS),
        index=list(LAYERS).index("EMF"),
        format_func=lambda k: LAYER_LABELS.get(k, k),
        key="layer",
    )

    index_mode = "real"
    if layer == "INDEX":
        index_mode = st.sidebar.radio(
            "Modo del índice",
            ["real", "model"],
            format_func=lambda k: "Estaciones (real)" if k == "real" else "Simulación regional (modelo)",
            key="index_mode",
        )

    st.sidebar.markdown("---")
    range_preset = st.sidebar.selectbox(
        "Ventana temporal",
        list(RANGE_LABELS),
        index=1,
        format_func=lambda k: RANGE_LABELS[k],
        key="range_preset",
    )
    custom_window = _custom_window() if range_preset == "custom" else None

    # Estado de sincronización
    st.sidebar.markdown("---")
    st.sidebar.markdown("### 🔄 Datos")
    sync_clicked = st.sidebar.button("Recargar hoja", use_container_width=True)

    last_sync = status.get("last_sync")
    if last_sync:
        st.sidebar.caption(f"Última sincronización: hace {age_string(last_sync)}")
    else:
        st.sidebar.caption("Sin sincronizar: estaciones por defecto")
    st.sidebar.caption(f"Estaciones: {status.get('station_count', 0)}")
    if status.get("last_error"):
        st.sidebar.warning(f"Último error: {status['last_error']}")

    return {
        "layer": layer,
        "index_mode": index_mode,
        "range_preset": range_preset,
        "custom_window": custom_window,
        "sync_clicked": sync_clicked,
    }
