"""
Sirius - Monitor de anomalías en estaciones
Aplicación principal
"""
import streamlit as st
st.set_page_config(
    page_title="Sirius Anomaly Monitor",
    layout="wide",
    initial_sidebar_state="expanded",
)
import inspect
import logging
import time

import plotly.graph_objects as go
import pydeck as pdk
from streamlit_autorefresh import st_autorefresh

from config import FEED_URL, REFRESH_SECONDS, MIN_REFRESH_SECONDS, TREND_DAYS
from providers import DEFAULT_SELECTION, MonitoringPoint
from models import (
    alarm_tier, clamp01, layer_value, color_for_value, hex_to_rgb,
    radius_for_value, triangle_around, emf_heat_points, preset_window, records_to_frame,
)
from services import StationRepository, AnomalyMonitor, encode_table
from utils import RecordStore, es_datetime_from_epoch, fmt_score
from components import (
    card, metric_card, alarm_pill, section_title, render_grid, render_sidebar, html_clean,
)

# Configurar logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ============================================================
# ESTILOS
# ============================================================

st.markdown(html_clean("""
<style>
  :root{
    --panel: rgba(22, 25, 31, 0.78);
    --border: rgba(255,255,255,0.10);
    --muted: rgba(255,255,255,0.62);
  }
  .grid{ display:grid; gap:10px; margin:6px 0 12px 0; }
  .grid-2{ grid-template-columns: repeat(2, minmax(0, 1fr)); }
  .grid-3{ grid-template-columns: repeat(3, minmax(0, 1fr)); }
  .card{
    position:relative; overflow:hidden;
    background:var(--panel); border:1px solid var(--border);
    border-radius:14px; padding:10px 14px;
  }
  .card-accent{ position:absolute; left:0; top:0; bottom:0; width:4px; }
  .card-title{ font-size:12px; color:var(--muted); text-transform:uppercase; letter-spacing:.04em; }
  .card-value{ font-size:24px; font-weight:700; }
  .card-value .unit{ font-size:13px; margin-left:4px; color:var(--muted); }
  .card .subtitle{ font-size:12px; color:var(--muted); }
  .section-title{ font-size:18px; font-weight:700; margin:14px 0 6px 0; }
</style>
"""), unsafe_allow_html=True)


@st.cache_resource
def get_monitor() -> AnomalyMonitor:
    """Un repositorio por proceso, compartido entre sesiones (protegido por lock)."""
    return AnomalyMonitor(StationRepository())


@st.cache_resource
def get_record_store() -> RecordStore:
    return RecordStore()


def _pydeck_chart_stretch(deck, key: str, height: int = 620):
    """Renderiza pydeck de forma compatible entre versiones de Streamlit."""
    params = inspect.signature(st.pydeck_chart).parameters
    kwargs = {"height": int(height), "key": key}
    if "use_container_width" in params:
        return st.pydeck_chart(deck, use_container_width=True, **kwargs)
    return st.pydeck_chart(deck, **kwargs)


def _plotly_chart_stretch(fig, key: str):
    params = inspect.signature(st.plotly_chart).parameters
    if "width" in params:
        st.plotly_chart(fig, width="stretch", key=key)
    else:
        st.plotly_chart(fig, use_container_width=True, key=key)


def _maybe_sync(monitor: AnomalyMonitor, force: bool = False) -> None:
    """Sincroniza al arrancar, al pulsar recargar o cuando el dato ha caducado."""
    if not FEED_URL:
        return
    last_try = st.session_state.get("last_sync_try", 0.0)
    interval = max(REFRESH_SECONDS, MIN_REFRESH_SECONDS)
    if not force and time.time() - last_try < interval:
        return
    st.session_state["last_sync_try"] = time.time()
    result = monitor.sync(selected_id=st.session_state.get("selected_id"))
    st.session_state["selected_id"] = result.selected_id
    if result.ok:
        logger.info(f"Sincronización correcta: {result.station_count} estaciones")


def _map_layers(monitor: AnomalyMonitor, layer: str, index_mode: str):
    stations = monitor.current_stations()
    layers = []

    if layer == "EMF":
        heat = [
            {"lat": p["lat"], "lon": p["lon"], "weight": p["v"]}
            for p in emf_heat_points(stations)
        ]
        layers.append(pdk.Layer(
            "HeatmapLayer",
            id="emf-heat",
            data=heat,
            get_position="[lon, lat]",
            get_weight="weight",
            radius_pixels=58,
            opacity=0.55,
        ))

    points = []
    for s in stations:
        v = layer_value(s, layer)
        points.append({
            "id": s.id,
            "name": s.name,
            "lat": s.lat,
            "lon": s.lon,
            "v_txt": fmt_score(v),
            "color": hex_to_rgb(color_for_value(v), 150),
            "radius": radius_for_value(v) * 1200,
            "polygon": [[lon, lat] for lat, lon in triangle_around(s.lat, s.lon, 0.24)],
        })

    if layer == "Radon":
        layers.append(pdk.Layer(
            "PolygonLayer",
            id="radon-layer",
            data=points,
            pickable=True,
            get_polygon="polygon",
            get_fill_color="color",
            get_line_color=[255, 255, 255, 90],
            line_width_min_pixels=1,
        ))
    else:
        layers.append(pdk.Layer(
            "ScatterplotLayer",
            id="stations-layer",
            data=points,
            pickable=True,
            stroked=True,
            get_position="[lon, lat]",
            get_fill_color="color",
            get_line_color=[255, 255, 255, 80],
            get_radius="radius",
            radius_min_pixels=6,
            radius_max_pixels=30,
        ))

    if layer == "INDEX" and index_mode == "model":
        refs = [
            {
                "id": r.id,
                "name": r.name,
                "lat": r.lat,
                "lon": r.lon,
                "v_txt": fmt_score(clamp01(r.ref)),
                "color": hex_to_rgb(color_for_value(r.ref), 90),
            }
            for r in monitor.reference_points()
        ]
        layers.append(pdk.Layer(
            "ScatterplotLayer",
            id="reference-layer",
            data=refs,
            pickable=True,
            get_position="[lon, lat]",
            get_fill_color="color",
            get_radius=6000,
            radius_min_pixels=4,
            radius_max_pixels=8,
        ))
    return layers


def _trend_figure(trend, title: str):
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[t["day"] for t in trend],
        y=[t["avg_index"] for t in trend],
        mode="lines+markers",
        name="Índice medio",
        line=dict(color="rgb(230, 126, 34)", width=3),
    ))
    fig.update_layout(
        title=dict(text=title, x=0.5, xanchor="center"),
        yaxis=dict(title=dict(text="Índice (0-1)"), range=[0, 1]),
        xaxis=dict(title=dict(text="Día")),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        height=320,
        margin=dict(l=40, r=20, t=50, b=40),
    )
    return fig


# ============================================================
# ESTADO Y SINCRONIZACIÓN
# ============================================================

monitor = get_monitor()
store = get_record_store()

if "selected_id" not in st.session_state:
    st.session_state["selected_id"] = monitor.repository.resolve_selection(DEFAULT_SELECTION)

opts = render_sidebar(monitor.repository.status())
_maybe_sync(monitor, force=opts["sync_clicked"])

layer = opts["layer"]
index_mode = opts["index_mode"]

if opts["range_preset"] == "custom":
    range_from, range_to = opts["custom_window"]
else:
    range_from, range_to = preset_window(opts["range_preset"])

# ============================================================
# CABECERA
# ============================================================

st.markdown("## Sirius · Monitor de anomalías")
badge = "DATOS REALES DE ESTACIÓN" if not (layer == "INDEX" and index_mode == "model") else "SIMULACIÓN REGIONAL"
st.caption(f"{badge} · Las puntuaciones son descriptivas: no es un sistema de predicción ni de alerta sísmica.")

# ============================================================
# MAPA + TARJETA DE LA SELECCIÓN
# ============================================================

col_map, col_side = st.columns([3, 2])

with col_map:
    stations = monitor.current_stations()
    center_lat = sum(s.lat for s in stations) / len(stations)
    center_lon = sum(s.lon for s in stations) / len(stations)
    deck = pdk.Deck(
        map_style="https://basemaps.cartocdn.com/gl/dark-matter-gl-style/style.json",
        initial_view_state=pdk.ViewState(latitude=center_lat, longitude=center_lon, zoom=5, pitch=0),
        layers=_map_layers(monitor, layer, index_mode),
        tooltip={
            "html": "<b>{name}</b><br/>ID {id}<br/>Valor: {v_txt}",
            "style": {"backgroundColor": "rgba(18, 18, 18, 0.92)", "color": "white", "fontSize": "12px"},
        },
    )
    try:
        _pydeck_chart_stretch(deck, key="anomaly_map")
    except Exception as map_err:
        logger.warning(f"No se pudo renderizar el mapa: {map_err}")
        st.warning(f"No se pudo renderizar el mapa ({map_err}).")

with col_side:
    choices = [s.id for s in monitor.current_stations()]
    if layer == "INDEX" and index_mode == "model":
        choices += [r.id for r in monitor.reference_points()]
    current = st.session_state.get("selected_id")
    selected_id = st.selectbox(
        "Punto seleccionado",
        choices,
        index=choices.index(current) if current in choices else 0,
        format_func=lambda pid: f"{monitor.find_point(pid).name} ({pid})",
    )
    st.session_state["selected_id"] = selected_id

    point = monitor.find_point(selected_id)
    index = monitor.point_index(selected_id)
    tier = alarm_tier(index)

    section_title(point.name)
    st.markdown(alarm_pill(index), unsafe_allow_html=True)
    if isinstance(point, MonitoringPoint):
        cards = [card("Índice de anomalía", fmt_score(index), accent=tier.color,
                      help_text="Media ponderada de EMF, Radón, ERT, Müller y Leaf.")]
        cards += [metric_card(k, point.metrics.get(k, 0.0)) for k in ("ERT", "EMF", "Radon", "Cosmic", "Leaf", "CO2", "CH4")]
        render_grid(cards, cols=2)
        raw = point.raw
        provenance = [x for x in (raw.source_date, raw.validity, raw.alert_code) if x]
        if provenance:
            st.caption("Origen: " + " · ".join(provenance))
        st.caption("La alarma clasifica el nivel de anomalía; no es predicción ni alerta temprana de terremotos.")
    else:
        st.caption("Ciudad de referencia del modo simulación regional (modelo).")

    stats = monitor.filtered_stats(selected_id, range_from, range_to)
    window = monitor.filtered_records(selected_id, range_from, range_to)
    st.markdown(
        f"Registros en ventana: **{len(window)}** · Mín/Media/Máx: "
        f"**{stats['min']}** / **{stats['avg']}** / **{stats['max']}**"
    )

# ============================================================
# TENDENCIA
# ============================================================

section_title(f"Tendencia de {TREND_DAYS} días")
trend = monitor.daily_trend(selected_id)
_plotly_chart_stretch(_trend_figure(trend, f"{point.name}: índice medio diario"), key="trend_chart")
st.caption("Serie sintética a partir de la foto actual de la estación: ilustra tendencia, no es histórico medido.")

# ============================================================
# EXPORTACIÓN Y REGISTROS
# ============================================================

c1, c2, c3 = st.columns(3)
with c1:
    frame = records_to_frame(window)
    st.download_button(
        "Descargar ventana (CSV)",
        frame.to_csv(index=False).encode("utf-8"),
        file_name=f"sirius_{selected_id}_serie.csv",
        mime="text/csv",
    )
with c2:
    st.download_button(
        "Descargar estaciones (CSV)",
        encode_table(monitor.current_stations()).encode("utf-8"),
        file_name="sirius_estaciones.csv",
        mime="text/csv",
    )
with c3:
    if st.button("Guardar informe"):
        try:
            store.append_record(monitor.report_record(selected_id, range_from, range_to))
            st.success("Informe guardado")
        except OSError as e:
            logger.warning(f"No se pudo guardar el informe: {e}")
            st.error(f"No se pudo guardar el informe ({e})")

with st.expander("Informes guardados"):
    records = store.list_records()
    if records:
        st.dataframe(records, use_container_width=True)
    else:
        st.caption("Todavía no hay informes guardados.")

status = monitor.repository.status()
if status["last_sync"]:
    st.caption(f"Última sincronización: {es_datetime_from_epoch(status['last_sync'])} · {status['station_count']} estaciones")

# ============================================================
# AUTOREFRESH
# ============================================================

if FEED_URL:
    st_autorefresh(interval=max(REFRESH_SECONDS, MIN_REFRESH_SECONDS) * 1000, key="refresh_data")
