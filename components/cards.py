"""
Componentes de tarjetas y grillas para visualizacion de datos
"""
import textwrap
from html import escape

import streamlit as st

from models.anomaly import alarm_tier, clamp01
from models.layers import color_for_value
from utils.helpers import fmt_score

METRIC_DEFINITIONS = {
    "ERT": "Resistividad eléctrica del terreno, normalizada sobre 600 Ω·m.",
    "EMF": "Campo electromagnético de baja frecuencia, normalizado sobre 300 nT.",
    "Radon": "Concentración de radón en suelo, normalizada sobre 150 Bq/m³.",
    "Cosmic": "Contador Geiger-Müller (radiación cósmica), normalizado sobre 3 µSv/h.",
    "Leaf": "Sensor de potencial en hoja, normalizado sobre 800 mV.",
    "CO2": "Dióxido de carbono (valor neutro mientras no exista columna de origen).",
    "CH4": "Metano (valor neutro mientras no exista columna de origen).",
}


def html_clean(s: str) -> str:
    """Limpia y dedenta HTML"""
    return textwrap.dedent(s).strip()


def alarm_pill(index: float) -> str:
    tier = alarm_tier(index)
    return (
        f"<span class='alarm-pill' style='display:inline-block;padding:2px 8px;"
        f"border-radius:999px;background:{tier.color};color:#111;font-weight:800;"
        f"font-size:12px'>{escape(tier.label)}</span>"
    )


def card(title: str, value: str, unit: str = "", subtitle_html: str = "",
         accent: str = "", help_text: str = "") -> str:
    """
    Genera HTML de una tarjeta de dato.
    """
    unit_html = f"<span class='unit'>{unit}</span>" if unit else ""
    sub_html = f"<div class='subtitle'>{subtitle_html}</div>" if subtitle_html else ""
    bar_html = f"<div class='card-accent' style='background:{accent}'></div>" if accent else ""
    tip = escape(help_text or METRIC_DEFINITIONS.get(title, "Definicion no disponible todavia."))

    return html_clean(
        f"""
  <div class="card card-h" title="{tip}">
    {bar_html}
    <div class="content-col">
      <div class="card-title">{escape(title)}</div>
      <div class="card-value">{value}{unit_html}</div>
      {sub_html}
    </div>
  </div>
"""
    )


def metric_card(key: str, value: float) -> str:
    v = clamp01(value)
    return card(key, fmt_score(v), accent=color_for_value(v))


def section_title(text: str):
    """
    Renderiza un titulo de seccion.
    """
    st.markdown(f"<div class='section-title'>{text}</div>", unsafe_allow_html=True)


def render_grid(cards: list, cols: int = 3, extra_class: str = ""):
    """
    Renderiza una grilla de tarjetas.
    """
    cards_html = "".join(cards)
    html = f"<div class='grid grid-{cols} {extra_class}'>{cards_html}</div>"
    st.markdown(html, unsafe_allow_html=True)
