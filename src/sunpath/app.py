"""Sun path: Streamlit viewer for solar positions and panel exposure."""

import datetime
import html
import math

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from sunpath.config import (  # noqa: E402
    DEFAULT_CALENDAR_DAYS,
    ConfigError,
    config_path_from_env,
    load_config,
    resolve_timezone,
)
from sunpath.graph import local_time_info, panel_exposure, solar_position_graph  # noqa: E402
from sunpath.i18n import t  # noqa: E402
from sunpath.models import GeoLocation, PlaneOrientation  # noqa: E402
from sunpath.renderers.plotly_2d import render_plotly_chart  # noqa: E402
from sunpath.table import exposure_frame, sun_table, to_csv  # noqa: E402

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "de" if _browser_lang.lower().startswith("de") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☀",
    layout="wide",
)

# --- Defaults from the site configuration, if one is configured ---
if "site" not in st.session_state:
    st.session_state.site = None
    st.session_state.error_msg = None
    _path = config_path_from_env()
    if _path is not None:
        try:
            st.session_state.site = load_config(_path)
        except ConfigError as e:
            st.session_state.error_msg = t("error_config", _lang).format(
                error=html.escape(str(e))
            )

_site = st.session_state.site

if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

# --- Input sidebar ---
with st.sidebar:
    lat = st.number_input(
        t("label_lat", _lang),
        min_value=-90.0,
        max_value=90.0,
        value=_site.location.lat_deg if _site else 50.836,
        step=0.1,
    )
    lon = st.number_input(
        t("label_lon", _lang),
        min_value=-180.0,
        max_value=180.0,
        value=_site.location.lon_deg if _site else 12.923,
        step=0.1,
    )
    year = st.number_input(
        t("label_year", _lang),
        min_value=1900,
        max_value=2100,
        value=_site.year if _site else datetime.date.today().year,
        step=1,
    )
    use_solar_noon = st.checkbox(t("label_solar_noon", _lang), value=True)
    tilt_deg = st.slider(
        t("label_tilt", _lang),
        0,
        90,
        value=round(math.degrees(_site.panel.tilt_rad)) if _site else 30,
    )
    bearing_deg = st.slider(
        t("label_bearing", _lang),
        0,
        359,
        value=round(math.degrees(_site.panel.direction_rad) + 180) % 360
        if _site
        else 180,
    )
    exposure_date = st.date_input(
        t("label_exposure_date", _lang), value=datetime.date(int(year), 6, 21)
    )

location = GeoLocation(lat_deg=lat, lon_deg=lon)
calendar_days = _site.calendar_days if _site else DEFAULT_CALENDAR_DAYS
tz_name: str | None = _site.timezone if _site else None
if tz_name is None:
    try:
        tz_name = resolve_timezone(location)
    except ConfigError as e:
        st.warning(html.escape(str(e)))
        use_solar_noon = True

st.caption(f"{t('label_timezone', _lang)}: {tz_name or '-'}")

# --- Sun path chart ---
st.subheader(t("heading_paths", _lang))
graph = solar_position_graph(
    location,
    int(year),
    calendar_days,
    use_solar_noon=use_solar_noon,
    tz_name=tz_name,
)
st.plotly_chart(
    render_plotly_chart(graph, title=_site.name if _site else ""),
    use_container_width=True,
    config={"scrollZoom": True, "displayModeBar": False},
)
st.download_button(
    t("btn_download_csv", _lang),
    data=to_csv(sun_table(location, int(year), calendar_days)),
    file_name=f"sunpath_{int(year)}.csv",
    mime="text/csv",
)

# --- Panel exposure ---
st.subheader(t("heading_exposure", _lang))
utc_offset_seconds = 0
if tz_name is not None:
    info = local_time_info(
        exposure_date.year, exposure_date.month, exposure_date.day, lon, tz_name
    )
    utc_offset_seconds = info.offset
samples = panel_exposure(
    location,
    PlaneOrientation.from_compass(tilt_deg, bearing_deg),
    exposure_date.year,
    exposure_date.month,
    exposure_date.day,
    utc_offset_seconds=utc_offset_seconds,
)
st.dataframe(exposure_frame(samples).round(2), use_container_width=True)
