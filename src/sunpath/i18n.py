"""Simple two-language (en/de) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "Sun path",
        "de": "Sonnenstand",
    },
    "label_lat": {
        "en": "Latitude [°]",
        "de": "Breite [°]",
    },
    "label_lon": {
        "en": "Longitude [°, east positive]",
        "de": "Länge [°, Ost positiv]",
    },
    "label_year": {
        "en": "Year",
        "de": "Jahr",
    },
    "label_timezone": {
        "en": "Time zone",
        "de": "Zeitzone",
    },
    "label_solar_noon": {
        "en": "True solar time",
        "de": "Wahre Ortszeit",
    },
    "label_tilt": {
        "en": "Panel inclination [°]",
        "de": "Neigung der Fläche [°]",
    },
    "label_bearing": {
        "en": "Panel bearing [°, 180 = south]",
        "de": "Ausrichtung [°, 180 = Süd]",
    },
    "label_exposure_date": {
        "en": "Panel report date",
        "de": "Datum der Flächenauswertung",
    },
    "heading_paths": {
        "en": "Sun paths",
        "de": "Sonnenbahnen",
    },
    "heading_exposure": {
        "en": "Elevation relative to the panel",
        "de": "Sonnenhöhe relativ zur Fläche",
    },
    "btn_download_csv": {
        "en": "Download CSV",
        "de": "CSV herunterladen",
    },
    "error_config": {
        "en": "Configuration could not be loaded. ({error})",
        "de": "Konfiguration konnte nicht geladen werden. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
