# i18n.py
import locale

MESSAGES = {
    "en": {
        "is_playlist": "'{url}' points to a playlist.",
        "is_stream": "'{url}' points directly to a stream.",
        "resolving": "Resolving '{url}'...",
        "stream_resolved": "Stream URL: {stream_url}",
        "resolve_error": "Unable to resolve stream: {error}",
        "parse_error": "Unable to parse '{file}': {error}",
        "file_read_error": "Could not read '{file}': {error}",
        "searching_stations": "Searching stations for '{search}'...",
        "stations_found": "{count} station(s) found.",
        "no_stations": "No station matches '{search}'.",
        "fetching_tags": "Fetching tags...",
        "tags_found": "{count} tag(s) found.",
        "directory_error": "Station directory unavailable: {error}",
        "config_error": "Configuration error: {error}",
        "column_name": "Name",
        "column_codec": "Codec",
        "column_bitrate": "Bitrate",
        "column_url": "URL",
        "column_tag": "Tag",
        "column_stationcount": "Stations",
        "stations_title": "Stations",
        "tags_title": "Tags",
        "help_url": "Station, stream or playlist URL.",
        "help_file": "Local playlist file to parse.",
        "help_search": "Station name followed by optional keywords.",
        "help_timeout": "Request timeout in seconds (defaults to the configured value).",
        "help_config": "YAML configuration file.",
        "help_verbose": "Show debug logs.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
    },
    "fr": {
        "is_playlist": "'{url}' pointe vers une playlist.",
        "is_stream": "'{url}' pointe directement vers un flux.",
        "resolving": "Résolution de '{url}'...",
        "stream_resolved": "URL du flux : {stream_url}",
        "resolve_error": "Impossible de résoudre le flux : {error}",
        "parse_error": "Impossible d'analyser '{file}' : {error}",
        "file_read_error": "Impossible de lire '{file}' : {error}",
        "searching_stations": "Recherche des stations pour '{search}'...",
        "stations_found": "{count} station(s) trouvée(s).",
        "no_stations": "Aucune station ne correspond à '{search}'.",
        "fetching_tags": "Récupération des tags...",
        "tags_found": "{count} tag(s) trouvé(s).",
        "directory_error": "Annuaire de stations indisponible : {error}",
        "config_error": "Erreur de configuration : {error}",
        "column_name": "Nom",
        "column_codec": "Codec",
        "column_bitrate": "Débit",
        "column_url": "URL",
        "column_tag": "Tag",
        "column_stationcount": "Stations",
        "stations_title": "Stations",
        "tags_title": "Tags",
        "help_url": "URL de la station, du flux ou de la playlist.",
        "help_file": "Fichier playlist local à analyser.",
        "help_search": "Nom de la station suivi de mots-clés optionnels.",
        "help_timeout": "Délai d'attente en secondes (valeur configurée par défaut).",
        "help_config": "Fichier de configuration YAML.",
        "help_verbose": "Afficher les logs de débogage.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
    }
}

_current_lang = "en"

def get_default_lang():
    try:
        lang_code, _ = locale.getlocale()
        return "fr" if lang_code and lang_code.startswith("fr") else "en"
    except (ValueError, TypeError):
        return "en"

def get_lang():
    return _current_lang

def set_lang(lang: str):
    global _current_lang
    _current_lang = lang if lang in MESSAGES else "en"

def get_message(key, **kwargs):
    lang = _current_lang
    if lang not in MESSAGES or key not in MESSAGES[lang]:
        # Fallback to English if key not found in current language
        lang = "en"

    message_template = MESSAGES[lang].get(key, f"Translation missing for key: {key}")

    try:
        return message_template.format(**kwargs)
    except KeyError as e:
        # This can happen if a placeholder is missing in kwargs
        return f"Formatting error for key '{key}': missing placeholder {e}"

# Initialize with default system language
set_lang(get_default_lang())
