"""Application layer: bootstrap, language catalogue and settings persistence."""

from .language_store import (  # noqa: F401
    LanguageSettings,
    load_language_settings,
    save_language_settings,
    save_languages_order,
    clear_languages_order,
    SETTINGS_VERSION,
)
from .languages import (  # noqa: F401
    SUPPORTED_LANGUAGES,
    DEFAULT_ORDER,
    UnknownLanguageError,
    language_name,
    resolve_order,
    rows_for_settings,
    load_current_rows,
)
from .bootstrap import AppContext, create_app  # noqa: F401
