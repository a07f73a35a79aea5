# -*- coding: utf-8 -*-
"""
StringEdit Localization Module
Human-readable messages surfaced by the editing core, in English and Turkish.
"""

from stringedit_logger import get_logger

logger = get_logger("locales")

SUPPORTED_UI_LANGUAGES = {
    "en": "English",
    "tr": "Türkçe",
}

DEFAULT_UI_LANGUAGE = "en"
_current_language = DEFAULT_UI_LANGUAGE


def set_language(lang_code: str):
    """Set the current UI language."""
    global _current_language
    if lang_code in SUPPORTED_UI_LANGUAGES:
        _current_language = lang_code
        logger.debug(f"UI language set to: {lang_code}")
    else:
        logger.warning(f"Unsupported language code '{lang_code}'. Keeping '{_current_language}'.")


def get_language() -> str:
    """Get the current UI language code."""
    return _current_language


def tr(message_key: str, **kwargs) -> str:
    """
    Translate a key to the current language.

    Args:
        message_key: Translation key
        **kwargs: Format parameters for the translated string

    Returns:
        Translated string, falling back to English, then to the key itself
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS["en"])
    text = translations.get(message_key) or TRANSLATIONS["en"].get(message_key, message_key)

    if kwargs:
        try:
            text = text.format(**kwargs)
        except KeyError as e:
            logger.warning(f"Missing format key {e} for translation '{message_key}'")

    return text


# =============================================================================
# TRANSLATIONS DICTIONARY
# =============================================================================

TRANSLATIONS = {
    "en": {
        # Insertions
        "collision_already_in_baseline": "{key} already in table!",
        "collision_already_queued": "{key} is already waiting to be pushed",
        "insert_empty": "Both key and value are required",

        # Edits
        "edit_empty_rejected": "Text cannot be empty",
        "edit_immutable_key": "{key} cannot be edited",
        "edit_duplicate_key": "{key} already exists",
        "edit_unknown_row": "Row {row} does not exist",

        # Commit
        "commit_nothing_pending": "There are no changes to push",
        "status_upload_successful": "Upload successful",

        # Session state
        "session_busy": "Another sync operation is still running",
        "session_closed": "This editing session has been closed",
        "switch_confirm": "You have {count} unsaved change(s). Switching will discard them.",

        # Loading states
        "status_fetching": "Checking credentials",
        "status_pulling": "Pulling latest changes",
        "status_pushing": "Pushing your changes",
        "status_switching": "Switching to {partition}",
        "status_complete": "Finishing...",
        "status_error": "Request Error: {detail}",

        # Sync errors
        "sync_no_credentials": "No stored credentials",
        "sync_bad_credentials": "The stored credentials were rejected",
        "sync_network": "Network error: {detail}",
        "sync_other": "Something went wrong: {detail}",
        "sync_unexpected": "Unexpected failure in {operation}: {detail}",
    },
    "tr": {
        "collision_already_in_baseline": "{key} zaten tabloda!",
        "collision_already_queued": "{key} zaten gönderilmeyi bekliyor",
        "insert_empty": "Anahtar ve değer zorunludur",

        "edit_empty_rejected": "Metin boş olamaz",
        "edit_immutable_key": "{key} düzenlenemez",
        "edit_duplicate_key": "{key} zaten mevcut",
        "edit_unknown_row": "{row}. satır mevcut değil",

        "commit_nothing_pending": "Gönderilecek değişiklik yok",
        "status_upload_successful": "Yükleme başarılı",

        "session_busy": "Başka bir senkronizasyon işlemi devam ediyor",
        "session_closed": "Bu düzenleme oturumu kapatıldı",
        "switch_confirm": "{count} kaydedilmemiş değişiklik var. Geçiş yapılırsa silinecek.",

        "status_fetching": "Kimlik bilgileri kontrol ediliyor",
        "status_pulling": "Son değişiklikler çekiliyor",
        "status_pushing": "Değişiklikleriniz gönderiliyor",
        "status_switching": "{partition} bölümüne geçiliyor",
        "status_complete": "Tamamlanıyor...",
        "status_error": "İstek hatası: {detail}",

        "sync_no_credentials": "Kayıtlı kimlik bilgisi yok",
        "sync_bad_credentials": "Kayıtlı kimlik bilgileri reddedildi",
        "sync_network": "Ağ hatası: {detail}",
        "sync_other": "Bir şeyler ters gitti: {detail}",
        "sync_unexpected": "{operation} sırasında beklenmeyen hata: {detail}",
    },
}
