# itemguard/utils/localization.py
"""
Localized, prefixed message delivery to players.
Catalogs come from config_messages.MESSAGE_CATALOGS; <locale>.json files in the
language directory override or extend them.
"""
import json
import os
from typing import Any, Dict, Optional, TYPE_CHECKING

from itemguard.config import DEFAULT_LOCALE, LANG_DIR, MESSAGE_CATALOGS, MESSAGE_PREFIX
from itemguard.utils.logger import Logger

if TYPE_CHECKING:
    from itemguard.player.core import Player


class Localizer:
    """Renders message keys for a locale, falling back to the default locale and then the key."""

    def __init__(self, catalogs: Optional[Dict[str, Dict[str, str]]] = None,
                 default_locale: str = DEFAULT_LOCALE, prefix: str = MESSAGE_PREFIX):
        source = catalogs if catalogs is not None else MESSAGE_CATALOGS
        self.catalogs: Dict[str, Dict[str, str]] = {locale: dict(messages) for locale, messages in source.items()}
        self.default_locale = default_locale
        self.prefix = prefix

    def load_directory(self, lang_dir: str = LANG_DIR) -> int:
        """Merge every <locale>.json in lang_dir into the catalogs. Returns the number of files loaded."""
        if not os.path.isdir(lang_dir):
            return 0

        loaded = 0
        for filename in sorted(os.listdir(lang_dir)):
            if not filename.endswith(".json"):
                continue
            locale = filename[:-len(".json")]
            path = os.path.join(lang_dir, filename)
            try:
                with open(path, 'r', encoding="utf-8") as f:
                    messages = json.load(f)
            except (OSError, ValueError) as e:
                Logger.error("Localizer", f"Error loading language file {path}: {e}")
                continue
            if not isinstance(messages, dict):
                Logger.warning("Localizer", f"Language file {path} is not a JSON object. Skipping.")
                continue
            self.catalogs.setdefault(locale, {}).update({str(k): str(v) for k, v in messages.items()})
            loaded += 1
        return loaded

    def get_template(self, locale: Optional[str], key: str) -> Optional[str]:
        for candidate in (locale, self.default_locale):
            if candidate and key in self.catalogs.get(candidate, {}):
                return self.catalogs[candidate][key]
        return None

    def format(self, locale: Optional[str], key: str, *args: Any) -> str:
        template = self.get_template(locale, key)
        if template is None:
            Logger.warning("Localizer", f"Missing message key '{key}'.", locale=locale)
            return " ".join([key] + [str(arg) for arg in args])
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            Logger.warning("Localizer", f"Bad template for '{key}': {e}", locale=locale)
            return template

    def send_prefixed(self, player: 'Player', key: str, *args: Any) -> str:
        message = self.prefix + self.format(getattr(player, "locale", None), key, *args)
        player.send_message(message)
        return message


_localizer: Optional[Localizer] = None

def get_localizer() -> Localizer:
    """Shared localizer, created with the default catalogs plus any files in LANG_DIR."""
    global _localizer
    if _localizer is None:
        _localizer = Localizer()
        _localizer.load_directory()
    return _localizer

def set_localizer(localizer: Optional[Localizer]) -> None:
    global _localizer
    _localizer = localizer

def send_prefixed_localized_message(player: 'Player', key: str, *args: Any) -> str:
    return get_localizer().send_prefixed(player, key, *args)
