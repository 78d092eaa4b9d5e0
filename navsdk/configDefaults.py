"""Parser configuration backup used when parser-config.json is missing or invalid."""

DEFAULT_PARSER_CONFIG = {
    "_comment_purpose": "Sentence registry and logging settings for navsdk parsers.",
    "_comment_configVersion": "Bump configVersion when adding/removing required fields or changing schema structure.",
    "_comment_talkers": "Talker prefixes registered for every built-in talker sentence (GGA, RMC, ...).",
    "_comment_aliases": "Extra type keys mapped to a built-in sentence code or proprietary key, e.g. {\"BDGSV\": \"GSV\"}.",
    "_comment_exclude": "Type keys removed from the registry after builtins and aliases are loaded.",
    "configVersion": "1.0",
    "registry": {
        "talkers": ["GL", "GN", "GP"],
        "aliases": {},
        "exclude": []
    },
    "logging": {
        "level": "INFO",
        "console": True,
        "logDir": None,
        "utc": False
    }
}
