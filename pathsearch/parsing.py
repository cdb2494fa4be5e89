"""Value parsing for PATH-style lists and `PATHSEARCH_*` / YAML switches."""

from __future__ import annotations


_SWITCH_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as a stripped string, or `None` when it is missing or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def split_list_value(value: str, separator: str) -> list[str]:
    """Split a separator-delimited value into trimmed, non-blank entries."""

    entries: list[str] = []
    for raw_entry in value.split(separator):
        entry = normalize_optional_string(raw_entry)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_switch(value: object, field_name: str) -> bool:
    """Parse an on/off setting from YAML or an environment variable.

    YAML booleans pass through; text accepts `true`/`false`, `1`/`0`,
    `yes`/`no` and `on`/`off` in any case.

    Raises:
        ValueError: If the value is blank or not a recognized token.
    """

    if isinstance(value, bool):
        return value

    token = (normalize_optional_string(value) or "").lower()
    if token not in _SWITCH_TOKENS:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return _SWITCH_TOKENS[token]
