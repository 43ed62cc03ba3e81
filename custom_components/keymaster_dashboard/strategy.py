"""Keymaster dashboard strategy.

Builds one Lovelace view per keymaster lock from the flat entity namespace.
Locks and their code slots are discovered from ``input_text.<lock>_name_<slot>``
entities. Every other per-slot entity is derived from the lock name and slot
number, so only the badges are checked against the snapshot.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from homeassistant.core import HomeAssistant

from .const import (
    ACCESS_COUNT_ICON,
    ACCESS_COUNT_SPEED,
    ADVANCED_OPTIONS_LABEL,
    BADGE_TEMPLATES,
    CARD_ENTITIES,
    CARD_FOLD_ENTITY_ROW,
    CARD_MARKDOWN,
    CARD_NUMBERBOX,
    CARD_VERTICAL_STACK,
    CUSTOM_WEEKDAYS_LABEL,
    NAME_TOKEN,
    NO_LOCKS_CONTENT,
    NO_LOCKS_PATH,
    NO_LOCKS_TITLE,
    ROW_DIVIDER,
    ROW_SECTION,
    SLOT_ACCESS_COUNT,
    SLOT_ACCESS_LIMIT,
    SLOT_ACTIVE,
    SLOT_CONNECTED,
    SLOT_DATE_RANGE,
    SLOT_ENABLED,
    SLOT_END_DATE,
    SLOT_NAME,
    SLOT_NAME_DOMAIN,
    SLOT_NAME_MARKER,
    SLOT_NOTIFY,
    SLOT_PIN,
    SLOT_RESET,
    SLOT_START_DATE,
    VIEW_ICON,
    VIEW_PATH_PREFIX,
    VIEW_TITLE_SUFFIX,
    WEEKDAY_TEMPLATES,
    WEEKDAYS,
)

_LOGGER = logging.getLogger(__name__)

StateSnapshot = Mapping[str, Any]


@dataclass(frozen=True)
class SlotEntity:
    lock_name: str
    slot: int


def snapshot_from_hass(hass: HomeAssistant) -> Dict[str, Any]:
    return {state.entity_id: state for state in hass.states.async_all()}


def parse_slot_entity(entity_id: str) -> Optional[SlotEntity]:
    """Parse ``input_text.<lock>_name_<slot>`` into a SlotEntity.

    Returns None for anything that does not follow that shape. Lock names may
    contain underscores; the first ``name`` token ends the lock name.
    """
    if not entity_id.startswith(SLOT_NAME_DOMAIN) or SLOT_NAME_MARKER not in entity_id:
        return None

    parts = entity_id[len(SLOT_NAME_DOMAIN):].split("_")
    name_index = parts.index(NAME_TOKEN) if NAME_TOKEN in parts else -1
    if name_index < 1 or not any(parts[:name_index]):
        _LOGGER.debug("Keymaster: Ignoring slot entity without lock name %s", entity_id)
        return None

    # the marker guarantees a token after "name", but it may be empty or non-numeric
    slot_token = parts[name_index + 1] if name_index + 1 < len(parts) else ""
    if not (slot_token.isascii() and slot_token.isdigit()):
        _LOGGER.debug("Keymaster: Ignoring slot entity with bad slot %s", entity_id)
        return None

    return SlotEntity(lock_name="_".join(parts[:name_index]), slot=int(slot_token))


def group_locks(snapshot: StateSnapshot) -> Dict[str, List[int]]:
    """Collect slot numbers per lock name, in first-seen lock order."""
    groups: Dict[str, List[int]] = {}
    for entity_id in snapshot:
        parsed = parse_slot_entity(entity_id)
        if parsed is not None:
            groups.setdefault(parsed.lock_name, []).append(parsed.slot)
    return groups


def _divider() -> dict:
    return {"type": ROW_DIVIDER}


def _fold(label: str, entities: list) -> dict:
    return {
        "type": CARD_FOLD_ENTITY_ROW,
        "head": {"type": ROW_SECTION, "label": label},
        "entities": entities,
    }


def _weekday_rows(lock: str, slot: int) -> list:
    rows: list = []
    for day in WEEKDAYS:
        if rows:
            rows.append(_divider())
        rows.extend(t.format(day=day, lock=lock, slot=slot) for t in WEEKDAY_TEMPLATES)
    return rows


def build_slot_card(lock: str, slot: int) -> dict:
    """Card for one code slot. Entities are emitted whether or not they exist."""

    def eid(template: str) -> str:
        return template.format(lock=lock, slot=slot)

    advanced = [
        eid(SLOT_RESET),
        _divider(),
        eid(SLOT_ACCESS_LIMIT),
        {
            "entity": eid(SLOT_ACCESS_COUNT),
            "type": CARD_NUMBERBOX,
            "icon": ACCESS_COUNT_ICON,
            "speed": ACCESS_COUNT_SPEED,
        },
        _divider(),
        eid(SLOT_DATE_RANGE),
        eid(SLOT_START_DATE),
        eid(SLOT_END_DATE),
        _fold(CUSTOM_WEEKDAYS_LABEL, _weekday_rows(lock, slot)),
    ]

    return {
        "type": CARD_VERTICAL_STACK,
        "cards": [
            {"type": CARD_MARKDOWN, "content": f"## Code {slot}"},
            {
                "type": CARD_ENTITIES,
                "show_header_toggle": False,
                "entities": [
                    eid(SLOT_NAME),
                    eid(SLOT_PIN),
                    eid(SLOT_ENABLED),
                    eid(SLOT_NOTIFY),
                    _divider(),
                    {"entity": eid(SLOT_CONNECTED), "state_color": True},
                    {"entity": eid(SLOT_ACTIVE), "state_color": True},
                    _fold(ADVANCED_OPTIONS_LABEL, advanced),
                ],
            },
        ],
    }


def format_lock_title(lock: str) -> str:
    formatted = lock[:1].upper() + lock[1:].replace("_", " ")
    return f"{formatted} {VIEW_TITLE_SUFFIX}"


def _is_present(snapshot: StateSnapshot, entity_id: str) -> bool:
    return snapshot.get(entity_id) is not None


def build_badges(lock: str, snapshot: StateSnapshot) -> List[str]:
    badges = (template.format(lock=lock) for template in BADGE_TEMPLATES)
    return [entity_id for entity_id in badges if _is_present(snapshot, entity_id)]


def build_lock_view(lock: str, slots: List[int], snapshot: StateSnapshot) -> dict:
    return {
        "title": format_lock_title(lock),
        "path": f"{VIEW_PATH_PREFIX}{lock}",
        "icon": VIEW_ICON,
        "badges": build_badges(lock, snapshot),
        "cards": [build_slot_card(lock, slot) for slot in sorted(set(slots))],
    }


def no_locks_view() -> dict:
    return {
        "title": NO_LOCKS_TITLE,
        "path": NO_LOCKS_PATH,
        "cards": [{"type": CARD_MARKDOWN, "content": NO_LOCKS_CONTENT}],
    }


def generate(snapshot: StateSnapshot) -> dict:
    """Generate the dashboard ``{"views": [...]}`` for a state snapshot.

    Always returns at least one view; with no locks discovered the single
    ``no-locks`` placeholder view is returned instead.
    """
    views = [
        build_lock_view(lock, slots, snapshot)
        for lock, slots in group_locks(snapshot).items()
    ]
    if not views:
        _LOGGER.debug("Keymaster: No locks discovered, returning placeholder view")
        views = [no_locks_view()]
    return {"views": views}
