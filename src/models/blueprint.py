"""Blueprint field declarations and YAML blueprint loading.

A blueprint lists the fields a model's content is expected to hold. The
storage layer consumes the ``translate`` flag when normalizing non-default
translations; content conversion consumes field types and defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, cast

import yaml

from codec.txt_codec import encode_value
from core.constants import BLUEPRINT_FILE_SUFFIX, DEFAULT_FIELD_TYPE
from core.errors import FolioBlueprintError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class BlueprintField:
    """One declared blueprint field.

    Attributes:
        name: Lower-cased field name.
        type: Field type, such as ``text`` or ``textarea``.
        translate: Whether non-default languages may hold their own value.
        default: Default value used when converting content.
    """

    name: str
    type: str = DEFAULT_FIELD_TYPE
    translate: bool = True
    default: str | None = None


@dataclass(frozen=True)
class Blueprint:
    """Named, ordered field declarations for a model."""

    name: str
    title: str | None = None
    fields: tuple[BlueprintField, ...] = ()

    def field(self, name: str) -> BlueprintField | None:
        """Return the field declaration for a case-insensitive name."""
        key = name.lower()
        for field in self.fields:
            if field.name == key:
                return field
        return None

    def untranslatable_fields(self) -> tuple[BlueprintField, ...]:
        return tuple(field for field in self.fields if not field.translate)


class BlueprintRegistry:
    """Blueprint lookup over in-memory definitions and a YAML directory."""

    def __init__(
        self,
        root: Path | None = None,
        blueprints: Mapping[str, Blueprint] | None = None,
    ) -> None:
        self._root = root
        self._blueprints: dict[str, Blueprint] = dict(blueprints or {})

    def register(self, blueprint: Blueprint) -> None:
        self._blueprints[blueprint.name] = blueprint

    def find(self, name: str, fallback: str | None = None) -> Blueprint:
        """Return a blueprint by name, trying the fallback name second.

        Args:
            name: Blueprint name such as ``pages/article``.
            fallback: Name tried when ``name`` is unknown.

        Returns:
            The resolved blueprint, or an empty blueprint named ``name``
            when neither exists.

        Raises:
            FolioBlueprintError: If a blueprint file exists but is invalid.
        """
        for candidate in (name, fallback):
            if candidate is None:
                continue
            blueprint = self._lookup(candidate)
            if blueprint is not None:
                return blueprint
        _LOGGER.warning("blueprint_missing", name=name, fallback=fallback)
        return Blueprint(name=name)

    def _lookup(self, name: str) -> Blueprint | None:
        blueprint = self._blueprints.get(name)
        if blueprint is not None:
            return blueprint
        if self._root is None:
            return None
        blueprint_file = self._root / f"{name}{BLUEPRINT_FILE_SUFFIX}"
        if not blueprint_file.is_file():
            return None
        blueprint = load_blueprint(blueprint_file, name)
        self._blueprints[name] = blueprint
        return blueprint


def load_blueprint(blueprint_file: Path, name: str) -> Blueprint:
    """Load and validate a YAML blueprint from disk.

    Args:
        blueprint_file: Path to the YAML file.
        name: Blueprint name assigned to the result.

    Returns:
        Parsed blueprint.

    Raises:
        FolioBlueprintError: If the file is unreadable or malformed.
    """
    try:
        payload = yaml.safe_load(blueprint_file.read_text(encoding="utf-8"))
    except OSError as error:
        raise FolioBlueprintError(
            f"Failed to read blueprint at {blueprint_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise FolioBlueprintError(
            f"Failed to parse YAML blueprint at {blueprint_file}: {error}. Fix YAML syntax."
        ) from error
    return blueprint_from_payload(payload or {}, name, str(blueprint_file))


def blueprint_from_payload(payload: object, name: str, source: str = "<memory>") -> Blueprint:
    """Build a blueprint from a decoded mapping."""
    if not isinstance(payload, Mapping):
        raise FolioBlueprintError(
            f"Invalid blueprint {source}: expected mapping, got {type(payload).__name__}."
        )
    raw_fields = payload.get("fields") or {}
    if not isinstance(raw_fields, Mapping):
        raise FolioBlueprintError(f"Invalid blueprint {source}: 'fields' must be a mapping.")
    fields = tuple(
        _parse_field(str(field_name), field_payload, source)
        for field_name, field_payload in cast(Mapping[object, object], raw_fields).items()
    )
    title = payload.get("title")
    return Blueprint(name=name, title=str(title) if title is not None else None, fields=fields)


def _parse_field(field_name: str, payload: object, source: str) -> BlueprintField:
    if payload is None or payload is True:
        payload = {}
    if not isinstance(payload, Mapping):
        raise FolioBlueprintError(
            f"Invalid field '{field_name}' in blueprint {source}: expected mapping."
        )
    translate = payload.get("translate", True)
    if not isinstance(translate, bool):
        raise FolioBlueprintError(
            f"Invalid field '{field_name}' in blueprint {source}: 'translate' must be boolean."
        )
    default = payload.get("default")
    return BlueprintField(
        name=field_name.lower(),
        type=str(payload.get("type", DEFAULT_FIELD_TYPE)),
        translate=translate,
        default=encode_value(default) if default is not None else None,
    )
