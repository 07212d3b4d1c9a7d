"""Single-document persistence for a space tree.

The document is JSON by default, or YAML when the file ends in .yaml/.yml.
Saves overwrite the file in place; there is no locking or atomic replace.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from puha.errors import DocumentFormatError, StoreIOError
from puha.space.models import Space

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")

_SPACE_FIELDS = {"name": str, "items": list, "spaces": list, "root": bool}
_ITEM_FIELDS = {"name": str, "description": str}


def _check_fields(data: Any, fields: dict[str, type], where: str) -> None:
    if not isinstance(data, dict):
        raise DocumentFormatError(f"{where}: expected a mapping, got {type(data).__name__}")
    for key, expected in fields.items():
        if key not in data:
            raise DocumentFormatError(f"{where}: missing field '{key}'")
        if not isinstance(data[key], expected):
            raise DocumentFormatError(
                f"{where}.{key}: expected {expected.__name__}, got {type(data[key]).__name__}"
            )


def validate_document(data: Any, where: str = "$") -> None:
    """Raise DocumentFormatError unless ``data`` has the space tree shape."""
    _check_fields(data, _SPACE_FIELDS, where)
    for i, item in enumerate(data["items"]):
        _check_fields(item, _ITEM_FIELDS, f"{where}.items[{i}]")
    for i, child in enumerate(data["spaces"]):
        validate_document(child, f"{where}.spaces[{i}]")


class SpaceStore:
    """Load and save the space tree document at ``path``."""

    def __init__(self, path: Path, indent: int = 2) -> None:
        self.path = Path(path)
        self.indent = indent

    @property
    def format(self) -> str:
        return "yaml" if self.path.suffix.lower() in _YAML_SUFFIXES else "json"

    def exists(self) -> bool:
        return self.path.exists()

    # ── Load ──────────────────────────────────────────────────

    def load(self) -> Space:
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentFormatError(f"{self.path}: not valid UTF-8: {e}") from e
        except OSError as e:
            raise StoreIOError(f"cannot read {self.path}: {e}") from e

        try:
            data = self._parse(text)
            validate_document(data)
            root = Space.from_dict(data)
        except RecursionError as e:
            raise DocumentFormatError(f"{self.path}: spaces nested too deeply") from e
        logger.debug("Loaded %s (%s)", self.path, self.format)
        return root

    def _parse(self, text: str) -> Any:
        if self.format == "yaml":
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise DocumentFormatError(f"{self.path}: invalid YAML: {e}") from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"{self.path}: invalid JSON: {e}") from e

    # ── Save ──────────────────────────────────────────────────

    def save(self, root: Space) -> None:
        # Render and encode fully before opening the file; opening truncates it.
        try:
            data = self._render(root.to_dict()).encode("utf-8")
        except UnicodeEncodeError as e:
            raise DocumentFormatError(f"{self.path}: cannot encode as UTF-8: {e}") from e
        except RecursionError as e:
            raise DocumentFormatError(f"{self.path}: spaces nested too deeply") from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data)
        except OSError as e:
            raise StoreIOError(f"cannot write {self.path}: {e}") from e
        logger.debug("Saved %s (%d bytes)", self.path, len(data))

    def _render(self, data: dict[str, Any]) -> str:
        if self.format == "yaml":
            return yaml.safe_dump(
                data, sort_keys=False, allow_unicode=True, indent=self.indent
            )
        return json.dumps(data, ensure_ascii=False, indent=self.indent) + "\n"
