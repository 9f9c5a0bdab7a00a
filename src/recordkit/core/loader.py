# recordkit/core/loader.py
"""
Seed file loading.

Seed files are YAML documents with a top-level ``entities`` list. String
values may reference environment variables as ``${VAR}`` or
``${VAR:-default}``.
"""
from __future__ import annotations

import logging
import os
import re
from glob import glob
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from recordkit.contracts.entity import Entity
from recordkit.core.errors import SeedFileError

logger = logging.getLogger(__name__)

# Pattern for environment variable substitution: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in loaded values.

    Raises:
        ValueError: If a referenced variable is not set and has no default
    """
    if isinstance(value, str):
        return _substitute_string(value)
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    else:
        return value


def _substitute_string(value: str) -> str:
    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        default = match.group(2)

        env_value = os.environ.get(var_name)

        if env_value is not None:
            return env_value
        elif default is not None:
            return default
        else:
            raise ValueError(
                f"Environment variable '{var_name}' is not set and no default provided"
            )

    return ENV_VAR_PATTERN.sub(replacer, value)


def resolve_paths(patterns: Iterable[str]) -> list[Path]:
    """Expand glob patterns into a sorted, de-duplicated list of files."""
    files: set[Path] = set()
    for pattern in patterns:
        files.update(Path(m).resolve() for m in glob(pattern) if Path(m).is_file())
    return sorted(files)


def load_seed_file(path: Path) -> list[Entity]:
    """
    Parse one seed file into entities.

    Raises:
        SeedFileError: If the document or any entry is malformed
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        logger.error("Failed to parse seed file '%s': %s", path, exc)
        raise SeedFileError(str(path), f"not valid YAML ({exc})") from exc

    if not isinstance(data, dict):
        raise SeedFileError(str(path), "expected a mapping with an 'entities' key")

    try:
        raw_entities = substitute_env_vars(data.get("entities", []))
    except ValueError as exc:
        logger.error("Failed to substitute variables in seed file '%s': %s", path, exc)
        raise SeedFileError(str(path), str(exc)) from exc

    if not isinstance(raw_entities, list):
        raise SeedFileError(str(path), "'entities' must be a list")

    entities: list[Entity] = []
    for index, raw in enumerate(raw_entities):
        try:
            entities.append(Entity.model_validate(raw))
        except ValidationError as exc:
            logger.error("Invalid entity #%d in '%s'", index, path)
            raise SeedFileError(
                str(path), f"entity #{index} is invalid", errors=exc.errors()
            ) from exc
    return entities


def load_entities(patterns: Iterable[str]) -> list[Entity]:
    """
    Load entities from every seed file matching ``patterns``.

    Files are read in sorted path order; an entity in a later file
    replaces an earlier one with the same id.
    """
    patterns = list(patterns)
    files = resolve_paths(patterns)
    if not files:
        logger.warning("No seed files found matching patterns: %s", patterns)
        return []

    logger.info("Loading seed files: %s", [str(f) for f in files])

    merged: dict[int, Entity] = {}
    for f in files:
        for entity in load_seed_file(f):
            merged[entity.id] = entity

    logger.info("Loaded %d entit(ies)", len(merged))
    return list(merged.values())
