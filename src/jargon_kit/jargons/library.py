from __future__ import annotations

import logging
from pathlib import Path

import yaml

from jargon_kit.errors import MalformedJargonError

from .jargon import Jargon
from .models import JargonDefinition
from .registry import JargonRegistry, as_definition

logger = logging.getLogger(__name__)


class JargonLibrary:
    """Loads every `*.yaml` jargon file in a directory into a registry.

    Files may extend each other (or jargons already in the registry);
    bases are always registered before the jargons built on them.
    """

    def __init__(self, directory: str, registry: JargonRegistry | None = None) -> None:
        self.registry = registry if registry is not None else JargonRegistry()
        logger.info("Initializing JargonLibrary from directory: %s", directory)
        definitions = self._load_all(Path(directory))
        for definition in self._ordered(definitions):
            self.registry.register(definition)
        logger.info("Loaded %d jargons", len(definitions))

    def get(self, name: str) -> Jargon:
        logger.debug("Getting jargon: name=%s", name)
        return self.registry.get(name)

    def list(self) -> list[str]:
        return list(self.registry.list().keys())

    def _load_all(self, directory: Path) -> dict[str, JargonDefinition]:
        definitions: dict[str, JargonDefinition] = {}
        for file_path in sorted(directory.glob("*.yaml")):
            definition = self._load_definition(file_path)
            if definition.name in definitions:
                raise MalformedJargonError(
                    f"Jargon '{definition.name}' is defined twice ({file_path})"
                )
            definitions[definition.name] = definition
            logger.debug("Loaded jargon: %s from %s", definition.name, file_path)
        return definitions

    def _load_definition(self, file_path: Path) -> JargonDefinition:
        try:
            with open(file_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise MalformedJargonError(
                f"Cannot parse jargon file {file_path}: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise MalformedJargonError(
                f"Jargon file {file_path} does not contain a mapping"
            )
        return as_definition(data)

    def _ordered(
        self, definitions: dict[str, JargonDefinition]
    ) -> list[JargonDefinition]:
        ordered: list[JargonDefinition] = []
        state: dict[str, str] = {}

        def visit(name: str, trail: tuple[str, ...]) -> None:
            if state.get(name) == "done":
                return
            if state.get(name) == "visiting":
                cycle = " -> ".join((*trail, name))
                raise MalformedJargonError(f"Jargon inheritance cycle: {cycle}")
            state[name] = "visiting"
            base = definitions[name].extends
            if base is not None and base in definitions:
                visit(base, (*trail, name))
            elif base is not None and base not in self.registry:
                raise MalformedJargonError(
                    f"Jargon '{name}' extends unknown jargon '{base}'"
                )
            state[name] = "done"
            ordered.append(definitions[name])

        for name in definitions:
            visit(name, ())
        return ordered
