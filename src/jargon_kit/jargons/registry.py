import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from jargon_kit.errors import MalformedJargonError
from jargon_kit.observability import names
from jargon_kit.observability.base import MetricsHook, NoOpMetricsHook

from .jargon import Jargon, build_jargon, extend
from .models import JargonDefinition, Rule

logger = logging.getLogger(__name__)


class JargonRegistry:
    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self._jargons: dict[str, Jargon] = {}
        self.metrics_hook = metrics_hook

    def register(
        self, jargon: Jargon | JargonDefinition | Mapping[str, Any]
    ) -> Jargon:
        if not isinstance(jargon, Jargon):
            jargon = self._build(as_definition(jargon))

        if jargon.name in self._jargons:
            raise ValueError(f"Jargon '{jargon.name}' already registered")

        self._jargons[jargon.name] = jargon
        self.metrics_hook.increment(names.JARGONS_REGISTERED_TOTAL)
        logger.debug("Registered jargon: %s", jargon.name)
        return jargon

    def extend(
        self,
        base: str | Jargon,
        overrides: Sequence[Rule] | JargonDefinition,
        *,
        name: str,
    ) -> Jargon:
        base_jargon = self.get(base) if isinstance(base, str) else base
        return self.register(extend(base_jargon, overrides, name=name))

    def get(self, name: str) -> Jargon:
        try:
            return self._jargons[name]
        except KeyError:
            logger.error("Jargon not found: %s", name)
            raise KeyError(f"Jargon '{name}' not found")

    def resolve(self, name: str, marker: str | None) -> Rule:
        return self.get(name).resolve(marker)

    def remove(self, name: str) -> None:
        try:
            del self._jargons[name]
            logger.debug("Removed jargon: %s", name)
        except KeyError:
            logger.error("Cannot remove jargon, not found: %s", name)
            raise KeyError(f"Jargon '{name}' not found")

    def list(self) -> dict[str, Jargon]:
        # return a shallow copy to avoid mutation
        return dict(self._jargons)

    def __contains__(self, name: str) -> bool:
        return name in self._jargons

    def _build(self, definition: JargonDefinition) -> Jargon:
        base = None
        if definition.extends is not None:
            if definition.extends not in self._jargons:
                logger.error(
                    "Base jargon %s of %s is not registered",
                    definition.extends,
                    definition.name,
                )
                raise MalformedJargonError(
                    f"Jargon '{definition.name}' extends unregistered "
                    f"jargon '{definition.extends}'"
                )
            base = self._jargons[definition.extends]
        return build_jargon(definition, base)


def as_definition(data: JargonDefinition | Mapping[str, Any]) -> JargonDefinition:
    """Validate raw mapping data into a `JargonDefinition`."""
    if isinstance(data, JargonDefinition):
        return data
    try:
        return JargonDefinition(**data)
    except ValidationError as exc:
        raise MalformedJargonError(
            f"Invalid jargon definition '{data.get('name', '?')}': {exc}"
        ) from exc
    except TypeError as exc:
        raise MalformedJargonError(f"Invalid jargon definition: {exc}") from exc
