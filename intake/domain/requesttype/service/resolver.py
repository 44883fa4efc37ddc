"""Resolution of a request type's effective properties along its extension chain."""

import logging
from collections.abc import Mapping

from intake.domain.requesttype.model.effective import EffectivePropertySet
from intake.domain.requesttype.model.request_type import RequestType
from intake.domain.requesttype.model.value import RequestTypeId
from intake.domain.requesttype.port.ancestor_lookup import AncestorLookup
from intake.domain.shared.error import (
    CycleDetectedError,
    ExtensionDepthExceededError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class MappingAncestorLookup(AncestorLookup):
    """AncestorLookup over request types that were loaded up front."""

    def __init__(self, request_types: Mapping[RequestTypeId, RequestType]) -> None:
        self._request_types = request_types

    def get_parent(self, request_type: RequestType) -> RequestType | None:
        if request_type.extends is None:
            return None
        parent = self._request_types.get(request_type.extends)
        if parent is None:
            raise NotFoundError(
                f"Request type {request_type.extends} "
                f"(extended by {request_type.id}) not found"
            )
        return parent


class ExtensionResolver:
    """Merges a request type's properties with those of its ancestors.

    The closest definition of a title wins: a request type's own properties
    shadow inherited ones, and a parent's shadow its grandparent's. A chain
    that revisits a request type raises CycleDetectedError; one with more
    than ``max_depth`` ancestors raises ExtensionDepthExceededError. Neither
    yields a partial result.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        self.max_depth = max_depth

    def resolve(self, request_type: RequestType, lookup: AncestorLookup) -> EffectivePropertySet:
        visited = {request_type.id}
        result = EffectivePropertySet(request_type.properties)

        depth = 0
        current = lookup.get_parent(request_type)
        while current is not None:
            if current.id in visited:
                logger.warning(
                    "Extension cycle at request type %s (%s) while resolving %s",
                    current.id,
                    current.name,
                    request_type.id,
                )
                raise CycleDetectedError(current.id, current.name)

            depth += 1
            if self.max_depth is not None and depth > self.max_depth:
                raise ExtensionDepthExceededError(request_type.id, self.max_depth)

            visited.add(current.id)
            for prop in current.properties:
                result.inherit(prop)

            current = lookup.get_parent(current)

        logger.debug(
            "Resolved request type %s: %d properties over %d ancestors",
            request_type.id,
            len(result),
            depth,
        )
        return result
