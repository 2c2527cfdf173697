from __future__ import annotations

from typing import List

from squad_capacity.capacity.capacity_models import SquadMembership
from squad_capacity.capacity.errors import InvalidDedicationError
from squad_capacity.utils.logger import get_logger

logger = get_logger(__name__)


def resolve_members(repository, squad_id) -> List[SquadMembership]:
    """
    Active members of a squad, in fetch order, with their dedication.
    """
    members: List[SquadMembership] = []

    for m in repository.find_squad_members(squad_id):
        if not 0 <= m.dedication_pct <= 100:
            raise InvalidDedicationError(m.person.id, m.dedication_pct)
        if not m.person.active:
            logger.debug("Skipping inactive person %s in squad %s", m.person.id, squad_id)
            continue
        members.append(m)

    return members
