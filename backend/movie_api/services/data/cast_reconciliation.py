"""
Cast Reconciliation - Bring a movie's cast in line with a list of person ids

Resolution happens before any mutation: if a single requested id is unknown
the whole request is rejected and the cast is left untouched. Otherwise the
cast is changed by the smallest delta that makes it equal to the requested
set; people present on both sides keep their existing entries.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, MutableSequence, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.core.exceptions import InvalidReferenceError
from movie_api.core.logging import get_logger
from movie_api.models import Person

logger = get_logger(__name__)


@dataclass
class CastDelta:
    """People to detach from and attach to a cast"""
    to_remove: List[Person] = field(default_factory=list)
    to_add: List[Person] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_remove and not self.to_add


def distinct_ids(ids: Iterable[int]) -> List[int]:
    """Drop repeated ids, keeping first-seen order"""
    return list(dict.fromkeys(ids))


async def resolve_cast(db: AsyncSession, target_ids: Iterable[int]) -> List[Person]:
    """Load the people behind target_ids, failing if any id does not exist"""

    requested = distinct_ids(target_ids)
    if not requested:
        return []

    result = await db.execute(
        select(Person).where(Person.id.in_(requested)).order_by(Person.id)
    )
    people = list(result.scalars().all())

    if len(people) != len(requested):
        missing = set(requested) - {person.id for person in people}
        logger.warning("Rejected cast with unknown people", missing_ids=sorted(missing))
        raise InvalidReferenceError(missing)

    return people


def compute_cast_delta(current_cast: Sequence[Person], resolved: Sequence[Person]) -> CastDelta:
    """Diff the current cast against the resolved target people by id"""

    target_ids = {person.id for person in resolved}
    current_ids = {person.id for person in current_cast}

    return CastDelta(
        to_remove=[person for person in current_cast if person.id not in target_ids],
        to_add=[person for person in resolved if person.id not in current_ids],
    )


def apply_cast_delta(cast: MutableSequence[Person], delta: CastDelta) -> None:
    """Apply removals first, then additions, to a relationship collection"""
    for person in delta.to_remove:
        cast.remove(person)
    for person in delta.to_add:
        cast.append(person)
