"""
Aggregate Counter Maintenance

Schools and Fields carry a denormalized `count` of the MOUs/Courses that
reference them by name. Creating an MOU or Course bumps the matching
aggregate, creating it with count = 1 the first time a name is seen.

The find-or-create and the increment happen in a single
INSERT ... ON CONFLICT DO UPDATE statement, so concurrent creations for the
same name can neither insert duplicate rows nor lose an increment.

The statement only flushes; the caller commits it together with the owning
record so both land or neither does.
"""

import logging
from typing import TypeVar

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from mou_tracker.core.errors import ValidationError
from mou_tracker.modules.shared.models import BaseModel

logger = logging.getLogger(__name__)

AggregateT = TypeVar("AggregateT", bound=BaseModel)


def build_increment_statement(model: type[AggregateT], key_column: InstrumentedAttribute, name: str):
    """
    Build the atomic upsert-with-increment statement for one aggregate row.

    Args:
        model: Aggregate model with a `count` column
        key_column: Unique column holding the aggregate's name
        name: Already-trimmed name value

    Returns:
        An ORM-enabled INSERT ... ON CONFLICT DO UPDATE ... RETURNING statement
    """
    return (
        insert(model)
        .values({key_column.key: name, "count": 1})
        .on_conflict_do_update(
            index_elements=[key_column],
            set_={"count": model.count + 1, "updated_at": func.now()},
        )
        .returning(model)
        .execution_options(populate_existing=True)
    )


async def ensure_aggregate_and_increment(
    db: AsyncSession,
    model: type[AggregateT],
    key_column: InstrumentedAttribute,
    name_value: str,
) -> AggregateT:
    """
    Find-or-create the aggregate named `name_value` and add one to its count.

    Args:
        db: Database session (not committed here)
        model: Aggregate model (School or Field)
        key_column: The model's unique name column
        name_value: Referenced name; surrounding whitespace is ignored

    Returns:
        The aggregate row with its post-increment count

    Raises:
        ValidationError: If the name is empty after trimming
    """
    name = (name_value or "").strip()
    if not name:
        raise ValidationError(f"{key_column.key} must not be empty")

    result = await db.scalars(build_increment_statement(model, key_column, name))
    aggregate = result.one()

    logger.info(f"{model.__name__} '{name}' count is now {aggregate.count}")
    return aggregate
