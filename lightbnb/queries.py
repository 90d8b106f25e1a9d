"""
SQL statements for the LightBnB data-access layer.

Every statement is a ``ParameterizedStatement``: text using PostgreSQL's positional
``$1..$n`` placeholders plus the tuple of values bound to them. The only dynamic
statement is the property listing, built by ``build_property_listing_query``.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Mapping, NamedTuple, Optional, Tuple, Union
from lightbnb.schemas.property import PropertyCreate, PropertyFilterOptions


DEFAULT_LIMIT = 10

AVERAGE_RATING_SUBQUERY = (
    "(SELECT AVG(rating) FROM property_reviews "
    "WHERE property_reviews.property_id = properties.id)"
)

USER_WITH_EMAIL_QUERY = "SELECT * FROM users WHERE email=$1"

USER_WITH_ID_QUERY = "SELECT * FROM users WHERE id=$1"

INSERT_USER_QUERY = "INSERT INTO users (name, email, password) VALUES ($1,$2,$3) RETURNING *"

GUEST_RESERVATIONS_QUERY = (
    f"SELECT properties.*, {AVERAGE_RATING_SUBQUERY} AS average_rating "
    "FROM properties "
    "JOIN reservations ON properties.id = reservations.property_id "
    "WHERE reservations.guest_id = $1 "
    "LIMIT $2"
)

PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

INSERT_PROPERTY_QUERY = (
    f"INSERT INTO properties ({','.join(PROPERTY_COLUMNS)}) "
    f"VALUES ({','.join(f'${i}' for i in range(1, len(PROPERTY_COLUMNS) + 1))}) "
    "RETURNING *"
)

PROPERTY_LISTING_BASE_QUERY = (
    f"SELECT properties.*, {AVERAGE_RATING_SUBQUERY} AS average_rating "
    "FROM properties "
    "WHERE 1=1"
)


class ParameterizedStatement(NamedTuple):
    """SQL text with ``$n`` placeholders and the values bound to them, in order."""

    text: str
    values: Tuple[Any, ...] = ()


def to_cents(amount: Union[int, float, Decimal, str]) -> int:
    """Convert a major-unit currency amount to integer minor units (cents)."""
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _unchanged(value: Any) -> Any:
    return value


class FilterDimension(NamedTuple):
    """One optional listing filter: predicate template, option extractor, value transform."""

    template: str
    extract: Callable[[PropertyFilterOptions], Any]
    transform: Callable[[Any], Any]


# Order fixes placeholder numbering only; the conditions are AND-ed together.
PROPERTY_FILTER_DIMENSIONS: Tuple[FilterDimension, ...] = (
    FilterDimension("owner_id = {}", lambda o: o.owner_id, _unchanged),
    FilterDimension("cost_per_night >= {}", lambda o: o.minimum_price_per_night, to_cents),
    FilterDimension("cost_per_night <= {}", lambda o: o.maximum_price_per_night, to_cents),
    # Select-list aliases are not visible in WHERE, so the subquery is repeated.
    FilterDimension(AVERAGE_RATING_SUBQUERY + " >= {}", lambda o: o.minimum_rating, _unchanged),
)


def resolve_limit(limit: Optional[int]) -> int:
    """Absent or null limits fall back to ``DEFAULT_LIMIT``."""
    return DEFAULT_LIMIT if limit is None else limit


def build_property_listing_query(
    options: Union[PropertyFilterOptions, Mapping[str, Any], None] = None,
    limit: Optional[int] = None,
) -> ParameterizedStatement:
    """
    Build the filtered property listing statement.

    Each filter dimension whose option is set (truthy) contributes one
    ``AND <condition>`` clause and one bound value. The limit is always bound last.
    Values are not range checked.

    Args:
        options: Filter options, a mapping of option fields, or None for no filters
        limit: Maximum number of rows, defaults to ``DEFAULT_LIMIT``

    Returns:
        ParameterizedStatement for the listing query
    """
    if options is None:
        options = PropertyFilterOptions()
    elif not isinstance(options, PropertyFilterOptions):
        options = PropertyFilterOptions.model_validate(options)

    text = PROPERTY_LISTING_BASE_QUERY
    values = []

    for dimension in PROPERTY_FILTER_DIMENSIONS:
        value = dimension.extract(options)
        if not value:
            continue
        values.append(dimension.transform(value))
        text += " AND " + dimension.template.format(f"${len(values)}")

    values.append(resolve_limit(limit))
    text += f" LIMIT ${len(values)}"

    return ParameterizedStatement(text, tuple(values))


def user_with_email_query(email: str) -> ParameterizedStatement:
    return ParameterizedStatement(USER_WITH_EMAIL_QUERY, (email,))


def user_with_id_query(user_id: Any) -> ParameterizedStatement:
    return ParameterizedStatement(USER_WITH_ID_QUERY, (user_id,))


def insert_user_query(name: str, email: str, password: str) -> ParameterizedStatement:
    return ParameterizedStatement(INSERT_USER_QUERY, (name, email, password))


def guest_reservations_query(guest_id: Any, limit: Optional[int] = None) -> ParameterizedStatement:
    return ParameterizedStatement(GUEST_RESERVATIONS_QUERY, (guest_id, resolve_limit(limit)))


def insert_property_query(property_in: PropertyCreate) -> ParameterizedStatement:
    """Bind the fixed property columns in ``PROPERTY_COLUMNS`` order."""
    data = property_in.model_dump()
    return ParameterizedStatement(
        INSERT_PROPERTY_QUERY,
        tuple(data[column] for column in PROPERTY_COLUMNS),
    )
