from enum import Enum


class SpecificationOperator(str, Enum):
    """Supported operators for criteria predicates."""

    # Standard comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    IN = "in"
    NOT_IN = "not_in"
    BETWEEN = "between"
    NOT_BETWEEN = "not_between"

    # String operations
    LIKE = "like"
    NOT_LIKE = "not_like"
    ILIKE = "ilike"
    CONTAINS = "contains"
    ICONTAINS = "icontains"
    STARTSWITH = "startswith"
    ISTARTSWITH = "istartswith"
    ENDSWITH = "endswith"
    IENDSWITH = "iendswith"
    REGEX = "regex"
    IREGEX = "iregex"

    # Null/Empty checks
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"

    # Logical operators
    AND = "and"
    OR = "or"
    NOT = "not"


# Method names usable inside criteria selectors, e.g.
# ``lambda p: p.name.startswith("VIP")`` or ``lambda p: p.age.between(18, 65)``.
METHOD_OPERATORS: dict[str, SpecificationOperator] = {
    "startswith": SpecificationOperator.STARTSWITH,
    "istartswith": SpecificationOperator.ISTARTSWITH,
    "endswith": SpecificationOperator.ENDSWITH,
    "iendswith": SpecificationOperator.IENDSWITH,
    "contains": SpecificationOperator.CONTAINS,
    "icontains": SpecificationOperator.ICONTAINS,
    "like": SpecificationOperator.LIKE,
    "not_like": SpecificationOperator.NOT_LIKE,
    "ilike": SpecificationOperator.ILIKE,
    "regex": SpecificationOperator.REGEX,
    "iregex": SpecificationOperator.IREGEX,
    "in_": SpecificationOperator.IN,
    "not_in": SpecificationOperator.NOT_IN,
    "between": SpecificationOperator.BETWEEN,
    "not_between": SpecificationOperator.NOT_BETWEEN,
    "is_null": SpecificationOperator.IS_NULL,
    "is_not_null": SpecificationOperator.IS_NOT_NULL,
    "is_empty": SpecificationOperator.IS_EMPTY,
    "is_not_empty": SpecificationOperator.IS_NOT_EMPTY,
}
