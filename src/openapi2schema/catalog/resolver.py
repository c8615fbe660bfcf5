"""Reference lookup against a catalog."""

from openapi2schema.catalog.base import Catalog, Definition


def resolve(catalog: Catalog, ref: str | None) -> Definition:
    """Return the definition for `ref`, or an empty definition if it is unknown.

    Unresolvable references are not an error: callers get a definition
    with no description and no properties.
    """
    if not ref:
        return Definition()
    return catalog.definitions.get(ref) or Definition()
