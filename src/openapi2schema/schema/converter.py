"""Recursive conversion of definition properties into inlined JSON Schema properties."""

import logging

from openapi2schema.catalog.base import Catalog, FieldSchema
from openapi2schema.catalog.resolver import resolve
from openapi2schema.errors import CyclicReferenceError
from openapi2schema.schema.models import OutputProperty
from openapi2schema.schema.naming import parse_reference

logger = logging.getLogger(__name__)


def convert(catalog: Catalog, properties: dict[str, FieldSchema], context_ref: str) -> dict[str, OutputProperty]:
    """Convert a property map, inlining every referenced definition.

    `context_ref` is the reference of the definition owning `properties`;
    `kind` and `apiVersion` fields get their constant from it.

    Raises CyclicReferenceError when a definition is reached again while it
    is still being expanded, and MalformedReferenceError when an identity
    field sits in a definition whose reference does not name a resource.
    """
    chain = (context_ref,) if context_ref else ()
    return _convert(catalog, properties, context_ref, chain)


def _convert(
    catalog: Catalog,
    properties: dict[str, FieldSchema],
    context_ref: str,
    chain: tuple[str, ...],
) -> dict[str, OutputProperty]:
    result = {}
    for field in sorted(properties):
        prop = properties[field]
        converted = _convert_field(catalog, field, prop, context_ref, chain)
        result[field] = _inject_identity(field, converted, context_ref)
    return result


def _convert_field(
    catalog: Catalog,
    field: str,
    prop: FieldSchema,
    context_ref: str,
    chain: tuple[str, ...],
) -> OutputProperty:
    type_tag = prop.type_tag

    if type_tag is None:
        ref = _reference_of(prop)
        if ref:
            nested = _expand(catalog, ref, chain)
        elif prop.properties:
            nested = _convert(catalog, prop.properties, context_ref, chain)
        else:
            logger.debug("Field %r in %r has neither type nor reference", field, context_ref)
            nested = {}
        return OutputProperty(title=field, type="object", properties=nested)

    if type_tag == "array":
        items = prop.items
        ref = _reference_of(items) if items else None
        if ref:
            nested = _expand(catalog, ref, chain)
        elif items and items.properties:
            nested = _convert(catalog, items.properties, context_ref, chain)
        else:
            nested = {}
        return OutputProperty(title=field, type="array", items={"properties": nested})

    if type_tag == "object" and prop.properties:
        return OutputProperty(
            title=field,
            type="object",
            properties=_convert(catalog, prop.properties, context_ref, chain),
        )

    return OutputProperty(title=field, type=type_tag, enum=prop.enum or None)


def _expand(catalog: Catalog, ref: str, chain: tuple[str, ...]) -> dict[str, OutputProperty]:
    if ref in chain:
        raise CyclicReferenceError(chain + (ref,))
    definition = resolve(catalog, ref)
    return _convert(catalog, definition.properties, ref, chain + (ref,))


def _reference_of(prop: FieldSchema) -> str | None:
    """Direct `$ref`, or the only member of a single-entry allOf/oneOf/anyOf wrapper."""
    if prop.ref:
        return prop.ref
    for group in (prop.all_of, prop.one_of, prop.any_of):
        if len(group) == 1 and group[0].ref:
            return group[0].ref
    return None


def _inject_identity(field: str, prop: OutputProperty, context_ref: str) -> OutputProperty:
    if field == "kind":
        const = parse_reference(context_ref).kind
    elif field == "apiVersion":
        const = parse_reference(context_ref).group_version
    else:
        return prop
    return prop.model_copy(update={"const": const, "enum": None})
