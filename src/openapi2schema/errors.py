"""Exception hierarchy for openapi2schema."""


class Openapi2SchemaError(Exception):
    """Base exception for all openapi2schema failures."""


class CatalogError(Openapi2SchemaError):
    """The input document could not be read or is not a supported format."""


class ConversionError(Openapi2SchemaError):
    """A single definition could not be converted into an output document."""


class MalformedReferenceError(ConversionError):
    """A type reference does not follow the `<group>/<version>.<Kind>` convention."""

    def __init__(self, ref: str, reason: str) -> None:
        self.ref = ref
        self.reason = reason
        super().__init__(f"malformed type reference {ref!r}: {reason}")


class CyclicReferenceError(ConversionError):
    """A definition (transitively) references itself."""

    def __init__(self, chain: tuple[str, ...]) -> None:
        self.chain = chain
        super().__init__("reference cycle: " + " -> ".join(chain))
