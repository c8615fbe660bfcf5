"""Resource identity derived from type reference naming conventions.

A reference such as `k8s.io/api/core/v1.Pod` names the resource kind `Pod`
in group/version `core/v1`, written to `core_v1_Pod.json`.
"""

from pydantic import BaseModel

from openapi2schema.errors import MalformedReferenceError


class ResourceIdentity(BaseModel, frozen=True):
    """Group/version and kind of a resource, plus its file-safe identifier."""

    identifier: str
    group_version: str
    kind: str


def parse_reference(ref: str) -> ResourceIdentity:
    """Parse a `.../<group>/<version>.<Kind>` reference.

    Raises MalformedReferenceError if the reference does not follow the
    convention.
    """
    segments = ref.split("/")
    if len(segments) < 2:
        raise MalformedReferenceError(ref, "no '/' separating group from version")

    group = segments[-2]
    parts = segments[-1].split(".")
    if len(parts) < 2:
        raise MalformedReferenceError(ref, "last segment is not '<version>.<Kind>'")

    version, kind = parts[0], parts[1]
    if not group or not version or not kind:
        raise MalformedReferenceError(ref, "empty group, version or kind")

    group_version = f"{group}/{version}"
    return ResourceIdentity(
        identifier=f"{group_version.replace('/', '_')}_{kind}",
        group_version=group_version,
        kind=kind,
    )


def resource_name(ref: str) -> str:
    return parse_reference(ref).identifier


def api_version_and_kind(ref: str) -> tuple[str, str]:
    identity = parse_reference(ref)
    return identity.group_version, identity.kind
