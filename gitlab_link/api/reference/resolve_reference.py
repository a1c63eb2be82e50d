"""Reference resolver (UNO: single function)."""

from ..config.GitlabConfig import GitlabConfig
from .RawReference import RawReference
from .ReferenceKind import ReferenceKind
from .ResolvedLink import ResolvedLink

_ROUTES = {
    ReferenceKind.ISSUE: ("#", "issues"),
    ReferenceKind.MERGE_REQUEST: ("!", "merge_requests"),
}


def resolve_reference(ref: RawReference, config: GitlabConfig) -> ResolvedLink:
    """Turn a reference into a link on the configured server.

    The label only repeats what appeared in the source; the current namespace
    and project from ``config`` fill in the URL when the reference omits them.

    Args:
        ref: Classified reference
        config: Resolved run configuration

    Returns:
        ResolvedLink for the reference
    """
    if ref.kind is ReferenceKind.PROJECT:
        return ResolvedLink(label=f"{ref.path}>", url=f"{config.server_url}/{ref.path}")

    sigil, route = _ROUTES[ref.kind]
    if ref.namespace is not None and ref.project is not None:
        label = f"{ref.namespace}/{ref.project}{sigil}{ref.ref_id}"
    elif ref.project is not None:
        label = f"{ref.project}{sigil}{ref.ref_id}"
    else:
        label = f"{sigil}{ref.ref_id}"

    namespace = ref.namespace if ref.namespace is not None else config.current_namespace
    project = ref.project if ref.project is not None else config.current_project
    url = f"{config.server_url}/{namespace}/{project}/-/{route}/{ref.ref_id}"
    return ResolvedLink(label=label, url=url)
