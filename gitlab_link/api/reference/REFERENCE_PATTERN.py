"""Reference grammar.

An identifier is one or more of ``A-Z a-z 0-9 - _ .``.

Issue / merge request (tried first at every position)::

    [[namespace[/subgroup]/]project] ( "#" digits | "!" digits ) word-boundary

Project reference::

    group[/subgroup]/project ">"

Matches are leftmost and non-overlapping. Named groups: ``namespace`` (with
the subgroup folded in), ``project``, ``issue``, ``merge_request`` and
``project_ref`` (the path without the trailing ``>``).
"""

import re

IDENT = r"[A-Za-z0-9_.\-]+"

REFERENCE_PATTERN = re.compile(
    rf"""
    (?:
        (?:
            (?:(?P<namespace>{IDENT}(?:/{IDENT})?)/)?
            (?P<project>{IDENT})
        )?
        (?:\#(?P<issue>[0-9]+)|!(?P<merge_request>[0-9]+))
        \b
    )
    |
    (?:(?P<project_ref>{IDENT}(?:/{IDENT})?/{IDENT})>)
    """,
    re.VERBOSE,
)
