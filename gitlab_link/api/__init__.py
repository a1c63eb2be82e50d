"""API module for gitlab-link.

Pure operations (matching, scanning, resolving, splicing) live in their domain
packages; ``cmd_*`` functions wrap them in the 4-stage StageResult pattern used
by the CLI.
"""

__all__ = []
