"""gitlab-link: rewrite GitLab shorthand references in markdown into links."""

from .api.transform.transform import transform

__all__ = ["transform"]
