r"""Path matching rules.

A route path is either a plain string or a compiled regular expression
with capture groups::

    compile_path("/users")              # exact path
    compile_path(r"/users/(\d+)")       # one capture group
    compile_path(re.compile(r"/f/(.+)", re.I))

Both forms must match the *whole* request path. The only rule that does
not is ``MOUNT_MATCHER``, which matches every path starting with ``/``.
Specifiers are expected to carry no ``^``/``$`` anchors of their own.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathMatcher:
    """A compiled matching rule.

    ``anchored`` rules must consume the full path; unanchored rules only
    need to match at the start.
    """

    pattern: re.Pattern[str]
    anchored: bool = True

    def match(self, path: str) -> list[str | None] | None:
        """Return the captured groups for *path*, or ``None`` on no match.

        A group that did not take part in the match is ``None``.
        """
        m = self.pattern.fullmatch(path) if self.anchored else self.pattern.match(path)
        if m is None:
            return None
        return list(m.groups())


def compile_path(specifier: str | re.Pattern[str]) -> PathMatcher:
    """Compile a route path into a full-path matching rule."""
    if isinstance(specifier, re.Pattern):
        return PathMatcher(specifier)
    return PathMatcher(re.compile(specifier))


MOUNT_MATCHER = PathMatcher(re.compile("/"), anchored=False)
