"""Release retention policy."""


def is_evictable(object_release: int, current_release: int, keep: int) -> bool:
    """Return True when an object falls outside the retention window.

    The last ``keep`` releases, counting the current one, are retained:
    an object tagged with release ``r`` survives while ``r + keep > current``.
    Both orphan cleanup and the release refresh of existing objects use this.
    """
    return object_release + keep <= current_release
