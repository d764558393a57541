"""Launch options and their resolution into allocator input."""
from dataclasses import dataclass
from typing import Sequence

from .flags import Directive, ExecPath, default_flags

DEFAULT_TIMEOUT = 60.0  # seconds


@dataclass(frozen=True)
class Options:
    """Configuration for one launch.

    Args:
        executable_path: Browser binary to run. Blank lets Playwright use its
            bundled Chromium.
        timeout: Deadline for the whole operation, in seconds. ``0`` or
            ``None`` means :data:`DEFAULT_TIMEOUT`.
        flags: Allocator directives. Empty means :func:`default_flags`.
    """
    executable_path: str = ""
    timeout: float | None = 0
    flags: Sequence[Directive] = ()


def resolve_flags(options: Options) -> list[Directive]:
    """Return the directive list handed to the allocator.

    Always a new list; ``options.flags`` is never mutated. When an executable
    path is set, ``ExecPath`` comes first.
    """
    flags = list(options.flags) if options.flags else default_flags()
    path = (options.executable_path or "").strip()
    if path:
        return [ExecPath(path), *flags]
    return flags


def resolve_timeout(options: Options) -> float:
    """Effective deadline in seconds."""
    if not options.timeout:
        return DEFAULT_TIMEOUT
    return float(options.timeout)
