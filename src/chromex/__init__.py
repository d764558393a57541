"""chromex — run an extraction routine against a short-lived headless browser.

Applies default Chrome switches, an optional executable override and a
deadline, hands the ready Playwright session to a caller-supplied extractor
and tears everything down afterwards.
"""
from .discovery import find_system_chrome  # noqa: F401
from .errors import LaunchStage, LaunchError, DeadlineExceeded  # noqa: F401
from .flags import (  # noqa: F401
    Flag,
    ExecPath,
    Directive,
    default_flags,
    to_launch_kwargs,
    NO_FIRST_RUN,
    NO_DEFAULT_BROWSER_CHECK,
    NO_SANDBOX,
    INCOGNITO,
    HEADLESS,
    DISABLE_AUTOMATION_CONTROLLED,
)
from .options import Options, DEFAULT_TIMEOUT, resolve_flags, resolve_timeout  # noqa: F401
from .launcher import Session, Extractor, launch, run  # noqa: F401
