"""Allocator directives: Chrome switches and the executable override.

A directive sequence is translated into keyword arguments for
``playwright.chromium.launch()``. Directives are applied in order, so a later
directive with the same name wins.
"""
from dataclasses import dataclass
from typing import Any, Sequence, Union


@dataclass(frozen=True)
class Flag:
    """A Chrome command-line switch.

    ``True`` renders ``--name``, ``False`` drops the switch, anything else
    renders ``--name=value``.
    """
    name: str
    value: Any = True

    def to_arg(self) -> str | None:
        if self.value is False:
            return None
        if self.value is True:
            return f"--{self.name}"
        return f"--{self.name}={self.value}"


@dataclass(frozen=True)
class ExecPath:
    """Use this browser executable instead of Playwright's bundled one."""
    path: str


Directive = Union[Flag, ExecPath]

NO_FIRST_RUN = Flag("no-first-run")
NO_DEFAULT_BROWSER_CHECK = Flag("no-default-browser-check")
NO_SANDBOX = Flag("no-sandbox")
INCOGNITO = Flag("incognito")
HEADLESS = Flag("headless")
DISABLE_AUTOMATION_CONTROLLED = Flag("disable-blink-features", "AutomationControlled")


def default_flags() -> list[Directive]:
    """Return the default directive set used when the caller passes none.

    A new list every call, so callers may extend it freely.
    """
    return [
        NO_FIRST_RUN,
        NO_DEFAULT_BROWSER_CHECK,
        NO_SANDBOX,
        INCOGNITO,
        DISABLE_AUTOMATION_CONTROLLED,
    ]


def to_launch_kwargs(directives: Sequence[Directive]) -> dict[str, Any]:
    """Translate *directives* into ``chromium.launch()`` keyword arguments.

    ``Flag("headless", ...)`` maps onto Playwright's ``headless`` keyword
    rather than a raw switch; Playwright manages that switch itself. Its
    value must be a bool, otherwise TypeError is raised.
    """
    switches: dict[str, Flag] = {}
    kwargs: dict[str, Any] = {}
    for d in directives:
        if isinstance(d, ExecPath):
            kwargs["executable_path"] = d.path
        elif isinstance(d, Flag):
            if d.name == "headless":
                if not isinstance(d.value, bool):
                    raise TypeError(f"headless flag takes a bool, got {d.value!r}")
                kwargs["headless"] = d.value
                continue
            # re-insert so the override takes the later position
            switches.pop(d.name, None)
            switches[d.name] = d
        else:
            raise TypeError(f"unsupported allocator directive: {d!r}")

    args = [arg for arg in (f.to_arg() for f in switches.values()) if arg]
    kwargs["args"] = args
    return kwargs
