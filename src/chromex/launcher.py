"""Session launcher: browser allocation, session creation, deadline, cleanup.

The resource chain is driver -> browser -> context/page -> deadline. Each
link is an async context manager on one ``AsyncExitStack``, so teardown runs
last-acquired-first-released on every exit path, including extractor errors
and deadline expiry.
"""
import asyncio
import logging
from contextlib import AsyncExitStack, asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Sequence, TypeVar

from playwright.async_api import async_playwright

from .errors import DeadlineExceeded, LaunchError, LaunchStage
from .flags import Directive, to_launch_kwargs
from .options import Options, resolve_flags, resolve_timeout

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Session:
    """The automation context handed to an extractor.

    ``deadline`` is in event-loop time (``loop.time()``). Playwright's default
    action and navigation timeouts on ``context`` end no later than
    ``deadline``.
    """
    browser: Any
    context: Any
    page: Any
    timeout: float
    deadline: float

    def remaining(self) -> float:
        """Seconds left before the session is cancelled."""
        return max(0.0, self.deadline - asyncio.get_running_loop().time())


Extractor = Callable[[Session], Awaitable[T]]


async def _close(resource: Any, what: str) -> None:
    try:
        await resource.close()
    except Exception as e:
        log.warning("Failed to close %s cleanly: %s", what, e)


@asynccontextmanager
async def _driver(playwright: Any = None) -> AsyncIterator[Any]:
    """Yield *playwright* as-is, or start (and later stop) a private driver."""
    if playwright is not None:
        yield playwright
        return
    try:
        playwright = await async_playwright().start()
    except Exception as e:
        raise LaunchError(LaunchStage.ALLOCATOR, f"Playwright driver failed to start: {e}") from e
    try:
        yield playwright
    finally:
        try:
            await playwright.stop()
        except Exception as e:
            log.warning("Failed to stop Playwright driver cleanly: %s", e)


@asynccontextmanager
async def allocate(playwright: Any, flags: Sequence[Directive]) -> AsyncIterator[Any]:
    """Launch Chromium with *flags* and close it on exit.

    Raises LaunchError(ALLOCATOR) if the process cannot be started.
    """
    kwargs = to_launch_kwargs(flags)
    log.info(
        "Launching Chromium (%s, %d args)",
        kwargs.get("executable_path") or "bundled",
        len(kwargs["args"]),
    )
    try:
        browser = await playwright.chromium.launch(**kwargs)
    except Exception as e:
        raise LaunchError(LaunchStage.ALLOCATOR, f"browser launch failed: {e}") from e
    log.info("Browser started (version %s)", browser.version)
    try:
        yield browser
    finally:
        await _close(browser, "browser")
        log.debug("Browser closed")


@asynccontextmanager
async def open_session(browser: Any, deadline: float) -> AsyncIterator[tuple[Any, Any]]:
    """Open a browser context with one page; yields ``(context, page)``.

    Playwright's default timeouts are set to the time left until *deadline*
    (event-loop time). Raises LaunchError(SESSION) if the context or page
    cannot be created.
    """
    try:
        context = await browser.new_context()
    except Exception as e:
        raise LaunchError(LaunchStage.SESSION, f"browser context creation failed: {e}") from e
    try:
        try:
            # 0 disables Playwright timeouts, keep at least 1ms
            remaining_ms = max((deadline - asyncio.get_running_loop().time()) * 1000, 1)
            context.set_default_timeout(remaining_ms)
            context.set_default_navigation_timeout(remaining_ms)
            page = await context.new_page()
        except Exception as e:
            raise LaunchError(LaunchStage.SESSION, f"page creation failed: {e}") from e
        log.debug("Session opened")
        yield context, page
    finally:
        await _close(context, "browser context")
        log.debug("Session closed")


async def launch(options: Options, extractor: Extractor[T], *, playwright: Any = None) -> T:
    """Run *extractor* against a fresh browser session and return its result.

    Args:
        options: Executable path, timeout and allocator directives.
        extractor: Async callable taking a :class:`Session`.
        playwright: An already-started async Playwright instance. When
            omitted a private driver is started and stopped around the call.

    Raises:
        LaunchError: The browser, context or page could not be acquired; the
            extractor was not called.
        DeadlineExceeded: The timeout expired first. The extractor sees
            ``asyncio.CancelledError`` at its current await.

    Any exception raised by the extractor propagates unchanged.
    """
    flags = resolve_flags(options)
    timeout = resolve_timeout(options)
    deadline = asyncio.get_running_loop().time() + timeout

    async with AsyncExitStack() as stack:
        try:
            async with asyncio.timeout_at(deadline) as scope:
                pw = await stack.enter_async_context(_driver(playwright))
                browser = await stack.enter_async_context(allocate(pw, flags))
                context, page = await stack.enter_async_context(open_session(browser, deadline))
                session = Session(browser, context, page, timeout, deadline)
                return await extractor(session)
        except TimeoutError as e:
            if scope.expired():
                log.info("Session deadline of %gs exceeded", timeout)
                raise DeadlineExceeded(timeout) from e
            raise


def run(options: Options, extractor: Extractor[T]) -> T:
    """Blocking form of :func:`launch` with a private Playwright driver."""
    return asyncio.run(launch(options, extractor))
