"""
Reporter / driver: waits for each descriptor in input order and prints the
per-service progress lines, the summary and the list of failed services.

Output goes through a rich Console; colour is only emitted on terminals.
"""

import sys
import logging
from typing import Callable, List, Optional, Sequence, TextIO

from rich.console import Console
from rich.markup import escape

from servicewait.descriptor import ServiceDescriptor, parse_services
from servicewait.poller import WaitResult, wait_for_service

logger = logging.getLogger(__name__)

USAGE_TITLE = "servicewait - Smart Service Dependency Waiter"

USAGE_BODY = """Usage: servicewait <service1> <service2> ...
Format: name:host[:port][:protocol][:endpoint]

Examples:
  servicewait db:localhost:5432:tcp
  servicewait api:localhost:8080:http:/health
  servicewait agent:/var/run:agent.sock:unix"""

USAGE = f"{USAGE_TITLE}\n\n{USAGE_BODY}"


def make_console(out: Optional[TextIO] = None) -> Console:
    # soft_wrap keeps long descriptor lines intact when piped
    return Console(file=out or sys.stdout, highlight=False, soft_wrap=True, emoji=False)


def print_usage(console: Optional[Console] = None):
    console = console or make_console()
    console.print(f"[cyan]{escape(USAGE_TITLE)}[/cyan]")
    console.print()
    console.print(escape(USAGE_BODY))


def format_duration(seconds: float) -> str:
    """Whole milliseconds below one second, truncated whole seconds otherwise."""
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    return f"{int(seconds)}s"


def wait_for_services(
    services: Sequence[ServiceDescriptor],
    out: Optional[TextIO] = None,
    waiter: Optional[Callable[[ServiceDescriptor], WaitResult]] = None,
    console: Optional[Console] = None,
) -> List[WaitResult]:
    console = console or make_console(out)
    waiter = waiter or wait_for_service
    console.print("[cyan]\n=== SERVICE DEPENDENCY WAITER ===\n[/cyan]")

    results = []
    for service in services:
        name = escape(service.name)
        console.print(f"Waiting for {name} ({escape(service.address)})...")

        result = waiter(service)
        results.append(result)

        if result.available:
            console.print(f"  ✓ [green]{name}[/green] is ready ({format_duration(result.elapsed)})")
        else:
            console.print(f"  ✗ [red]{name}[/red] failed to start ({format_duration(result.elapsed)})")

    unavailable = [r.descriptor for r in results if not r.available]

    console.print()
    console.print(f"Summary: {len(results) - len(unavailable)} services ready, "
                  f"{len(unavailable)} services unavailable")

    if unavailable:
        console.print("[yellow]\nFailed services:[/yellow]")
        for s in unavailable:
            console.print(f"  - {escape(s.name)} ({escape(s.address)})")

    return results


def run(args: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Parse descriptors, wait for all of them and return the exit status."""
    services = parse_services(args)
    logger.info(f"Waiting for {len(services)} service(s)")
    results = wait_for_services(services, out=out)
    return 0 if all(r.available for r in results) else 1
