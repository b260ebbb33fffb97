import time
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from servicewait.descriptor import ServiceDescriptor
from servicewait.probes import ProbeResult, run_probe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaitResult:
    descriptor: ServiceDescriptor
    available: bool
    elapsed: float
    attempts: int
    last_failure: Optional[ProbeResult] = None


def wait_for_service(
    service: ServiceDescriptor,
    check: Optional[Callable[[ServiceDescriptor], ProbeResult]] = None,
    sleep: Optional[Callable[[float], None]] = None,
    clock: Optional[Callable[[], float]] = None,
) -> WaitResult:
    """
    Probe a service until it is reachable or its retry budget is spent.

    Every failed attempt, the last one included, is followed by a fixed
    ``retry_delay`` sleep. Elapsed time is measured in seconds from the
    start of the first attempt.

    Args:
        service: Descriptor to wait for
        check: Single-attempt probe; defaults to the protocol's registered probe
        sleep: Sleep function used between attempts; defaults to time.sleep
        clock: Clock used for the elapsed time; defaults to time.monotonic

    Returns:
        WaitResult describing the outcome
    """
    check = check or run_probe
    sleep = sleep or time.sleep
    clock = clock or time.monotonic
    start_time = clock()
    last_failure = None

    for attempt in range(1, service.max_retries + 1):
        result = check(service)
        if result:
            logger.info(f"{service.name} reachable after {attempt} attempt(s)")
            return WaitResult(service, True, clock() - start_time, attempt)

        last_failure = result
        logger.debug(
            f"Attempt {attempt}/{service.max_retries} for {service.name} failed"
            f" ({result.failure.value if result.failure else 'unknown'}): {result.detail}"
        )
        sleep(service.retry_delay)

    logger.warning(f"{service.name} unavailable after {service.max_retries} attempts")
    return WaitResult(service, False, clock() - start_time, service.max_retries, last_failure)
