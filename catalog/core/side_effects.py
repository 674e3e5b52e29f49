"""Fire-and-forget execution of collaborator calls with a logged outcome.

Collaborator side effects (category accounting, wishlist sync, notifications)
are always attempted inside the request, but their failure must never change
the result of the operation that triggered them. ``run_side_effect`` awaits the
call, logs what happened and hands back a ``SideEffectOutcome`` that callers can
surface or assert on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SideEffectOutcome:
    name: str
    ok: bool
    error: Optional[str] = None


async def run_side_effect(
    name: str,
    func: Callable[..., Awaitable[Any]],
    *args: Any,
    **kwargs: Any,
) -> SideEffectOutcome:
    try:
        await func(*args, **kwargs)
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Side effect %s failed: %s", name, exc, exc_info=True)
        return SideEffectOutcome(name=name, ok=False, error=str(exc) or exc.__class__.__name__)
    logger.debug("Side effect %s completed", name)
    return SideEffectOutcome(name=name, ok=True)


__all__ = ["SideEffectOutcome", "run_side_effect"]
