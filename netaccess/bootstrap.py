"""Startup phase: seed the default roles exactly once per process."""

import logging
import threading

from netaccess.services.role_service import RoleService

logger = logging.getLogger(__name__)


class BootstrapGate:
    """Run-once gate around ``RoleService.bootstrap_defaults``."""

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def run(self, roles: RoleService) -> bool:
        """Seed the defaults unless already done. Returns True if this call seeded."""
        with self._lock:
            if self._done:
                logger.debug("Default roles already bootstrapped")
                return False
            roles.bootstrap_defaults()
            self._done = True
            return True

    def reset(self) -> None:
        with self._lock:
            self._done = False


bootstrap_gate = BootstrapGate()
