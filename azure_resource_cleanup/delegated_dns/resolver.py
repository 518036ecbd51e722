"""Hostname resolution against a fixed public resolver."""

from __future__ import annotations

import dns.exception
import dns.resolver

from ..exceptions import ResolutionError
from ..models.config import DNS_RESOLVER_RETRIES, DNS_SERVER_ADDRESS
from ..utils import get_logger

logger = get_logger()

SERVFAIL = "SERVFAIL"


class ApiResolver:
    """Resolve A records through a single nameserver.

    Timeouts and socket errors are retried up to ``retries`` attempts. A
    SERVFAIL answer (the delegated nameservers are gone) and an empty answer
    both resolve to no addresses. Anything else raises ResolutionError.
    """

    def __init__(
        self,
        server_address: str = DNS_SERVER_ADDRESS,
        retries: int = DNS_RESOLVER_RETRIES,
        resolver: dns.resolver.Resolver | None = None,
    ):
        if resolver is None:
            resolver = dns.resolver.Resolver(configure=False)
            resolver.nameservers = [server_address]
        self.server_address = server_address
        self.retries = max(1, retries)
        self._resolver = resolver

    def lookup_host(self, hostname: str) -> list[str]:
        """Return the IPv4 addresses of hostname."""
        last_error: Exception | None = None

        for attempt in range(1, self.retries + 1):
            try:
                answer = self._resolver.resolve(hostname, "A")
            except (dns.exception.Timeout, OSError) as e:
                last_error = e
                logger.debug(
                    "DNS lookup timed out",
                    extra={"hostname": hostname, "attempt": attempt, "error": str(e)},
                )
                continue
            except dns.resolver.NoAnswer:
                return []
            except dns.resolver.NoNameservers as e:
                if SERVFAIL in str(e):
                    return []
                raise ResolutionError(f"Failed to resolve {hostname}: {e}") from e
            except dns.exception.DNSException as e:
                raise ResolutionError(f"Failed to resolve {hostname}: {e}") from e

            return [rdata.address for rdata in answer]

        raise ResolutionError(
            f"Failed to resolve {hostname} after {self.retries} attempts: {last_error}"
        ) from last_error
