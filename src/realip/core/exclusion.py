"""Trust filter for candidate client addresses.

An address read from a proxy header is only trusted when it parses as an
IP address and is neither inside an excluded network nor equal to an
excluded address.  Anything that does not parse is treated as excluded.
IPv6 zone identifiers (``fe80::1%eth0``) never parse.
"""

from __future__ import annotations

import logging
from ipaddress import (
    IPv4Address,
    IPv4Network,
    IPv6Address,
    IPv6Network,
    ip_address,
    ip_network,
)
from typing import Iterable

from .errors import InvalidNetworkError

logger = logging.getLogger(__name__)

IPAddress = IPv4Address | IPv6Address
IPNetwork = IPv4Network | IPv6Network

_IPV4_MAPPED_NETWORK = IPv6Network("::ffff:0:0/96")


def _unmap(address: IPAddress) -> IPAddress:
    """Collapse ``::ffff:a.b.c.d`` onto its IPv4 form."""
    if isinstance(address, IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def _unmap_network(network: IPNetwork) -> IPNetwork:
    """Collapse ``::ffff:a.b.c.d/n`` (n >= 96) onto ``a.b.c.d/(n - 96)``."""
    if (
        isinstance(network, IPv6Network)
        and network.prefixlen >= _IPV4_MAPPED_NETWORK.prefixlen
        and network.subnet_of(_IPV4_MAPPED_NETWORK)
    ):
        return IPv4Network(
            (network.network_address.ipv4_mapped, network.prefixlen - 96)
        )
    return network


def parse_address(value: str) -> IPAddress | None:
    """Parse ``value`` as an IP address, returning ``None`` on failure."""
    if "%" in value:
        return None
    try:
        return _unmap(ip_address(value))
    except ValueError:
        return None


def parse_network(value: str) -> IPNetwork:
    """Parse a CIDR block; host bits are allowed ("127.0.0.1/24").

    Raises:
        InvalidNetworkError: if ``value`` is not a CIDR block.
    """
    text = value.strip()
    if "%" in text or "/" not in text:
        raise InvalidNetworkError(value)
    try:
        return _unmap_network(ip_network(text, strict=False))
    except ValueError:
        raise InvalidNetworkError(value) from None


class ExclusionFilter:
    """Immutable set of excluded networks and addresses.

    Built once from configuration and shared read-only by every provider.
    """

    def __init__(
        self,
        excluded_networks: Iterable[str] = (),
        excluded_addresses: Iterable[str] = (),
    ) -> None:
        networks = [parse_network(value) for value in excluded_networks]

        addresses = []
        for value in excluded_addresses:
            address = parse_address(value.strip())
            if address is None:
                logger.warning("Ignoring invalid excluded address %r", value)
                continue
            addresses.append(address)

        self._networks: tuple[IPNetwork, ...] = tuple(networks)
        self._addresses: frozenset[IPAddress] = frozenset(addresses)

    @property
    def networks(self) -> tuple[IPNetwork, ...]:
        return self._networks

    @property
    def addresses(self) -> frozenset[IPAddress]:
        return self._addresses

    def is_excluded(self, candidate: str) -> bool:
        """Return ``True`` if ``candidate`` must not be trusted."""
        address = parse_address(candidate)
        if address is None:
            return True

        for network in self._networks:
            if address.version == network.version and address in network:
                return True

        return address in self._addresses

    def __repr__(self) -> str:
        return (
            f"ExclusionFilter(networks={[str(n) for n in self._networks]}, "
            f"addresses={sorted(str(a) for a in self._addresses)})"
        )
