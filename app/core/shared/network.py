"""
Network helpers
"""

import logging
import socket

logger = logging.getLogger(__name__)

FALLBACK_HOST = "0.0.0.0"


def get_local_ip(probe_address: str = "8.8.8.8") -> str:
    """
    Return the first non-loopback IPv4 address of this host.

    Connecting a UDP socket sends no packets; it only selects the outbound
    interface. Falls back to 0.0.0.0 when no interface is routable.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.connect((probe_address, 80))
        address = sock.getsockname()[0]
    except OSError as e:
        logger.warning(f"Could not detect local IP, listening on {FALLBACK_HOST}: {e}")
        return FALLBACK_HOST
    finally:
        sock.close()

    if address.startswith("127."):
        return FALLBACK_HOST
    return address
