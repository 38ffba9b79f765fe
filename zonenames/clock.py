"""Reference instants for the command line.

Resolution itself never reads a clock; the CLI asks this module once and
passes the instant down.
"""

import logging
import socket
import struct
from datetime import datetime, timezone
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

NTP_SERVERS = (
    "0.pool.ntp.org",
    "1.pool.ntp.org",
    "2.pool.ntp.org",
    "pool.ntp.org",
)

NTP_PORT = 123
NTP_TIMESTAMP_DELTA = 2208988800  # seconds between 1900-01-01 and 1970-01-01
NTP_REQUEST = b"\x1b" + 47 * b"\0"


class NTPClock:
    def __init__(self, servers: Sequence[str] = NTP_SERVERS, timeout: float = 0.8):
        self.servers = tuple(servers)
        self.timeout = timeout

    def now(self) -> datetime:
        """
        Return the best available time:
        - Tries each NTP server in turn (with a short timeout)
        - Falls back to system UTC time if none answers
        Never raises.
        """
        for server in self.servers:
            timestamp = self.query_server(server)
            if timestamp is not None:
                return datetime.fromtimestamp(timestamp, tz=timezone.utc)

        logger.debug("No NTP server answered; using the system clock")
        return datetime.now(timezone.utc)

    def query_server(self, server: str) -> Optional[float]:
        """
        Query a single NTP server.
        Returns: Unix timestamp (float) or None
        """
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
                s.settimeout(self.timeout)
                s.sendto(NTP_REQUEST, (server, NTP_PORT))
                data, _ = s.recvfrom(1024)
        except OSError as exc:
            logger.debug("NTP query to %s failed: %s", server, exc)
            return None

        return parse_ntp_response(data)


def parse_ntp_response(data: bytes) -> Optional[float]:
    """Return the transmit timestamp of an NTP packet as Unix time."""
    if len(data) < 48:
        return None

    unpacked = struct.unpack("!12I", data[:48])
    transmit_timestamp = unpacked[10] + float(unpacked[11]) / 2**32
    return transmit_timestamp - NTP_TIMESTAMP_DELTA


def current_instant(
    use_ntp: bool = False,
    servers: Sequence[str] = NTP_SERVERS,
    timeout: float = 0.8,
) -> datetime:
    """The instant to resolve names at: NTP time if asked for, else the system clock."""
    if use_ntp:
        return NTPClock(servers, timeout).now()
    return datetime.now(timezone.utc)
