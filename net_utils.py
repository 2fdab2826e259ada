import socket
from typing import Optional


def get_network_ip() -> Optional[str]:
    """First non-loopback IPv4 address of this host, or None."""
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        # UDP connect sends nothing; it only selects the outbound interface.
        s.connect(("10.255.255.255", 1))
        ip = s.getsockname()[0]
    except OSError:
        return None
    finally:
        s.close()
    if not ip or ip.startswith("127.") or ip == "0.0.0.0":
        return None
    return ip
