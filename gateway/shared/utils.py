import socket
from typing import Optional


def mask_key(key: Optional[str]) -> str:
    """Returns a printable form of a secret that keeps only its edges."""
    if not key:
        return "<none>"
    if len(key) <= 8:
        return "****"
    return f"{key[:4]}...{key[-4:]}"


def redact_secret(text: str, secret: Optional[str]) -> str:
    """Replaces every occurrence of the secret in text with its masked form."""
    if not secret or not text:
        return text
    return text.replace(secret, mask_key(secret))


def get_local_ip() -> str:
    """Best guess at the address other hosts can reach us on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        # No packets are sent for a UDP connect
        sock.connect(("10.255.255.255", 1))
        return sock.getsockname()[0]
    except OSError:
        return "127.0.0.1"
    finally:
        sock.close()
