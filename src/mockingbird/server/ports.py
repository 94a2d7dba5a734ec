"""Port selection for throwaway test servers."""

import socket


def get_unused_tcp_port(host: str = "127.0.0.1") -> int:
    """Ask the OS for a free TCP port on *host*.

    Binds port 0, reads back the assigned number, and closes the socket.
    Another process may grab the port before the caller binds it; for
    test backends on a loopback interface that window is negligible.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, 0))
        return sock.getsockname()[1]
