"""Parse and validate a port number from raw text with guarded steps."""

import sys

from trychain import TraceConfig, start_guarded


def check_range(port: int) -> int:
    if not 0 < port < 65536:
        raise ValueError(f"port {port} out of range")
    return port


TraceConfig(trace=True).apply()

raw = sys.argv[1] if len(sys.argv) > 1 else "8080"
port = (
    start_guarded(lambda: int(raw.strip()))
    .then_guarded(check_range)
    .catch(lambda err: 80)
)
print(port)
