"""Line-ending markers."""

import os

CRLF = "\r\n"
LF = "\n"
CR = "\r"

CRLF_BYTES = b"\r\n"
LF_BYTES = b"\n"

# Named markers accepted in configuration files
EOL_NAMES = {
    "lf": LF,
    "crlf": CRLF,
    "cr": CR,
}


def platform_eol() -> str:
    """Return the host platform's default end-of-line sequence."""
    return os.linesep


def eol_from_name(name: str) -> str:
    """Map a configured marker name to its sequence.

    ``native`` resolves to :func:`platform_eol`.
    """
    key = name.lower()
    if key == "native":
        return platform_eol()
    return EOL_NAMES[key]
