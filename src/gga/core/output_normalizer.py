"""Terminal control sequence stripping for backend output.

Provider CLIs colorize output when they believe they are attached to a TTY,
which breaks downstream ``STATUS: PASSED|FAILED`` parsing. Every ESC is
consumed, either as part of a recognized sequence or on its own, so the
result never contains ESC and stripping twice equals stripping once.
"""

import re

# CSI: ESC [ params intermediates final
# OSC: ESC ] ... terminated by BEL or ESC \
# nF:  ESC intermediates final (charset designation etc.)
# Fe:  ESC followed by a byte in 0x40-0x5F
# A bare ESC matches when none of the above apply.
ANSI_ESCAPE_PATTERN = re.compile(
    r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[ -/]+[0-~]|[@-Z\\-_])?"
)


def strip_ansi(raw: str) -> str:
    """Remove ANSI/VT100 escape sequences, leaving all other characters in order.

    Example:
        >>> strip_ansi("\\x1b[0;32mSTATUS: PASSED\\x1b[0m")
        'STATUS: PASSED'
    """
    return ANSI_ESCAPE_PATTERN.sub("", raw)
