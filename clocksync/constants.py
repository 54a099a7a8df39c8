"""
clocksync Constants

Tool locations, command templates and parsing markers in one place.
"""

from typing import Final

# ==============================================================================
# EXTERNAL TOOLS
# ==============================================================================

RDATE_PATH: Final[str] = "/usr/sbin/rdate"           # Time Protocol (RFC 868) client
NTPDATE_PATH: Final[str] = "/usr/sbin/ntpdate"       # One-shot NTP client
NTPD_PATH: Final[str] = "/usr/sbin/ntpd"             # NTP daemon (run with -q)
DEFAULT_SHELL: Final[str] = "/bin/bash"              # Templates use ">&"

NTP_QUERY_TIMEOUT_SEC: Final[float] = 1.0            # ntpdate -t
NTP_SAMPLE_COUNT: Final[int] = 1                     # ntpdate -p

# ==============================================================================
# COMMAND TEMPLATES
# ==============================================================================

# "{tool}" and friends are filled from configuration, SERVER_PLACEHOLDER
# is replaced per request with the shell-quoted server identifier.
SERVER_PLACEHOLDER: Final[str] = "%s"

TP_QUERY_TEMPLATE: Final[str] = "{tool} -p %s"
TP_SET_TEMPLATE: Final[str] = "{tool} %s >& /dev/null; echo $?"

NTPDATE_QUERY_TEMPLATE: Final[str] = "{tool} -t {timeout} -p {samples} -q %s; echo $?"
NTPDATE_SET_TEMPLATE: Final[str] = "{tool} -t {timeout} -p {samples} %s >& /dev/null; echo $?"

NTPD_SET_TEMPLATE: Final[str] = "{tool} -n -q -p %s >& /dev/null; echo $?"

# ==============================================================================
# OUTPUT PARSING
# ==============================================================================

# rdate -p prints e.g. "Tue Jan 02 03:04:05 2024"
TP_TIME_FORMAT: Final[str] = "%a %b %d %H:%M:%S %Y"

# ntpdate prints e.g.
# "1 Jan 07:33:20 ntpdate[29329]: step time server 5.196.160.139 offset 1558374338.202418 sec"
NTP_TOOL_MARKER: Final[str] = "ntpdate"
NTP_OFFSET_MARKER: Final[str] = "offset "
NTP_OFFSET_UNIT_MARKER: Final[str] = " sec"

# ==============================================================================
# LIMITS
# ==============================================================================

MAX_SERVER_IDENTIFIER_LENGTH: Final[int] = 253       # Longest valid DNS name
