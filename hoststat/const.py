"""
Application constants and metadata.
"""

# Application info
APP_NAME = "hoststat"
APP_VERSION = "0.1.0"

# Default values
DEFAULT_SAMPLE_INTERVAL = 10.0
DEFAULT_HOST_ROOT = "/"
DEFAULT_CONFIG_PATH = "/etc/hoststat/hoststat.conf"
DEFAULT_SINK_MAX_FAILURES = 5

# Kernel resources read by the samplers
PROC_STAT = "/proc/stat"
PROC_LOADAVG = "/proc/loadavg"
PROC_MEMINFO = "/proc/meminfo"
PROC_DISKSTATS = "/proc/diskstats"
PROC_NET_DEV = "/proc/net/dev"
ETC_MTAB = "/etc/mtab"
