"""
Pytest configuration and fixtures.

Kernel text captures and in-memory stand-ins for the Opener and
SampleWriter collaborators.
"""

import io
from collections.abc import Sequence

import pytest

from hoststat.models.sample import Metadata, Sample
from hoststat.sinks.base import SampleWriter
from hoststat.utils.host import FsStats

TEST_HZ = 100
TEST_TIMESTAMP = 1355344417000

PROC_STAT = """\
cpu  1377723 12309 425558 92572282 176914 102 11966 0 0 0
cpu0 445076 5965 184472 22802862 67989 101 11569 0 0 0
cpu1 253806 742 57397 23372889 10999 0 55 0 0 0
cpu2 446324 4621 127575 23005164 80953 0 286 0 0 0
cpu3 232515 981 56113 23391366 16971 0 55 0 0 0
intr 95815165 832 265035 0 0 0 0 0 0 1 339121 0 0 2331321 0 0 0 416 0 0 0
ctxt 162083424
btime 1355344417
processes 44685
procs_running 1
procs_blocked 0
softirq 37177398 6 8570721 477 1028639 715899 6 16037399 4556202 71761 6196288
"""

PROC_LOADAVG = "0.00 0.02 0.05 1/406 16439\n"

PROC_MEMINFO = """\
MemTotal:        3353936 kB
MemFree:         1071244 kB
Buffers:          149540 kB
Cached:           770616 kB
SwapCached:            0 kB
Active:          1462484 kB
Inactive:         609376 kB
Unevictable:           0 kB
Mlocked:               0 kB
SwapTotal:       3487740 kB
SwapFree:        3487740 kB
Dirty:                44 kB
VmallocTotal:   34359738367 kB
HugePages_Total:       0
HugePages_Free:        0
Hugepagesize:       2048 kB
DirectMap4k:       60396 kB
DirectMap2M:     3428352 kB
"""

PROC_DISKSTATS = """\
   1       0 ram0 0 0 0 0 0 0 0 0 0 0 0
   1       1 ram1 0 0 0 0 0 0 0 0 0 0 0
   7       0 loop0 0 0 0 0 0 0 0 0 0 0 0
   7       1 loop1 0 0 0 0 0 0 0 0 0 0 0
   8       0 sda 50762 6347 1674054 67360 23942 20742 563152 25820 0 14200 93132
   8       1 sda1 50432 6316 1671178 67232 23118 20742 563152 24696 0 13088 91876
   8       2 sda2 2 0 4 0 0 0 0 0 0 0 0
   8       5 sda5 161 31 1536 60 0 0 0 0 0 60 60
"""

ETC_MTAB = """\
/dev/sda1 / ext4 rw,errors=remount-ro 0 0
proc /proc proc rw,noexec,nosuid,nodev 0 0
sysfs /sys sysfs rw,noexec,nosuid,nodev 0 0
udev /dev devtmpfs rw,mode=0755 0 0
tmpfs /run tmpfs rw,noexec,nosuid,size=10%,mode=0755 0 0
gvfs-fuse-daemon /home/blorp/.gvfs fuse.gvfs-fuse-daemon rw,nosuid,nodev,user=blorp 0 0
"""

PROC_NET_DEV = """\
Inter-|   Receive                                                |  Transmit
 face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
    lo: 5303451   31684    0    0    0     0          0         0  5303451   31684    0    0    0     0       0          0
  eth0: 16651766   30158    0    0    0     0          0         0  4036294   22014    0    0    0     0       0          0
"""

ROOT_STATFS = FsStats(
    block_size=4096,
    blocks=1000,
    blocks_free=500,
    blocks_avail=400,
    files=256,
    files_free=128,
)


class StringOpener:
    """Opener serving in-memory text; unknown paths raise FileNotFoundError."""

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.opened: list[str] = []

    def open(self, path: str) -> io.StringIO:
        self.opened.append(path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return io.StringIO(self.files[path])


class RecordingWriter(SampleWriter):
    """Writer that keeps everything it is given."""

    def __init__(self):
        self.writes: list[tuple[str, list[Sample]]] = []
        self.metadata: list[Metadata] = []
        self.closed = False

    def write(self, family: str, samples: Sequence[Sample]) -> None:
        self.writes.append((family, list(samples)))

    def write_metadata(self, items: Sequence[Metadata]) -> None:
        self.metadata.extend(items)

    def close(self) -> None:
        self.closed = True

    @property
    def samples(self) -> list[Sample]:
        return [s for _, samples in self.writes for s in samples]

    def values(self) -> dict[str, int]:
        return {s.name: s.value for s in self.samples}


class FakeStatfs:
    """statfs capability returning canned results per mount point."""

    def __init__(self, results: dict[str, FsStats | OSError]):
        self.results = results
        self.calls: list[str] = []

    def __call__(self, mountpoint: str) -> FsStats:
        self.calls.append(mountpoint)
        result = self.results[mountpoint]
        if isinstance(result, OSError):
            raise result
        return result


@pytest.fixture
def proc_files() -> dict[str, str]:
    """Captured kernel resources keyed by their path."""
    return {
        "/proc/stat": PROC_STAT,
        "/proc/loadavg": PROC_LOADAVG,
        "/proc/meminfo": PROC_MEMINFO,
        "/proc/diskstats": PROC_DISKSTATS,
        "/etc/mtab": ETC_MTAB,
        "/proc/net/dev": PROC_NET_DEV,
    }


@pytest.fixture
def opener(proc_files: dict[str, str]) -> StringOpener:
    return StringOpener(proc_files)


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def fake_statfs() -> FakeStatfs:
    return FakeStatfs({"/": ROOT_STATFS})
