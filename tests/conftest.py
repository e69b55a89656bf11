"""Shared fixtures: a synthetic proc filesystem"""
from pathlib import Path
from types import SimpleNamespace
from typing import Dict

import pytest

from config import Config


STAT = """cpu  2728404 64789 1125344 26724574 9673 0 21076 0 57962 0
cpu0 1393280 32966 572056 13343292 6130 0 17875 0 23933 0
cpu1 1335124 31823 553288 13381282 3543 0 3201 0 34029 0
intr 199292311 37 4 0 0 0
ctxt 439129331
btime 1700000000
processes 123456
procs_running 2
procs_blocked 1
softirq 81290876 4 2349872 46 0
"""

LOADAVG = "0.10 0.20 0.30 1/200 1234\n"

MEMINFO = """MemTotal:        8048164 kB
MemFree:          512000 kB
Active(anon):        100 kB
HugePages_Total:       0
Hugepagesize:       2048 kB
"""

FILE_NR = "1344\t0\t9223372036854775807\n"

NETSTAT = """TcpExt: SyncookiesSent SyncookiesRecv
TcpExt: 0 5
IpExt: InNoRoutes InTruncatedPkts
IpExt: 1 2
"""

SNMP = """Ip: Forwarding DefaultTTL
Ip: 1 64
Icmp: InMsgs OutMsgs
Icmp: 45 -1
UdpLite: InDatagrams OutDatagrams
UdpLite: 0 0
Udp: InDatagrams OutDatagrams
Udp: 100 200
"""

NET_DEV = """Inter-|   Receive                                                |  Transmit
 face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
    lo: 1000 10 0 0 0 0 0 0 1000 10 0 0 0 0 0 0
  eth0: 2000 20 1 2 3 4 5 6 3000 30 7 8 9 10 11 12
"""

PROC_FILES = {
    "stat": STAT,
    "loadavg": LOADAVG,
    "meminfo": MEMINFO,
    "sys/fs/file-nr": FILE_NR,
    "net/netstat": NETSTAT,
    "net/snmp": SNMP,
    "net/dev": NET_DEV,
}

FAKE_UNAME = SimpleNamespace(
    sysname="Linux",
    nodename="testhost",
    release="6.1.0-13-amd64",
    version="#1 SMP PREEMPT_DYNAMIC Debian 6.1.55-1 (2023-09-29)",
    machine="x86_64",
)


def write_proc_tree(root: Path, files: Dict[str, str]) -> Path:
    """Write a proc-like tree of files below root"""
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def proc_root(tmp_path):
    """Proc tree with every source the collectors read"""
    return write_proc_tree(tmp_path / "proc", PROC_FILES)


@pytest.fixture
def empty_proc_root(tmp_path):
    """Proc tree with no files at all"""
    root = tmp_path / "empty_proc"
    root.mkdir()
    return root


@pytest.fixture
def config(proc_root):
    """Configuration pointing at the synthetic proc tree"""
    return Config(proc_root=proc_root, metrics_host="127.0.0.1")
