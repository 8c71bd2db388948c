import os

import pytest

from hostprep.platform import PlatformDetector

ORDER = ["apt", "dnf", "pacman"]
BINARIES = {"apt": "apt-get", "dnf": "dnf", "pacman": "pacman"}


@pytest.mark.parametrize("available, expected", [
    ({"apt-get", "dnf", "pacman"}, "apt"),
    ({"dnf", "pacman"}, "dnf"),
    ({"pacman"}, "pacman"),
    (set(), None),
])
def test_first_available_package_manager_wins(fake_host, available, expected):
    fake_host.available = available

    assert PlatformDetector().detect_package_manager(ORDER, BINARIES) == expected


def test_probing_stops_at_first_match(fake_host):
    fake_host.available = {"apt-get", "dnf", "pacman"}

    PlatformDetector().detect_package_manager(ORDER, BINARIES)

    assert fake_host.probes == ["apt-get"]


def test_no_match_probes_every_binary_once(fake_host):
    PlatformDetector().detect_package_manager(ORDER, BINARIES)

    assert fake_host.probes == ["apt-get", "dnf", "pacman"]


def test_euid_from_environment():
    assert PlatformDetector({"EUID": "0"}).is_root()
    assert not PlatformDetector({"EUID": "1000"}).is_root()
    assert PlatformDetector({"EUID": " 42 "}).effective_uid() == 42


@pytest.mark.skipif(not hasattr(os, "geteuid"), reason="POSIX only")
def test_euid_falls_back_to_process_uid():
    assert PlatformDetector({}).effective_uid() == os.geteuid()
    assert PlatformDetector({"EUID": "root"}).effective_uid() == os.geteuid()


@pytest.mark.parametrize("content, expected", [
    ('name="ubuntu"\nid_like=debian', "debian"),
    ('id="fedora"', "rhel"),
    ('id=arch', "arch"),
    ('id=alpine', "unknown"),
])
def test_os_release_classification(content, expected):
    assert PlatformDetector._classify_os_release(content) == expected


def test_detect_reports_effective_uid():
    info = PlatformDetector({"EUID": "0"}).detect()

    assert info["euid"] == 0
    assert info["platform"] == info["os"].lower()
