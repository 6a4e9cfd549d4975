"""Unit tests for Xcconfig."""

from __future__ import annotations

from podkit import Xcconfig


class TestXcconfig:
    def test_empty(self) -> None:
        assert str(Xcconfig()) == ""

    def test_format_sorted(self) -> None:
        xcconfig = Xcconfig({"PODS_ROOT": "${SRCROOT}/Pods", "OTHER_LDFLAGS": "-ObjC"})
        assert str(xcconfig) == "OTHER_LDFLAGS = -ObjC\nPODS_ROOT = ${SRCROOT}/Pods\n"

    def test_includes_first(self) -> None:
        xcconfig = Xcconfig({"A": "1"}, includes=["Pods.xcconfig", "Pods.xcconfig"])
        assert xcconfig.includes == ["Pods.xcconfig"]
        assert str(xcconfig) == '#include "Pods.xcconfig"\nA = 1\n'

    def test_merge_appends(self) -> None:
        xcconfig = Xcconfig({"OTHER_LDFLAGS": "-ObjC"})
        xcconfig.merge({"OTHER_LDFLAGS": "-framework Foundation"})
        assert xcconfig["OTHER_LDFLAGS"] == "-ObjC -framework Foundation"

    def test_merge_keeps_flag_pairs(self) -> None:
        xcconfig = Xcconfig({"OTHER_LDFLAGS": "-framework Foundation"})
        xcconfig.merge({"OTHER_LDFLAGS": "-framework UIKit"})
        assert xcconfig["OTHER_LDFLAGS"] == "-framework Foundation -framework UIKit"

    def test_merge_skips_present_value(self) -> None:
        xcconfig = Xcconfig({"OTHER_LDFLAGS": "$(inherited) -ObjC"})
        xcconfig.merge({"OTHER_LDFLAGS": "-ObjC"})
        assert xcconfig["OTHER_LDFLAGS"] == "$(inherited) -ObjC"

    def test_merge_xcconfig(self) -> None:
        xcconfig = Xcconfig({"A": "1"})
        xcconfig.merge(Xcconfig({"B": "2"}, includes=["base.xcconfig"]))
        assert "B" in xcconfig
        assert xcconfig.includes == ["base.xcconfig"]

    def test_equality(self) -> None:
        assert Xcconfig({"A": "1  2"}) == Xcconfig({"A": "1 2"})
        assert Xcconfig({"A": "1"}) != Xcconfig({"A": "2"})

    def test_merge_drops_overlapping_units(self) -> None:
        xcconfig = Xcconfig({"OTHER_LDFLAGS": "-ObjC -lPods-A"})
        xcconfig.merge({"OTHER_LDFLAGS": "-lPods-A -lPods-B"})
        assert xcconfig["OTHER_LDFLAGS"] == "-ObjC -lPods-A -lPods-B"

    def test_merge_drops_repeated_flag_pair(self) -> None:
        xcconfig = Xcconfig({"OTHER_LDFLAGS": "-framework Foundation -ObjC"})
        xcconfig.merge({"OTHER_LDFLAGS": "-ObjC -framework Foundation -framework UIKit"})
        assert xcconfig["OTHER_LDFLAGS"] == (
            "-framework Foundation -ObjC -framework UIKit"
        )

    def test_initial_value_deduplicated(self) -> None:
        assert Xcconfig({"A": "-lA -lB -lA"})["A"] == "-lA -lB"
