import os
import sys
import argparse

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import main
from salvage.tiles import WorldTile


def test_parse_tile():
    assert main.parse_tile("1,2") == WorldTile(1, 2, 0)
    assert main.parse_tile("1,2,3") == WorldTile(1, 2, 3)
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_tile("1")
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_tile("a,b")


def test_config_and_tracker_from_args():
    args = main.build_parser().parse_args(
        ["--wreck", "100,100", "--depleted", "120,100,0", "--no-overlap", "--border-width", "3"]
    )
    config = main.config_from_args(args)
    assert config.show_salvage_range and not config.show_overlap
    assert config.border_width == 3

    anchors = main.tracker_from_args(args).snapshot()
    assert [a.position for a in anchors] == [WorldTile(100, 100, 0), WorldTile(120, 100, 0)]
    assert [a.depleted for a in anchors] == [False, True]


def test_invalid_opacity_rejected():
    args = main.build_parser().parse_args(["--fill-opacity", "300"])
    with pytest.raises(ValueError):
        main.config_from_args(args)


def test_log_level_is_case_insensitive():
    args = main.build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_unknown_log_level_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main.build_parser().parse_args(["--log-level", "chatty"])
    assert exc.value.code == 2
