import pytest

pytest.importorskip("tkinter")

from main import parse_args


def test_defaults():
    args = parse_args([])
    assert args.level is None
    assert not args.no_sound


def test_level_argument():
    args = parse_args(["--level", "2", "--no-sound", "--log-level", "debug"])
    assert args.level == 2
    assert args.no_sound
    assert args.log_level == "debug"


def test_level_out_of_range():
    with pytest.raises(SystemExit):
        parse_args(["--level", "99"])
