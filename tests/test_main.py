from matrixcalc.main import parse_args


def test_defaults():
    args = parse_args([])
    assert not args.debug
    assert args.log_level is None
    assert args.log_file is None


def test_logging_options():
    args = parse_args(["--debug", "--log-file", "calc.log", "--log-level", "info"])
    assert args.debug
    assert args.log_file == "calc.log"
    assert args.log_level == "info"
