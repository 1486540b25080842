from nomenclator.cli import parse_args


def test_parse_args_defaults():
    args = parse_args(["photos.csv"])
    assert args.file_path == "photos.csv"
    assert args.config is None
    assert args.data_dir is None
    assert args.run_id is None
    assert args.log_level == "WARN"


def test_parse_args_accepts_config_and_data_dir():
    args = parse_args(["photos.csv", "--config", "config/nomenclator.yml", "--data-dir", "data"])
    assert args.config == "config/nomenclator.yml"
    assert args.data_dir == "data"
