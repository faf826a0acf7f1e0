import json

import pytest

from univeasier.config import Config, DBConfig, ServerConfig, read_configuration


def _write(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content))
    return path


def test_reads_both_sections(tmp_path):
    password = "password"
    document = {
        "DB": {
            "driver": "mysql",
            "name": "univ",
            "username": "user",
            "password": password,
            "protocol": "tcp",
            "host": "localhost",
            "port": "3306",
        },
        "SERVER": {"host": "localhost", "port": "8080"},
    }
    config = read_configuration(_write(tmp_path, document))
    assert config.db == DBConfig(
        driver="mysql",
        name="univ",
        username="user",
        password=password,
        protocol="tcp",
        host="localhost",
        port="3306",
    )
    assert config.server == ServerConfig(host="localhost", port="8080")


def test_keys_match_without_case(tmp_path):
    document = {"db": {"DRIVER": "mysql"}, "Server": {"Port": "9000"}}
    config = read_configuration(str(_write(tmp_path, document)))
    assert config.db.driver == "mysql"
    assert config.server.port == "9000"


def test_missing_sections_are_none(tmp_path):
    config = read_configuration(_write(tmp_path, {"other": 1}))
    assert config == Config()


def test_null_values_keep_defaults(tmp_path):
    config = read_configuration(_write(tmp_path, {"server": {"host": None, "port": "80"}}))
    assert config.server.host == ""
    assert config.server.port == "80"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_configuration(tmp_path / "absent.json")


def test_malformed_json(tmp_path):
    with pytest.raises(ValueError):
        read_configuration(_write(tmp_path, "{not json"))


def test_wrong_value_type(tmp_path):
    with pytest.raises(TypeError):
        read_configuration(_write(tmp_path, {"server": {"port": 8080}}))


def test_wrong_document_type(tmp_path):
    with pytest.raises(TypeError):
        read_configuration(_write(tmp_path, [1, 2]))