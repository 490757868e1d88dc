import pytest

from spsmonitor.sms import SMSData, parse_sms, read_sms


def test_parse_valid_line():
    assert parse_sms("RU;50;100;Topolo") == SMSData("RU", "50", "100", "Topolo")


def test_extra_fields_are_ignored():
    assert parse_sms("US;0;0;Kildy;extra;more") == SMSData("US", "0", "0", "Kildy")


@pytest.mark.parametrize(
    "line",
    [
        "RU;50;100",
        "",
        "XX;50;100;Topolo",
        "RU;101;100;Topolo",
        "RU;50;-1;Topolo",
        "RU;50;100;Gmail",
        "RU;5.5;100;Topolo",
    ],
)
def test_parse_invalid_line(line):
    assert parse_sms(line) is None


def test_to_dict_keys_and_values():
    record = SMSData("RU", "50", "100", "Rond")
    assert record.to_dict() == {
        "country": "RU",
        "bandwidth": "50",
        "response_time": "100",
        "provider": "Rond",
    }


def test_read_file_keeps_valid_lines_in_order(tmp_path):
    path = tmp_path / "sms.data"
    path.write_bytes(b"RU;50;100;Topolo\r\nbad line\n\nUS;10;20;Rond\nXX;1;1;Kildy")
    assert read_sms(path) == [
        SMSData("RU", "50", "100", "Topolo"),
        SMSData("US", "10", "20", "Rond"),
    ]


def test_read_empty_file(tmp_path):
    path = tmp_path / "sms.data"
    path.write_bytes(b"")
    assert read_sms(path) == []


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_sms(tmp_path / "absent.data")