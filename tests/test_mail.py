import pytest

from spsmonitor.mail import EmailData, parse_email, read_email, slow_fast_providers


def test_parse_valid_line():
    assert parse_email("RU;Gmail;23") == EmailData("RU", "Gmail", 23)


@pytest.mark.parametrize(
    "line",
    [
        "RU;Gmail",
        "RU;Gmail;23;extra",
        "XX;Gmail;23",
        "RU;Unknown;23",
        "RU;Gmail;0",
        "RU;Gmail;-4",
        "RU;Gmail;2.5",
        "",
    ],
)
def test_parse_invalid_line(line):
    assert parse_email(line) is None


def test_to_dict():
    assert EmailData("FR", "Orange", 7).to_dict() == {
        "country": "FR",
        "provider": "Orange",
        "delivery_time": 7,
    }


def test_read_file(tmp_path):
    path = tmp_path / "email.data"
    path.write_text("RU;Gmail;23\nRU;Gmail\r\nUS;Mail.ru;5\r\n")
    assert read_email(path) == [EmailData("RU", "Gmail", 23), EmailData("US", "Mail.ru", 5)]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_email(tmp_path / "absent.data")


SAMPLE = [
    EmailData("RU", "Gmail", 40),
    EmailData("RU", "Yahoo", 10),
    EmailData("US", "AOL", 1),
    EmailData("RU", "MSN", 30),
    EmailData("RU", "Live", 20),
    EmailData("RU", "GMX", 50),
]


def test_slow_and_fast_partition():
    slow, fast = slow_fast_providers(SAMPLE, "RU")
    assert [e.provider for e in fast] == ["Yahoo", "Live", "MSN"]
    assert [e.provider for e in slow] == ["MSN", "Gmail", "GMX"]


def test_results_are_sorted_and_country_filtered():
    slow, fast = slow_fast_providers(SAMPLE, "RU")
    for part in (slow, fast):
        times = [e.delivery_time for e in part]
        assert times == sorted(times)
        assert all(e.country == "RU" for e in part)
    assert max(e.delivery_time for e in fast) <= min(e.delivery_time for e in slow)


def test_fewer_than_three_returns_all_twice():
    slow, fast = slow_fast_providers(SAMPLE, "US")
    assert slow == fast == [EmailData("US", "AOL", 1)]


def test_unknown_country_is_empty():
    assert slow_fast_providers(SAMPLE, "DE") == ([], [])


def test_sort_is_stable_for_equal_times():
    data = [EmailData("RU", name, 5) for name in ("Gmail", "Yahoo", "MSN", "AOL")]
    slow, fast = slow_fast_providers(data, "RU")
    assert fast == data[:3]
    assert slow == data[-3:]