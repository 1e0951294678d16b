import pytest

from termcrawl.domain.visit_record import VisitRecord


def test_total_is_sum_of_counts():
    record = VisitRecord.of("https://seed.test/", [1, 2, 3, 4, 5])
    assert record.total == 15


def test_to_line_encodes_commas_in_url():
    record = VisitRecord.of("https://seed.test/a,b", [0, 7])
    assert record.to_line() == "https://seed.test/a%2Cb,0,7"


def test_from_line_parses_url_and_counts():
    record = VisitRecord.from_line("https://en.wikipedia.org/wiki/Elon_Musk,1,2,3,4,5\n")
    assert record.url == "https://en.wikipedia.org/wiki/Elon_Musk"
    assert record.counts == (1, 2, 3, 4, 5)
    assert record.total == 15


def test_record_url_keeps_commas_encoded():
    assert VisitRecord.of("https://seed.test/a,b", [3]).url == "https://seed.test/a%2Cb"
    assert VisitRecord.from_line("https://seed.test/a%2Cb,3").url == "https://seed.test/a%2Cb"


def test_literal_encoded_comma_survives_write_and_parse():
    record = VisitRecord.of("https://seed.test/q?a=1%2C2", [1])
    parsed = VisitRecord.from_line(record.to_line())
    assert parsed.url == "https://seed.test/q?a=1%2C2"
    assert parsed == record


def test_line_survives_write_and_parse():
    record = VisitRecord.of("https://seed.test/q?x=1,2", [4, 0, 9])
    assert VisitRecord.from_line(record.to_line()) == record


@pytest.mark.parametrize("line", ["", "https://seed.test/", ",1,2", "https://seed.test/,x"])
def test_from_line_rejects_malformed_lines(line):
    with pytest.raises(ValueError):
        VisitRecord.from_line(line)


def test_record_is_immutable():
    record = VisitRecord.of("https://seed.test/", [1])
    with pytest.raises(AttributeError):
        record.url = "https://other.test/"
