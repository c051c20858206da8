import pytest

from timesupporter.csv_reader import CsvReader, DomainCsvReader, csv_to_list


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a,,b", ["a", "", "b"]),
        ("", [""]),
        ("a,", ["a", ""]),
        ("single", ["single"]),
    ],
)
def test_csv_to_list(line, expected):
    assert csv_to_list(line) == expected


def test_csv_to_list_round_trip():
    cells = ["x", "1", "", "name"]
    assert csv_to_list(",".join(cells)) == cells


TABLE = ["name,hp", "stick,100", "heart,50"]


def test_find_one_returns_matching_row():
    reader = CsvReader.from_lines(TABLE)
    assert reader.find_one("name", "heart") == {"name": "heart", "hp": "50"}


def test_find_one_missing_value_or_column():
    reader = CsvReader.from_lines(TABLE)
    assert reader.find_one("name", "nobody") == {}
    assert reader.find_one("speed", "100") == {}


def test_data_keeps_row_order():
    reader = CsvReader.from_lines(TABLE)
    assert [row["name"] for row in reader.data] == ["stick", "heart"]
    assert reader.column_names == ["name", "hp"]


def test_find_one_returns_copy():
    reader = CsvReader.from_lines(TABLE)
    reader.find_one("name", "stick")["hp"] = "changed"
    assert reader.find_one("name", "stick")["hp"] == "100"


def test_reads_file(tmp_path):
    path = tmp_path / "graph.csv"
    path.write_text("\n".join(TABLE) + "\n", encoding="utf-8")
    reader = CsvReader(path)
    assert reader.find_one("name", "stick") == {"name": "stick", "hp": "100"}
    assert len(reader.data) == 2


AREA = [
    "BGM:,",
    "name,volume",
    "battle.mp3,80",
    "CHARACTER:,,",
    "name,x,y",
    "stick,1,2",
    "heart,3,4",
]


def test_domain_data():
    reader = DomainCsvReader.from_lines(AREA)
    assert reader.get_domain_data("BGM:") == [{"name": "battle.mp3", "volume": "80"}]
    assert reader.get_domain_data("CHARACTER:") == [
        {"name": "stick", "x": "1", "y": "2"},
        {"name": "heart", "x": "3", "y": "4"},
    ]


def test_missing_domain_is_empty():
    reader = DomainCsvReader.from_lines(AREA)
    assert reader.get_domain_data("OBJECT:") == []


def test_domain_data_is_copy():
    reader = DomainCsvReader.from_lines(AREA)
    reader.get_domain_data("BGM:").clear()
    assert len(reader.get_domain_data("BGM:")) == 1


def test_domain_reader_from_file(tmp_path):
    path = tmp_path / "area1.csv"
    path.write_text("\r\n".join(AREA) + "\r\n", encoding="utf-8")
    reader = DomainCsvReader(path)
    assert reader.get_domain_data("CHARACTER:")[1]["name"] == "heart"