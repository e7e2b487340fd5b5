import pytest

from hems_engine.device_file import load_device_file, parse_device_file


def test_parse_device_file(device_file_text):
    records = parse_device_file(device_file_text)

    assert [r.device_type for r in records] == ["light", "termostat", "solar"]
    assert [r.name for r in records] == ["Kitchen", "Living room", "Roof"]
    assert records[0].rated_power == pytest.approx(60.0)
    assert [r.active for r in records] == [True, False, True]


def test_invalid_power_is_dropped():
    text = "@Type: light\n@Name: Broken\n@Power: abc\n@State: active\n"
    assert parse_device_file(text) == []


def test_empty_input():
    assert parse_device_file(None) == []
    assert parse_device_file("") == []


def test_load_device_file(tmp_path, device_file_text):
    path = tmp_path / "devices.txt"
    path.write_text(device_file_text, encoding="utf-8")

    assert len(load_device_file(path)) == 3

    with pytest.raises(FileNotFoundError):
        load_device_file(tmp_path / "missing.txt")


def test_missing_power_is_not_inherited():
    """Tweede blok zonder @Power mag de 60 W van het eerste blok niet overnemen."""
    text = "\n".join([
        "@Type: light",
        "@Name: Kitchen",
        "@Power: 60",
        "@State: active",
        "@Type: appliance",
        "@Name: Fridge",
        "@State: active",
    ])
    records = parse_device_file(text)

    assert [(r.device_type, r.name, r.rated_power) for r in records] == [("light", "Kitchen", 60.0)]


def test_missing_type_is_not_inherited():
    text = "\n".join([
        "@Type: solar",
        "@Name: Roof",
        "@Power: 4000",
        "@State: active",
        "@Name: Heater",
        "@Power: 2000",
        "@State: active",
    ])
    records = parse_device_file(text)

    assert [r.name for r in records] == ["Roof"]
    assert records[0].device_type == "solar"


def test_invalid_power_does_not_drop_later_blocks():
    text = "\n".join([
        "@Type: light",
        "@Name: Broken",
        "@Power: abc",
        "@State: active",
        "@Type: appliance",
        "@Name: Fridge",
        "@Power: 150",
        "@State: inactive",
        "@Type: appliance",
        "@Name: Kettle",
        "@State: active",
    ])
    records = parse_device_file(text)

    assert [(r.name, r.rated_power) for r in records] == [("Fridge", 150.0)]
