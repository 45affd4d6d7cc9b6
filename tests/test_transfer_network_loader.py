"""Tests for loading the transfer network."""

from pathlib import Path
from typing import Any

import pytest

from ptv_transfers.adapters.config import AppConfig, TransferNetworkLoader, default_network

EXAMPLE_CONFIG = Path(__file__).parent.parent / "config.example.toml"


def _data(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "network": {"origin_stop_id": 1, "inbound_direction_id": 6, "min_transfer_minutes": 4},
        "stations": [
            {"station_id": "a", "name": "Alpha", "offset_minutes": 0},
            {"station_id": "b", "name": "Beta", "offset_minutes": 2},
        ],
        "bus_stops": [{"key": "a-stop", "stop_id": 100}],
        "routes": [
            {"route_number": "1", "station_id": "a", "bus_stop_key": "a-stop", "travel_minutes": 9},
            {
                "route_number": "2",
                "station_id": "b",
                "bus_stop_key": "a-stop",
                "travel_minutes": 5,
                "min_transfer_minutes": 1,
            },
        ],
    }
    data.update(overrides)
    return data


def test_example_config_matches_built_in_network() -> None:
    """Given the shipped example config, when loading, then it equals the built-in network."""
    config = AppConfig(_env_file=None, config_file=str(EXAMPLE_CONFIG))

    network = TransferNetworkLoader.load(config)

    assert network == default_network()


def test_built_in_network_has_five_options_in_order() -> None:
    """Given the built-in network, then the five station/route options keep their order."""
    network = default_network()

    assert [(r.station_id, r.route_number) for r in network.routes] == [
        ("mountWaverley", "733"),
        ("syndal", "703"),
        ("syndal", "737"),
        ("glenWaverley", "742"),
        ("glenWaverley", "737"),
    ]
    assert {r.min_transfer_minutes for r in network.routes} == {3}
    assert [s.offset_minutes for s in network.stations] == [0, 3, 6]


def test_when_config_file_unset_then_uses_built_in_network() -> None:
    """Given no config file, when loading, then the built-in network is returned."""
    config = AppConfig(_env_file=None, config_file=None)

    assert TransferNetworkLoader.load(config) == default_network()


def test_when_default_config_file_missing_then_uses_built_in_network(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given the default config file is absent, when loading, then the built-in network is used."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONFIG_FILE", raising=False)
    config = AppConfig(_env_file=None)

    assert TransferNetworkLoader.load(config) == default_network()


def test_when_explicit_config_file_missing_then_raises(tmp_path: Path) -> None:
    """Given an explicitly configured file that does not exist, when loading, then it fails."""
    config = AppConfig(_env_file=None, config_file=str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        TransferNetworkLoader.load(config)


def test_when_config_file_set_via_env_and_missing_then_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given CONFIG_FILE pointing nowhere, when loading, then it fails rather than falling back."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CONFIG_FILE", "config.example.toml")
    config = AppConfig(_env_file=None)

    with pytest.raises(FileNotFoundError):
        TransferNetworkLoader.load(config)


def test_network_min_transfer_applies_unless_route_overrides() -> None:
    """Given a network-wide buffer and a route override, when loading, then both are honoured."""
    network = TransferNetworkLoader.from_dict(_data())

    assert [r.min_transfer_minutes for r in network.routes] == [4, 1]
    assert network.station("b").name == "Beta"
    assert network.bus_stops[0].stop_id == 100
    assert network.destination_name == "Destination"


def test_when_route_references_unknown_station_then_raises() -> None:
    """Given a route at an unknown station, when loading, then ValueError is raised."""
    data = _data()
    data["routes"][0]["station_id"] = "zzz"

    with pytest.raises(ValueError, match="unknown station 'zzz'"):
        TransferNetworkLoader.from_dict(data)


def test_when_route_references_unknown_bus_stop_then_raises() -> None:
    """Given a route at an unknown bus stop, when loading, then ValueError is raised."""
    data = _data()
    data["routes"][1]["bus_stop_key"] = "nowhere"

    with pytest.raises(ValueError, match="unknown bus stop 'nowhere'"):
        TransferNetworkLoader.from_dict(data)


def test_when_network_ids_missing_then_raises() -> None:
    """Given no origin stop id, when loading, then ValueError is raised."""
    with pytest.raises(ValueError, match="origin_stop_id"):
        TransferNetworkLoader.from_dict(_data(network={"inbound_direction_id": 6}))


def test_when_no_stations_then_raises() -> None:
    """Given no stations, when loading, then ValueError is raised."""
    with pytest.raises(ValueError, match="At least one station"):
        TransferNetworkLoader.from_dict(_data(stations=[], routes=[]))


def test_when_station_offset_negative_then_raises() -> None:
    """Given a negative offset, when loading, then ValueError is raised."""
    stations = [{"station_id": "a", "offset_minutes": -1}]

    with pytest.raises(ValueError, match="negative offset"):
        TransferNetworkLoader.from_dict(_data(stations=stations, routes=[]))


def test_when_route_missing_travel_time_then_raises() -> None:
    """Given a route without travel_minutes, when loading, then ValueError is raised."""
    routes = [{"route_number": "1", "station_id": "a", "bus_stop_key": "a-stop"}]

    with pytest.raises(ValueError, match="Invalid route entry"):
        TransferNetworkLoader.from_dict(_data(routes=routes))
